import os
import sys
import traceback

import sentry_sdk


def emit_current_exception():
    if os.environ.get("DEBUG") in ["1", 1, True, "true"]:
        traceback.print_exc(file=sys.stdout)
    else:
        sentry_sdk.capture_exception()


class CapacityError(Exception):
    """
    Raised before the solver is invoked when the signups cannot form a
    single valid British Parliamentary room. The message is meant for the
    person running the spar.
    """

    default_msg = "Could not generate a draw for these signups"

    def __init__(self, reason=None):
        super(CapacityError, self).__init__()
        if reason is not None:
            self.msg = reason
        else:
            self.msg = self.default_msg

    def __str__(self):
        return self.msg


class NotEnoughSpeakersError(CapacityError):
    default_msg = ("Too few speakers for a British Parliamentary spar "
                   "(need at least 4)")


class NotEnoughJudgesError(CapacityError):
    default_msg = ("Too few people willing to judge for a British "
                   "Parliamentary spar (need at least 1 judge per 8 speakers)")


class SolverError(Exception):
    pass


class AllocationDecodeError(Exception):
    pass


class InvalidDrawError(Exception):
    def __init__(self, violations):
        super(InvalidDrawError, self).__init__()
        self.violations = list(violations)

    def __str__(self):
        return "Invalid draw: " + "; ".join(self.violations)


class TiedBallotError(Exception):
    def __init__(self, roles):
        super(TiedBallotError, self).__init__()
        self.roles = roles
        self.msg = "{} and {} have the same sum of speaks".format(
            roles[0].label, roles[1].label)

    def __str__(self):
        return self.msg


class DrawNotReadyError(Exception):
    def __init__(self):
        super(DrawNotReadyError, self).__init__()
        self.msg = "This draft draw is still being generated."

    def __str__(self):
        return self.msg


class DrawReleasedError(Exception):
    def __init__(self):
        super(DrawReleasedError, self).__init__()
        self.msg = "The draw for this spar has been released and can no longer be replaced."

    def __str__(self):
        return self.msg


class DrawGenerationFailedError(Exception):
    def __init__(self, reason):
        super(DrawGenerationFailedError, self).__init__()
        self.msg = "Generating this draft draw failed: {}".format(reason)

    def __str__(self):
        return self.msg
