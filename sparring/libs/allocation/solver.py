import logging
import time

import pulp
from django.conf import settings

from sparring.libs.allocation.types import Assignment
from sparring.libs.errors import AllocationDecodeError, SolverError

logger = logging.getLogger(__name__)

# CBC can return binaries as 0.9999999 and friends
ASSIGNED_THRESHOLD = 0.95

ACCEPTED_SOLUTIONS = (pulp.LpSolutionOptimal, pulp.LpSolutionIntegerFeasible)


def solve(problem, time_limit=None, msg=None):
    """
    Solve a built AllocationProblem with CBC and decode the result into a
    map of participant id -> Assignment.

    With a time limit, the best integer solution found so far is accepted.
    """
    if time_limit is None:
        time_limit = settings.ALLOCATION_SOLVER_TIME_LIMIT
    if msg is None:
        msg = settings.ALLOCATION_SOLVER_MSG

    solver = pulp.PULP_CBC_CMD(msg=msg, timeLimit=time_limit)
    start = time.time()
    try:
        problem.model.solve(solver)
    except pulp.PulpSolverError as e:
        logger.error("Solver crashed on allocation problem (%s)", problem.describe())
        raise SolverError(str(e)) from e
    elapsed = time.time() - start

    status = pulp.LpStatus.get(problem.model.status, problem.model.status)
    if problem.model.sol_status not in ACCEPTED_SOLUTIONS:
        logger.error("No draw found after %.2fs, solver status %s (%s)",
                     elapsed, status, problem.describe())
        raise SolverError("Solver finished with status {}".format(status))

    if problem.model.sol_status != pulp.LpSolutionOptimal:
        logger.warning("Solver stopped at the time limit; using the best draw found")
    logger.info("Solved allocation problem in %.2fs with status %s, objective %s",
                elapsed, status, pulp.value(problem.model.objective))
    return decode(problem)


def decode(problem):
    assignments = {}
    for (participant_id, room, role), variable in problem.x.items():
        value = variable.varValue
        if value is None or value < ASSIGNED_THRESHOLD:
            continue
        if participant_id in assignments:
            raise AllocationDecodeError(
                "Participant {} was assigned as both {} and {}".format(
                    participant_id, assignments[participant_id],
                    Assignment(room, role)))
        assignments[participant_id] = Assignment(room, role)

    missing = [participant_id for participant_id in problem.participants
               if participant_id not in assignments]
    if missing:
        raise AllocationDecodeError(
            "Participants {} were not assigned anywhere".format(missing))
    return assignments
