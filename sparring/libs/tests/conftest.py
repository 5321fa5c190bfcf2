import pytest


@pytest.fixture(autouse=True)
def default_rating_settings(settings):
    """Keep ratings and the solver independent of the environment tests run in."""
    settings.DEFAULT_RATING = 25.0
    settings.RATING_MODEL = "PlackettLuce"
    settings.ALLOCATION_SOLVER_TIME_LIMIT = None
    settings.ALLOCATION_SOLVER_MSG = False
