from sparring.libs.allocation.types import Assignment, Role, Room, Signup
from sparring.libs.allocation.problem import (
    AllocationWeights,
    DEFAULT_WEIGHTS,
    build_problem,
    max_rooms,
)
from sparring.libs.allocation.solver import solve
from sparring.libs.allocation.rooms import (
    reconstruct_rooms,
    rooms_from_json,
    rooms_to_json,
)
from sparring.libs.allocation.checks import draw_violations, validate_draw
