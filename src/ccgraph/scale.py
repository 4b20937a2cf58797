"""Chart scale selection and column projection.

The scale is the cost mapped onto the full width of a bar. Picking it from a
fixed step table keeps threshold markers at the same column across runs
instead of drifting with each dataset's exact maximum.
"""

from __future__ import annotations

import math
from decimal import Decimal

SCALE_STEPS: tuple[Decimal, ...] = (
    Decimal(50),
    Decimal(100),
    Decimal(200),
    Decimal(500),
)
OVERFLOW_STEP = Decimal(100)


def select_scale(max_cost: Decimal) -> Decimal:
    """Return the smallest step that fits max_cost.

    Above the last step, max_cost is rounded up to the next multiple of 100.
    """
    for step in SCALE_STEPS:
        if max_cost <= step:
            return step
    return math.ceil(max_cost / OVERFLOW_STEP) * OVERFLOW_STEP


def bar_length(cost: Decimal, scale: Decimal, width: int) -> int:
    """Return the number of filled cells for a cost.

    Rounds up so any nonzero cost fills at least one cell.
    """
    if cost <= 0 or scale <= 0:
        return 0
    return min(width, math.ceil(cost / scale * width))


def marker_column(amount: Decimal, scale: Decimal, width: int) -> int | None:
    """Return the column of a threshold marker.

    Returns None when the threshold lies beyond the scale. A threshold equal
    to the scale lands on the last column.
    """
    if scale < amount or width <= 0:
        return None
    return min(width - 1, math.floor(amount / scale * width))
