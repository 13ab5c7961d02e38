"""Access equipment tables: which lift a building height needs and what it costs.

Daily rates and rig times are regional averages for the Triangle / Piedmont
markets and apply to every location.
"""

from __future__ import annotations

import math

from estimatepro.models.enums import AccessMethod

# Daily rental rate per access method, in dollars.
EQUIPMENT_DAILY_RATES: dict[AccessMethod, float] = {
    AccessMethod.GROUND: 0.0,
    AccessMethod.SCISSOR_LIFT: 250.0,
    AccessMethod.BOOM_LIFT: 450.0,
    AccessMethod.HIGH_REACH_BOOM: 850.0,
    AccessMethod.ROPE_DESCENT: 150.0,
    AccessMethod.SCAFFOLD: 300.0,
}

# Hours to rig and move the access equipment for one drop.
RIG_HOURS_PER_DROP: dict[AccessMethod, float] = {
    AccessMethod.GROUND: 0.0,
    AccessMethod.SCISSOR_LIFT: 0.25,
    AccessMethod.BOOM_LIFT: 0.5,
    AccessMethod.HIGH_REACH_BOOM: 0.75,
    AccessMethod.ROPE_DESCENT: 1.0,
    AccessMethod.SCAFFOLD: 1.5,
}

# Height ladder: (max stories, method). Checked in order.
_ACCESS_LADDER: list[tuple[int, AccessMethod]] = [
    (1, AccessMethod.GROUND),
    (4, AccessMethod.SCISSOR_LIFT),
    (9, AccessMethod.BOOM_LIFT),
]

_ROPE_DESCENT_OPTIONAL_MAX_STORIES = 15


def access_method_for_height(
    stories: int,
    has_roof_anchors: bool = False,
) -> AccessMethod:
    """Pick the access method for a building height.

    - 1 story: ground level
    - 2-4 stories: scissor lift
    - 5-9 stories: boom lift
    - 10-15 stories: rope descent when roof anchors exist, else high-reach boom
    - above 15 stories: rope descent is required
    """
    for max_stories, method in _ACCESS_LADDER:
        if stories <= max_stories:
            return method
    if stories <= _ROPE_DESCENT_OPTIONAL_MAX_STORIES and not has_roof_anchors:
        return AccessMethod.HIGH_REACH_BOOM
    return AccessMethod.ROPE_DESCENT


def equipment_days(total_hours: float, crew_size: int, shift_length: float) -> int:
    """Whole rental days needed for the crew to work ``total_hours``."""
    crew_hours_per_day = crew_size * shift_length
    return max(1, math.ceil(total_hours / crew_hours_per_day))
