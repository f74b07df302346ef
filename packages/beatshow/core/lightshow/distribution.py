"""Distribution of an event group's beat and value offsets across lights."""

from __future__ import annotations

from beatshow.core.lightshow.easing import Easing
from beatshow.core.lightshow.loose import LooseIntEnum


class DistributionType(LooseIntEnum):
    """The way a distribution value is spread across the filtered lights.

    Attributes:
        WAVE: The value is the difference between the first and last step.
        STEP: The value is the difference between each step.
    """

    WAVE = 1
    STEP = 2

    def compute_offset(
        self,
        filtered_rank: int,
        filtered_size: int,
        value: float,
        carry_over: float | None = None,
        easing: Easing | None = None,
    ) -> float:
        """Compute the offset assigned to the light at ``filtered_rank``.

        Args:
            filtered_rank: Light's rank among the filtered lights.
            filtered_size: Number of filtered lights (limit-adjusted).
            value: Distribution value. Zero always yields zero.
            carry_over: Distance already covered by earlier keyframes,
                subtracted from the wave total (wave only).
            easing: Curve applied to the wave fraction (wave only).

        Returns:
            The offset. Unknown distribution types contribute 0.0.
        """
        if value == 0.0:
            return 0.0

        if self is DistributionType.WAVE:
            modified_value = value
            if carry_over is not None:
                modified_value -= carry_over

            fraction = filtered_rank / max(filtered_size, 1)
            if easing is not None:
                fraction = easing.ease(fraction)

            return fraction * modified_value

        if self is DistributionType.STEP:
            return value * filtered_rank

        return 0.0


class TransitionType(LooseIntEnum):
    """How the state changes relative to the previous event."""

    TRANSITION = 0
    EXTEND = 1


class EventAxis(LooseIntEnum):
    """The axis a rotation or translation event affects."""

    X = 0
    Y = 1
    Z = 2
