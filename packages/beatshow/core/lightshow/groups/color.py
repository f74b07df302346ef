"""Events that control the color and brightness of lights."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from beatshow.core.lightshow.distribution import DistributionType
from beatshow.core.lightshow.easing import Easing
from beatshow.core.lightshow.groups.base import EventBox, EventGroup, ValueAxis
from beatshow.core.lightshow.loose import LooseBool, LooseIntEnum


class ColorTransitionType(LooseIntEnum):
    """How a color event changes state relative to the previous event.

    Attributes:
        INSTANT: Unique to color events; same as a transition with no easing.
        TRANSITION: Blend from the previous state using the event's easing.
        EXTEND: Ignore this event's state and keep the previous one.
    """

    INSTANT = 0
    TRANSITION = 1
    EXTEND = 2


class LightColor(LooseIntEnum):
    """Which color of the map's color scheme to display."""

    PRIMARY = 0
    SECONDARY = 1
    WHITE = 2


class ColorEventData(BaseModel):
    """Determines the color of the event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    beat_offset: float = Field(default=0.0, alias="b")
    transition_type: ColorTransitionType = Field(default=ColorTransitionType.INSTANT, alias="i")
    color: LightColor = Field(default=LightColor.PRIMARY, alias="c")
    brightness: float = Field(default=1.0, alias="s", description="0 is off, 1 is normal")
    strobe_frequency: int = Field(
        default=0, alias="f", description="Strobes per beat; zero disables strobing"
    )
    # 3.3+
    strobe_brightness: float | None = Field(default=0.0, alias="sb")
    strobe_fade: LooseBool | None = Field(default=LooseBool.FALSE, alias="sf")


class ColorEventGroup(EventGroup):
    """Color event data sharing a filter and distributions."""

    bright_dist_type: DistributionType = Field(default=DistributionType.WAVE, alias="t")
    bright_dist_value: float = Field(default=0.0, alias="r")
    bright_dist_effect_first: LooseBool = Field(default=LooseBool.FALSE, alias="b")
    # 3.2+
    bright_dist_easing: Easing | None = Field(default=Easing.LINEAR, alias="i")
    data: list[ColorEventData] = Field(default_factory=lambda: [ColorEventData()], alias="e")

    def value_axis(self) -> ValueAxis:
        return ValueAxis(
            self.bright_dist_type,
            self.bright_dist_value,
            self.bright_dist_easing,
            self.bright_dist_effect_first,
        )

    def get_brightness_offset(self, light_id: int, group_size: int) -> float:
        """Return the brightness offset for a light."""
        return self.get_value_offset(light_id, group_size)


class ColorEventBox(EventBox):
    """Color event groups sharing a beat and light group."""

    groups: list[ColorEventGroup] = Field(default_factory=lambda: [ColorEventGroup()], alias="e")
