"""Events that control the rotation of lights."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from beatshow.core.lightshow.distribution import DistributionType, EventAxis, TransitionType
from beatshow.core.lightshow.easing import Easing
from beatshow.core.lightshow.groups.base import EventBox, EventGroup, ValueAxis
from beatshow.core.lightshow.loose import LooseBool, LooseIntEnum


class RotationDirection(LooseIntEnum):
    """Direction of a rotation; AUTOMATIC takes the shortest path."""

    AUTOMATIC = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


class RotationEventData(BaseModel):
    """Determines the base rotation of the event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    beat_offset: float = Field(default=0.0, alias="b")
    transition_type: TransitionType = Field(default=TransitionType.TRANSITION, alias="p")
    easing: Easing = Field(default=Easing.NONE, alias="e")
    degrees: float = Field(default=0.0, alias="r")
    direction: RotationDirection = Field(default=RotationDirection.AUTOMATIC, alias="o")
    loops: int = Field(default=0, alias="l", description="Extra full turns in the direction")


class RotationEventGroup(EventGroup):
    """Rotation event data sharing an axis, filter and distributions."""

    rotation_dist_type: DistributionType = Field(default=DistributionType.WAVE, alias="t")
    rotation_dist_value: float = Field(default=0.0, alias="s")
    rotation_dist_effect_first: LooseBool = Field(default=LooseBool.TRUE, alias="b")
    # 3.2+
    rotation_dist_easing: Easing | None = Field(default=Easing.LINEAR, alias="i")
    axis: EventAxis = Field(default=EventAxis.X, alias="a")
    invert_axis: LooseBool = Field(default=LooseBool.FALSE, alias="r")
    data: list[RotationEventData] = Field(
        default_factory=lambda: [RotationEventData()], alias="l"
    )

    def value_axis(self) -> ValueAxis:
        return ValueAxis(
            self.rotation_dist_type,
            self.rotation_dist_value,
            self.rotation_dist_easing,
            self.rotation_dist_effect_first,
        )

    def get_rotation_offset(self, light_id: int, group_size: int) -> float:
        """Return the number of degrees a light's rotation is offset by."""
        return self.get_value_offset(light_id, group_size)


class RotationEventBox(EventBox):
    """Rotation event groups sharing a beat and light group."""

    groups: list[RotationEventGroup] = Field(
        default_factory=lambda: [RotationEventGroup()], alias="e"
    )
