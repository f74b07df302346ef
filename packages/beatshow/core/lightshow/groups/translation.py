"""Events that control the translation (position) of lights."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from beatshow.core.lightshow.distribution import DistributionType, EventAxis, TransitionType
from beatshow.core.lightshow.easing import Easing
from beatshow.core.lightshow.groups.base import EventBox, EventGroup, ValueAxis
from beatshow.core.lightshow.loose import LooseBool


class TranslationEventData(BaseModel):
    """Determines the base position of the event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    beat_offset: float = Field(default=0.0, alias="b")
    transition_type: TransitionType = Field(default=TransitionType.TRANSITION, alias="p")
    easing: Easing = Field(default=Easing.NONE, alias="e")
    value: float = Field(default=0.0, alias="t", description="Units to offset objects by")


class TranslationEventGroup(EventGroup):
    """Translation event data sharing an axis, filter and distributions."""

    translation_dist_type: DistributionType = Field(default=DistributionType.WAVE, alias="t")
    translation_dist_value: float = Field(default=0.0, alias="s")
    translation_dist_effect_first: LooseBool = Field(default=LooseBool.FALSE, alias="b")
    translation_dist_easing: Easing = Field(default=Easing.LINEAR, alias="i")
    axis: EventAxis = Field(default=EventAxis.X, alias="a")
    invert_axis: LooseBool = Field(default=LooseBool.FALSE, alias="r")
    data: list[TranslationEventData] = Field(
        default_factory=lambda: [TranslationEventData()], alias="l"
    )

    def value_axis(self) -> ValueAxis:
        return ValueAxis(
            self.translation_dist_type,
            self.translation_dist_value,
            self.translation_dist_easing,
            self.translation_dist_effect_first,
        )

    def get_translation_offset(self, light_id: int, group_size: int) -> float:
        """Return the number of units a light's position is offset by."""
        return self.get_value_offset(light_id, group_size)


class TranslationEventBox(EventBox):
    """Translation event groups sharing a beat and light group."""

    groups: list[TranslationEventGroup] = Field(
        default_factory=lambda: [TranslationEventGroup()], alias="e"
    )
