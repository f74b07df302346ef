"""Behaviour shared by every event-box family (color, rotation, translation, fx).

An event box holds one or more event groups that share a beat and a light
group ID. Each event group owns a filter, a beat distribution, a value
distribution and an ordered list of event data. The per-light math lives
here once; the family modules only declare their wire fields and say which
of them make up the value axis.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple, Protocol

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from beatshow.core.lightshow.distribution import DistributionType
from beatshow.core.lightshow.easing import Easing
from beatshow.core.lightshow.filter import Filter, LimitAxis
from beatshow.core.lightshow.loose import LooseBool


class EventData(Protocol):
    """The lowest-level group event; only its beat offset matters to the engine."""

    @property
    def beat_offset(self) -> float:
        """Number of beats the event is offset from its box's beat."""
        ...


class ValueAxis(NamedTuple):
    """The value-axis distribution of an event group."""

    dist_type: DistributionType
    value: float
    easing: Easing | None
    effect_first: LooseBool


class EventGroup(BaseModel, ABC):
    """A collection of event data that share a filter and distributions.

    Abstract: subclasses declare ``data`` and their value-axis fields, and
    implement ``value_axis``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    filter: Filter = Field(default_factory=Filter, alias="f")
    beat_dist_type: DistributionType = Field(default=DistributionType.WAVE, alias="d")
    beat_dist_value: float = Field(
        default=0.0, alias="w", description="Strength of the beat distribution; zero disables it"
    )

    if TYPE_CHECKING:
        data: Sequence[EventData]

    @abstractmethod
    def value_axis(self) -> ValueAxis:
        """Return the value-axis distribution (brightness, rotation, ...)."""

    def get_filter(self) -> Filter:
        return self.filter

    def get_data(self) -> Sequence[EventData]:
        return self.data

    def _last_beat_offset(self) -> float | None:
        return self.data[-1].beat_offset if self.data else None

    def get_beat_offset(self, light_id: int, group_size: int) -> float:
        """Return the number of beats the event is delayed for a light.

        Raises:
            LightIndexError: If light_id is outside [0, group_size).
        """
        return self.beat_dist_type.compute_offset(
            self.filter.get_relative_index(light_id, group_size),
            self.filter.count_limited(group_size, LimitAxis.BEAT),
            self.beat_dist_value,
            carry_over=self._last_beat_offset(),
        )

    def get_value_offset(self, light_id: int, group_size: int) -> float:
        """Return the value (brightness, degrees, ...) offset for a light.

        Raises:
            LightIndexError: If light_id is outside [0, group_size).
        """
        axis = self.value_axis()
        return axis.dist_type.compute_offset(
            self.filter.get_relative_index(light_id, group_size),
            self.filter.count_limited(group_size, LimitAxis.VALUE),
            axis.value,
            easing=axis.easing,
        )

    def get_duration(self, group_size: int) -> float:
        """Return the duration of the group in beats.

        Uses the filtered count without the limit: the duration covers the
        whole selection. Unknown beat distribution types yield zero.
        """
        filtered_size = self.filter.count_filtered(group_size)
        last_offset = self._last_beat_offset()
        if filtered_size == 0 or last_offset is None:
            return 0.0

        if self.beat_dist_type is DistributionType.WAVE:
            limit_behaviour = self.filter.limit_behaviour
            limit_percent = self.filter.limit_percent
            if limit_behaviour is not None and not limit_behaviour.beat_enabled() and limit_percent:
                return max(self.beat_dist_value * limit_percent, last_offset)
            return max(self.beat_dist_value, last_offset)

        if self.beat_dist_type is DistributionType.STEP:
            return last_offset + self.beat_dist_value * filtered_size

        return 0.0

    def beat_offsets(self, group_size: int) -> np.ndarray:
        """Return the beat offset of every light in the group."""
        return np.fromiter(
            (self.get_beat_offset(i, group_size) for i in range(group_size)),
            dtype=np.float64,
            count=group_size,
        )

    def value_offsets(self, group_size: int) -> np.ndarray:
        """Return the value offset of every light in the group."""
        return np.fromiter(
            (self.get_value_offset(i, group_size) for i in range(group_size)),
            dtype=np.float64,
            count=group_size,
        )


class EventBox(BaseModel):
    """A collection of event groups that share a beat and light group ID.

    Subclasses declare ``groups``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    beat: float = Field(default=0.0, alias="b", description="Beat the event takes place")
    group_id: int = Field(default=0, alias="g", description="Light group the box affects")

    if TYPE_CHECKING:
        groups: Sequence[EventGroup]

    def get_beat(self) -> float:
        return self.beat

    def get_groups(self) -> Sequence[EventGroup]:
        return self.groups
