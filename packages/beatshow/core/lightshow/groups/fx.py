"""Events driving animations unique to each environment (vfx).

On the wire, fx groups do not embed their data. Group key ``l`` lists indices
into a document-level ``_fxEventsCollection._fl`` array, which may be shared
between groups. ``FxEventContainer`` resolves the indices on the way in and
rebuilds the shared array on the way out, so in memory an ``FxEventGroup``
owns its data like every other family.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from beatshow.core.lightshow.distribution import DistributionType, TransitionType
from beatshow.core.lightshow.easing import Easing
from beatshow.core.lightshow.groups.base import EventBox, EventGroup, ValueAxis
from beatshow.core.lightshow.loose import LooseBool

logger = logging.getLogger(__name__)

BOXES_KEY = "vfxEventBoxGroups"
COLLECTION_KEY = "_fxEventsCollection"
DATA_KEY = "_fl"


class FxEventData(BaseModel):
    """Determines the base value of the effect."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    beat_offset: float = Field(default=0.0, alias="b")
    transition_type: TransitionType = Field(default=TransitionType.TRANSITION, alias="p")
    easing: Easing = Field(default=Easing.NONE, alias="i")
    value: float = Field(default=1.0, alias="v")


class FxEventGroup(EventGroup):
    """Fx event data sharing a filter and distributions."""

    fx_dist_type: DistributionType = Field(default=DistributionType.WAVE, alias="t")
    fx_dist_value: float = Field(default=0.0, alias="s")
    fx_dist_effect_first: LooseBool = Field(default=LooseBool.FALSE, alias="b")
    fx_dist_easing: Easing | None = Field(default=Easing.LINEAR, alias="i")
    data: list[FxEventData] = Field(default_factory=lambda: [FxEventData()])

    @model_validator(mode="before")
    @classmethod
    def _reject_indices(cls, data: Any) -> Any:
        """Wire indices only resolve against a collection; see FxEventContainer."""
        if isinstance(data, dict) and "l" in data:
            raise ValueError("Fx group indices ('l') must be decoded through FxEventContainer")
        return data

    def value_axis(self) -> ValueAxis:
        return ValueAxis(
            self.fx_dist_type,
            self.fx_dist_value,
            self.fx_dist_easing,
            self.fx_dist_effect_first,
        )

    def get_fx_offset(self, light_id: int, group_size: int) -> float:
        """Return the effect value offset for a light."""
        return self.get_value_offset(light_id, group_size)


class FxEventBox(EventBox):
    """Fx event groups sharing a beat and light group."""

    groups: list[FxEventGroup] = Field(default_factory=lambda: [FxEventGroup()], alias="e")


def _resolve_group(raw_group: dict[str, Any], pool: list[Any]) -> dict[str, Any]:
    group = {key: value for key, value in raw_group.items() if key != "l"}
    data = []
    for index in raw_group.get("l", []):
        if not isinstance(index, int) or not 0 <= index < len(pool):
            raise ValueError(f"Missing FxEventData with id {index}")
        data.append(pool[index])
    group["data"] = data
    return group


class FxEventContainer(BaseModel):
    """All fx event boxes of a document, with the shared data array resolved."""

    model_config = ConfigDict(frozen=True)

    event_boxes: list[FxEventBox] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _resolve_indices(cls, data: Any) -> Any:
        """Accept the wire shape (boxes + shared collection) and inline the data."""
        if not isinstance(data, dict) or BOXES_KEY not in data:
            return data

        collection = data.get(COLLECTION_KEY) or {}
        pool = list(collection.get(DATA_KEY, []))

        boxes = []
        for raw_box in data[BOXES_KEY]:
            box = dict(raw_box)
            box["e"] = [_resolve_group(g, pool) for g in raw_box.get("e", [])]
            boxes.append(box)

        logger.debug("Resolved %d fx boxes against %d shared data entries", len(boxes), len(pool))
        return {"event_boxes": boxes}

    def to_wire(self, mode: str = "json") -> dict[str, Any]:
        """Return the wire shape, rebuilding the shared data array in order."""
        pool: list[dict[str, Any]] = []
        boxes: list[dict[str, Any]] = []

        for box in self.event_boxes:
            raw_groups = []
            for group in box.groups:
                raw = group.model_dump(by_alias=True, mode=mode, exclude={"data"})
                ids = []
                for entry in group.data:
                    ids.append(len(pool))
                    pool.append(entry.model_dump(by_alias=True, mode=mode))
                raw["l"] = ids
                raw_groups.append(raw)
            raw_box = box.model_dump(by_alias=True, mode=mode, exclude={"groups"})
            raw_box["e"] = raw_groups
            boxes.append(raw_box)

        return {BOXES_KEY: boxes, COLLECTION_KEY: {DATA_KEY: pool}}
