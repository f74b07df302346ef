"""Light selection filters.

A filter decides which lights of a group take part in an event group, how
many take part, and each selected light's rank within the selection. The
rank and count feed the distribution math in ``distribution.py``.

Integer arithmetic here truncates toward zero (see ``beatshow.core.utils.math``),
matching the map format for negative parameters.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator

from beatshow.core.lightshow.errors import LightIndexError
from beatshow.core.lightshow.loose import LooseBool, LooseIntEnum
from beatshow.core.utils.math import trunc_div, trunc_rem, trunc_to_int


class FilterType(LooseIntEnum):
    """Controls how ``parameter1`` and ``parameter2`` are used.

    Attributes:
        DIVISION: Splits the group into ``parameter1`` equal sections and
            selects section ``parameter2`` (0-based).
        STEP_AND_OFFSET: Selects light ``parameter1``, then every
            ``parameter2``-th light after it.
    """

    DIVISION = 1
    STEP_AND_OFFSET = 2


class RandomBehaviour(LooseIntEnum):
    """Randomised light ordering. Stored and round-tripped only."""

    NONE = 0
    KEEP_ORDER = 1
    RANDOM_ELEMENTS = 2


class LimitBehaviour(LooseIntEnum):
    """Which distribution axes ``limit_percent`` shrinks.

    ``DURATION``/``BEAT`` and ``DISTRIBUTION``/``VALUE`` are aliases of the
    same wire values.
    """

    NONE = 0
    DURATION = 1
    DISTRIBUTION = 2
    BOTH = 3

    BEAT = 1
    VALUE = 2

    def beat_enabled(self) -> bool:
        """True if the limit applies to the beat distribution."""
        return self in (LimitBehaviour.DURATION, LimitBehaviour.BOTH)

    def value_enabled(self) -> bool:
        """True if the limit applies to the value distribution."""
        return self in (LimitBehaviour.DISTRIBUTION, LimitBehaviour.BOTH)


class LimitAxis(str, Enum):
    """Distribution axis a limit-adjusted count is requested for."""

    BEAT = "beat"
    VALUE = "value"


class FilterRevision(str, Enum):
    """Which definition of reversal and chunking a filter follows.

    Attributes:
        LEGACY: Format 3.0. No chunking; ``get_relative_index`` reverses as
            ``group_size - light_id``.
        CURRENT: Format 3.1 and later. Chunking applies everywhere;
            ``get_relative_index`` still reverses as ``group_size - light_id``.
        ALIGNED: Opt-in. Chunking as in CURRENT, and ``get_relative_index``
            reverses as ``group_size - light_id - 1`` like ``is_in_filter``.
            Never selected from a document version.
    """

    LEGACY = "legacy"
    CURRENT = "current"
    ALIGNED = "aligned"


class Filter(BaseModel):
    """Controls which light IDs are affected by an event group.

    Fields added in format 3.1 (``chunks`` onwards) default to their disabled
    values when absent, so older documents evaluate identically.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    filter_type: FilterType = Field(default=FilterType.DIVISION, alias="f")
    parameter1: int = Field(default=1, alias="p", description="Dependent on filter_type")
    parameter2: int = Field(default=0, alias="t", description="Dependent on filter_type")
    reverse: LooseBool = Field(
        default=LooseBool.FALSE, alias="r", description="Start at the end of the group"
    )
    chunks: int | None = Field(
        default=0, alias="c", description="Number of chunks that each act as one light"
    )
    random_behaviour: RandomBehaviour | None = Field(default=RandomBehaviour.NONE, alias="n")
    random_seed: int | None = Field(default=0, alias="s")
    limit_behaviour: LimitBehaviour | None = Field(default=LimitBehaviour.NONE, alias="d")
    limit_percent: float | None = Field(
        default=1.0, alias="l", description="Fraction of the filtered lights considered effective"
    )

    revision: FilterRevision = Field(default=FilterRevision.CURRENT, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _apply_context_revision(cls, data: Any, info: ValidationInfo) -> Any:
        """Take the revision from the validation context when not given explicitly."""
        if isinstance(data, dict) and "revision" not in data and info.context:
            revision = info.context.get("filter_revision")
            if revision is not None:
                return {**data, "revision": revision}
        return data

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _chunk_size(self, group_size: int) -> int | None:
        """Lights per chunk, or None when chunking does not apply."""
        if self.revision is FilterRevision.LEGACY:
            return None
        if self.chunks is None or self.chunks <= 0:
            return None
        return max(trunc_div(group_size, self.chunks), 1)

    def _division_bounds(self, group_size: int) -> tuple[int, int]:
        sections = max(self.parameter1, 1)
        start = trunc_div(self.parameter2 * group_size, sections)
        end = trunc_div((self.parameter2 + 1) * group_size, sections)
        return start, max(end, start + 1)

    @staticmethod
    def _check_light_id(light_id: int, group_size: int) -> None:
        if light_id < 0 or light_id >= group_size:
            raise LightIndexError(light_id, group_size)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def is_in_filter(self, light_id: int, group_size: int) -> bool:
        """Return True if the light is selected by this filter.

        Unknown filter types select every light.

        Raises:
            LightIndexError: If light_id is outside [0, group_size).
        """
        self._check_light_id(light_id, group_size)

        if self.reverse.as_bool():
            light_id = group_size - light_id - 1

        chunk_size = self._chunk_size(group_size)
        if chunk_size is not None:
            light_id = trunc_div(light_id, chunk_size)
            group_size = trunc_div(group_size, chunk_size)

        if self.filter_type is FilterType.DIVISION:
            start, end = self._division_bounds(group_size)
            return start <= light_id < end
        if self.filter_type is FilterType.STEP_AND_OFFSET:
            offset_light_id = light_id - self.parameter1
            return offset_light_id >= 0 and trunc_rem(offset_light_id, max(self.parameter2, 1)) == 0
        return True

    def count_filtered(self, group_size: int) -> int:
        """Return the number of lights (or chunks) selected, ignoring the limit.

        Unknown filter types report the whole group.
        """
        chunk_size = self._chunk_size(group_size)
        if chunk_size is not None:
            group_size = trunc_div(group_size, chunk_size)

        if self.filter_type is FilterType.DIVISION:
            start, end = self._division_bounds(group_size)
            return end - start
        if self.filter_type is FilterType.STEP_AND_OFFSET:
            step = max(self.parameter2, 1)
            return trunc_div(group_size, step) - trunc_div(self.parameter1, step)
        return group_size

    def get_relative_index(self, light_id: int, group_size: int) -> int:
        """Return the light's 0-based rank among the selected lights.

        Unknown filter types return ``group_size``, a stable placeholder kept
        for compatibility.

        Raises:
            LightIndexError: If light_id is outside [0, group_size).
        """
        self._check_light_id(light_id, group_size)

        if self.reverse.as_bool():
            light_id = group_size - light_id
            if self.revision is FilterRevision.ALIGNED:
                light_id -= 1

        chunk_size = self._chunk_size(group_size)
        if chunk_size is not None:
            light_id = trunc_div(light_id, chunk_size)
            group_size = trunc_div(group_size, chunk_size)

        if self.filter_type is FilterType.DIVISION:
            start, _ = self._division_bounds(group_size)
            return light_id - start
        if self.filter_type is FilterType.STEP_AND_OFFSET:
            return trunc_div(light_id - self.parameter1, max(self.parameter2, 1))
        return group_size

    def limit_enabled(self, axis: LimitAxis) -> bool:
        """True if ``limit_percent`` shrinks the count used for ``axis``."""
        if self.limit_behaviour is None:
            return False
        if axis is LimitAxis.BEAT:
            return self.limit_behaviour.beat_enabled()
        return self.limit_behaviour.value_enabled()

    def count_limited(self, group_size: int, axis: LimitAxis) -> int:
        """Return the filtered count used by the distribution on ``axis``.

        When the limit applies to the axis, the count is scaled by
        ``limit_percent`` (truncated, never below 1). Which lights are
        selected is unaffected.
        """
        count = self.count_filtered(group_size)
        if self.limit_enabled(axis) and self.limit_percent:
            return max(trunc_to_int(count * self.limit_percent), 1)
        return count

    def selection_mask(self, group_size: int) -> np.ndarray:
        """Return a boolean array marking which lights of the group are selected."""
        return np.fromiter(
            (self.is_in_filter(i, group_size) for i in range(group_size)),
            dtype=bool,
            count=group_size,
        )

    def relative_indices(self, group_size: int) -> np.ndarray:
        """Return every light's rank; meaningful only where ``selection_mask`` is True."""
        return np.fromiter(
            (self.get_relative_index(i, group_size) for i in range(group_size)),
            dtype=np.int64,
            count=group_size,
        )
