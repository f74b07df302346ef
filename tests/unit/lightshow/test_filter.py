"""Tests for light selection filters."""

from __future__ import annotations

import numpy as np
import pytest

from beatshow.core.lightshow.errors import LightIndexError
from beatshow.core.lightshow.filter import (
    Filter,
    FilterRevision,
    FilterType,
    LimitAxis,
    LimitBehaviour,
    RandomBehaviour,
)
from beatshow.core.lightshow.loose import LooseBool


def division(p1: int, p2: int, **kwargs) -> Filter:
    return Filter(filter_type=FilterType.DIVISION, parameter1=p1, parameter2=p2, **kwargs)


def step_and_offset(p1: int, p2: int, **kwargs) -> Filter:
    return Filter(filter_type=FilterType.STEP_AND_OFFSET, parameter1=p1, parameter2=p2, **kwargs)


class TestFilterDefaults:
    """Test defaults and wire parsing."""

    def test_default_selects_everything(self, group_size: int) -> None:
        """The default filter selects the whole group in order."""
        f = Filter()
        assert f.count_filtered(group_size) == group_size
        for i in range(group_size):
            assert f.is_in_filter(i, group_size)
            assert f.get_relative_index(i, group_size) == i

    def test_missing_newer_keys(self) -> None:
        """Keys added in later formats take their disabled defaults."""
        f = Filter.model_validate({"f": 1, "p": 2, "t": 1, "r": 0})
        assert f.chunks == 0
        assert f.random_behaviour is RandomBehaviour.NONE
        assert f.random_seed == 0
        assert f.limit_behaviour is LimitBehaviour.NONE
        assert f.limit_percent == 1.0

    def test_explicit_nulls(self, group_size: int) -> None:
        """Null optional keys are accepted and disable their feature."""
        f = Filter.model_validate({"c": None, "n": None, "s": None, "d": None, "l": None})
        assert f.count_filtered(group_size) == group_size
        assert f.count_limited(group_size, LimitAxis.BEAT) == group_size

    def test_wire_dump_omits_revision(self) -> None:
        """The revision is engine state, not a wire field."""
        dumped = division(2, 1).model_dump(by_alias=True, mode="json")
        assert set(dumped) == {"f", "p", "t", "r", "c", "n", "s", "d", "l"}
        assert dumped["f"] == 1
        assert dumped["p"] == 2

    def test_large_seed(self) -> None:
        """Seeds use the full 32-bit range and are kept as-is."""
        f = Filter.model_validate({"n": 2, "s": 1087373312})
        assert f.random_seed == 1087373312
        assert f.random_behaviour is RandomBehaviour.RANDOM_ELEMENTS

    def test_context_revision(self) -> None:
        """The validation context supplies the revision."""
        f = Filter.model_validate({"r": 1}, context={"filter_revision": FilterRevision.LEGACY})
        assert f.revision is FilterRevision.LEGACY

    def test_explicit_revision_wins(self) -> None:
        """An explicit revision is not overridden by the context."""
        f = Filter.model_validate(
            {"revision": "current"}, context={"filter_revision": FilterRevision.LEGACY}
        )
        assert f.revision is FilterRevision.CURRENT


class TestLightIndex:
    """Test light ID precondition checks."""

    @pytest.mark.parametrize("light_id", [-1, 12, 100])
    def test_out_of_range(self, light_id: int, group_size: int) -> None:
        """Out-of-range light IDs raise LightIndexError."""
        f = Filter()
        with pytest.raises(LightIndexError) as exc_info:
            f.is_in_filter(light_id, group_size)
        assert exc_info.value.light_id == light_id
        assert exc_info.value.group_size == group_size

        with pytest.raises(IndexError):
            f.get_relative_index(light_id, group_size)

    def test_empty_group(self) -> None:
        """No light ID is valid in an empty group."""
        with pytest.raises(LightIndexError):
            Filter().is_in_filter(0, 0)


class TestDivision:
    """Test DIVISION filters."""

    def test_second_half(self, group_size: int) -> None:
        """Division(2, 1) selects the second half."""
        f = division(2, 1)
        for i in range(group_size):
            assert f.is_in_filter(i, group_size) == (i >= 6)
        for i in range(6, group_size):
            assert f.get_relative_index(i, group_size) == i - 6
        assert f.count_filtered(group_size) == 6

    def test_sections_never_empty(self) -> None:
        """More sections than lights still selects one light per section."""
        expected_id = [0, 0, 1, 2, 2, 3, 4, 4, 5, 6, 6, 7]
        for section, expected in enumerate(expected_id):
            f = division(12, section)
            selected = [i for i in range(8) if f.is_in_filter(i, 8)]
            assert selected == [expected]
            assert f.count_filtered(8) == 1

    def test_zero_sections_treated_as_one(self, group_size: int) -> None:
        """A zero section count selects the whole group."""
        assert division(0, 0).count_filtered(group_size) == group_size

    def test_reverse_current(self, group_size: int) -> None:
        """Reversal ranks from the group size, one past the last light."""
        f = division(2, 0, reverse=LooseBool.TRUE)
        for i in range(group_size):
            assert f.is_in_filter(i, group_size) == (i >= 6)
        for i in range(6, group_size):
            assert f.get_relative_index(i, group_size) == group_size - i

    def test_reverse_aligned(self, group_size: int) -> None:
        """The aligned revision ranks the last light as 0."""
        f = division(2, 0, reverse=LooseBool.TRUE, revision=FilterRevision.ALIGNED)
        for i in range(group_size):
            assert f.is_in_filter(i, group_size) == (i >= 6)
        for i in range(6, group_size):
            assert f.get_relative_index(i, group_size) == group_size - 1 - i

    def test_reverse_legacy(self, group_size: int) -> None:
        """Format 3.0 reversal ranks without the -1."""
        f = division(2, 0, reverse=LooseBool.TRUE, revision=FilterRevision.LEGACY)
        for i in range(group_size):
            assert f.is_in_filter(i, group_size) == (i >= 6)
        for i in range(6, group_size):
            assert f.get_relative_index(i, group_size) == group_size - i


class TestStepAndOffset:
    """Test STEP_AND_OFFSET filters."""

    @pytest.mark.parametrize("offset", range(12))
    def test_offset_step_one(self, offset: int, group_size: int) -> None:
        """Step 1 selects every light from the offset."""
        f = step_and_offset(offset, 1)
        for i in range(group_size):
            assert f.is_in_filter(i, group_size) == (i >= offset)
        for i in range(offset, group_size):
            assert f.get_relative_index(i, group_size) == i - offset
        assert f.count_filtered(group_size) == group_size - offset

    def test_evens(self, group_size: int) -> None:
        """Offset 0 step 2 selects even lights."""
        f = step_and_offset(0, 2)
        for i in range(group_size):
            assert f.is_in_filter(i, group_size) == (i % 2 == 0)
        assert f.count_filtered(group_size) == 6

    def test_odds(self, group_size: int) -> None:
        """Offset 1 step 2 selects odd lights."""
        f = step_and_offset(1, 2)
        for i in range(group_size):
            assert f.is_in_filter(i, group_size) == (i % 2 == 1)
        for i in range(1, group_size, 2):
            assert f.get_relative_index(i, group_size) == i // 2
        assert f.count_filtered(group_size) == 6

    def test_zero_step_treated_as_one(self, group_size: int) -> None:
        """A zero step behaves like step 1."""
        assert step_and_offset(3, 0).count_filtered(group_size) == group_size - 3

    def test_offset_past_group(self, group_size: int) -> None:
        """An offset at the group size selects nothing."""
        f = step_and_offset(group_size, 1)
        assert f.count_filtered(group_size) == 0
        assert not any(f.is_in_filter(i, group_size) for i in range(group_size))


class TestChunks:
    """Test chunk collapsing."""

    def test_six_chunks(self, group_size: int) -> None:
        """Six chunks pair up the lights."""
        f = Filter(chunks=6)
        assert f.count_filtered(group_size) == 6
        for i in range(group_size):
            assert f.is_in_filter(i, group_size)
            assert f.get_relative_index(i, group_size) == i // 2

    def test_two_chunks(self, group_size: int) -> None:
        """Two chunks split the group in halves."""
        f = Filter(chunks=2)
        assert f.count_filtered(group_size) == 2
        assert f.get_relative_index(5, group_size) == 0
        assert f.get_relative_index(6, group_size) == 1

    def test_more_chunks_than_lights(self) -> None:
        """Chunk size never drops below one light."""
        f = Filter(chunks=20)
        assert f.count_filtered(4) == 4
        assert f.get_relative_index(3, 4) == 3

    def test_chunks_with_division(self, group_size: int) -> None:
        """Division applies to chunks, not lights."""
        f = division(2, 1, chunks=6)
        assert f.count_filtered(group_size) == 3
        assert [i for i in range(group_size) if f.is_in_filter(i, group_size)] == [
            6, 7, 8, 9, 10, 11
        ]
        assert f.get_relative_index(8, group_size) == 1

    def test_chunks_with_reverse(self, group_size: int) -> None:
        """Reversal happens before chunks are formed."""
        f = Filter(chunks=6, reverse=LooseBool.TRUE)
        for i in range(group_size):
            assert f.get_relative_index(i, group_size) == (group_size - i) // 2

    def test_aligned_chunks_with_reverse(self, group_size: int) -> None:
        """The aligned revision keeps reversed chunk pairs together."""
        f = Filter(chunks=6, reverse=LooseBool.TRUE, revision=FilterRevision.ALIGNED)
        for i in range(group_size):
            assert f.get_relative_index(i, group_size) == (group_size - 1 - i) // 2
        assert f.count_filtered(group_size) == 6

    def test_legacy_ignores_chunks(self, group_size: int) -> None:
        """Format 3.0 filters have no chunking."""
        f = Filter(chunks=6, revision=FilterRevision.LEGACY)
        assert f.count_filtered(group_size) == group_size
        assert f.get_relative_index(5, group_size) == 5


class TestUnknownFilterType:
    """Unknown filter types degrade to stable placeholders."""

    def test_selects_everything(self, group_size: int) -> None:
        """Every light is selected and counted."""
        f = Filter.model_validate({"f": 9})
        assert not f.filter_type.is_known
        assert all(f.is_in_filter(i, group_size) for i in range(group_size))
        assert f.count_filtered(group_size) == group_size

    def test_rank_is_group_size(self, group_size: int) -> None:
        """Every light ranks as the group size."""
        f = Filter.model_validate({"f": 9})
        assert {f.get_relative_index(i, group_size) for i in range(group_size)} == {group_size}


class TestLimit:
    """Test limit-adjusted counts."""

    def test_beat_only(self, group_size: int) -> None:
        """DURATION limits only the beat axis."""
        f = Filter(limit_behaviour=LimitBehaviour.DURATION, limit_percent=0.5)
        assert f.count_limited(group_size, LimitAxis.BEAT) == 6
        assert f.count_limited(group_size, LimitAxis.VALUE) == group_size

    def test_value_only(self, group_size: int) -> None:
        """DISTRIBUTION limits only the value axis."""
        f = Filter(limit_behaviour=LimitBehaviour.DISTRIBUTION, limit_percent=0.5)
        assert f.count_limited(group_size, LimitAxis.BEAT) == group_size
        assert f.count_limited(group_size, LimitAxis.VALUE) == 6

    def test_both(self, group_size: int) -> None:
        """BOTH limits both axes."""
        f = Filter(limit_behaviour=LimitBehaviour.BOTH, limit_percent=0.25)
        assert f.count_limited(group_size, LimitAxis.BEAT) == 3
        assert f.count_limited(group_size, LimitAxis.VALUE) == 3

    def test_truncates_and_floors_at_one(self, group_size: int) -> None:
        """The scaled count is truncated and never below one."""
        assert Filter(limit_behaviour=LimitBehaviour.BOTH, limit_percent=0.3).count_limited(
            group_size, LimitAxis.BEAT
        ) == 3
        assert Filter(limit_behaviour=LimitBehaviour.BOTH, limit_percent=0.01).count_limited(
            group_size, LimitAxis.BEAT
        ) == 1

    def test_zero_percent_disables(self, group_size: int) -> None:
        """A zero percent leaves the count alone."""
        f = Filter(limit_behaviour=LimitBehaviour.BOTH, limit_percent=0.0)
        assert f.count_limited(group_size, LimitAxis.VALUE) == group_size

    def test_limit_does_not_change_selection(self, group_size: int) -> None:
        """Limiting shrinks the count, not the selected lights."""
        f = Filter(limit_behaviour=LimitBehaviour.BOTH, limit_percent=0.5)
        assert all(f.is_in_filter(i, group_size) for i in range(group_size))
        assert f.count_filtered(group_size) == group_size

    def test_limit_enabled(self) -> None:
        """Axis enablement follows the behaviour flags."""
        assert Filter(limit_behaviour=LimitBehaviour.BEAT).limit_enabled(LimitAxis.BEAT)
        assert not Filter(limit_behaviour=LimitBehaviour.BEAT).limit_enabled(LimitAxis.VALUE)
        assert not Filter(limit_behaviour=None).limit_enabled(LimitAxis.BEAT)
        assert not Filter(limit_behaviour=LimitBehaviour(8)).limit_enabled(LimitAxis.VALUE)


class TestVectorised:
    """Test the numpy conveniences."""

    def test_selection_mask(self, group_size: int) -> None:
        """The mask marks selected lights."""
        mask = division(2, 1).selection_mask(group_size)
        assert mask.dtype == np.bool_
        assert mask.tolist() == [False] * 6 + [True] * 6

    def test_relative_indices(self, group_size: int) -> None:
        """Ranks line up with the mask."""
        f = step_and_offset(0, 2)
        ranks = f.relative_indices(group_size)
        mask = f.selection_mask(group_size)
        assert ranks[mask].tolist() == [0, 1, 2, 3, 4, 5]
