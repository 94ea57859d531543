"""Tests for the training split registry."""

import pytest

from splitgen.splits import (
    ABS,
    CHEST,
    DEFAULT_REGISTRY,
    DEFAULT_SPLITS,
    SHOULDERS,
    TRICEPS,
    SplitRegistry,
    TrainingSplit,
    split_info,
    whole_body_split,
)


def _split(split_id: int, next_split: int, **overrides) -> TrainingSplit:
    defaults = dict(
        id=split_id,
        name=f"Split {split_id}",
        description="test",
        primary_groups=(1,),
        secondary_groups=(2,),
        auxiliary_groups=(3,),
        next_split=next_split,
    )
    defaults.update(overrides)
    return TrainingSplit(**defaults)


class TestDefaultRegistry:
    def test_four_splits_in_rotation(self):
        assert len(DEFAULT_REGISTRY) == 4
        assert [s.next_split for s in DEFAULT_REGISTRY] == [1, 2, 3, 0]

    def test_chest_triceps_groups(self):
        split = DEFAULT_REGISTRY[0]
        assert split.primary_groups == (CHEST,)
        assert split.secondary_groups == (TRICEPS,)
        assert split.auxiliary_groups == (SHOULDERS, ABS)

    def test_ids_are_positional(self):
        for index, split in enumerate(DEFAULT_SPLITS):
            assert split.id == index

    def test_next_of_wraps(self):
        assert DEFAULT_REGISTRY.next_of(3).id == 0

    def test_split_is_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_REGISTRY[0].name = "other"


class TestRoleOf:
    def test_roles(self):
        split = DEFAULT_REGISTRY[0]
        assert split.role_of(CHEST) == "primary"
        assert split.role_of(TRICEPS) == "secondary"
        assert split.role_of(ABS) == "auxiliary"

    def test_unknown_group_is_auxiliary(self):
        assert DEFAULT_REGISTRY[0].role_of(999) == "auxiliary"

    def test_focus_groups(self):
        assert DEFAULT_REGISTRY[0].focus_groups == (CHEST, TRICEPS)


class TestRegistryValidation:
    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="must not be empty"):
            SplitRegistry([])

    def test_non_positional_id_rejected(self):
        with pytest.raises(ValueError, match="expected 0"):
            SplitRegistry([_split(5, 0)])

    def test_dangling_next_split_rejected(self):
        with pytest.raises(ValueError, match="unknown next split"):
            SplitRegistry([_split(0, 3)])

    def test_split_without_focus_rejected(self):
        with pytest.raises(ValueError, match="no primary or secondary"):
            SplitRegistry([_split(0, 0, primary_groups=(), secondary_groups=())])

    def test_custom_registry_injectable(self):
        registry = SplitRegistry([_split(0, 1), _split(1, 0)])
        assert registry.next_of(0).id == 1


class TestSplitInfo:
    def test_mentions_next_split(self):
        info = split_info(DEFAULT_REGISTRY, 0)
        assert info["name"] == "Chest & Triceps"
        assert info["next_split_name"] == "Back & Biceps"
        assert "Back & Biceps" in info["sequence_info"]


class TestWholeBodySplit:
    def test_all_groups_auxiliary(self):
        split = whole_body_split([1, 2, 2, 3])
        assert split.primary_groups == ()
        assert split.secondary_groups == ()
        assert split.auxiliary_groups == (1, 2, 3)
