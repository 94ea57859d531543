"""The fixed ABCD rotation of muscle-group focus days.

Each split names primary, secondary and auxiliary muscle groups plus the split
that follows it. The registry is built once and passed to every component.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# Muscle group ids referenced by the default rotation
CHEST = 1
BACK = 2
SHOULDERS = 3
BICEPS = 4
TRICEPS = 5
LEGS = 6
ABS = 7
GLUTES = 8
CALVES = 9
FOREARMS = 10

MUSCLE_GROUP_NAMES: dict[int, str] = {
    CHEST: "Chest",
    BACK: "Back",
    SHOULDERS: "Shoulders",
    BICEPS: "Biceps",
    TRICEPS: "Triceps",
    LEGS: "Legs",
    ABS: "Abs",
    GLUTES: "Glutes",
    CALVES: "Calves",
    FOREARMS: "Forearms",
}


@dataclass(frozen=True)
class TrainingSplit:
    id: int
    name: str
    description: str
    primary_groups: tuple[int, ...]
    secondary_groups: tuple[int, ...]
    auxiliary_groups: tuple[int, ...]
    next_split: int

    @property
    def focus_groups(self) -> tuple[int, ...]:
        """Primary + secondary groups, used for coverage and balancing."""
        return self.primary_groups + self.secondary_groups

    @property
    def all_groups(self) -> tuple[int, ...]:
        return self.primary_groups + self.secondary_groups + self.auxiliary_groups

    def role_of(self, muscle_group_id: int) -> str:
        """Classify a muscle group as primary, secondary or auxiliary.

        Groups outside the split fall into auxiliary.
        """
        if muscle_group_id in self.primary_groups:
            return "primary"
        if muscle_group_id in self.secondary_groups:
            return "secondary"
        return "auxiliary"


class SplitRegistry:
    """Immutable ordered sequence of splits; a split's id is its index."""

    def __init__(self, splits: Iterable[TrainingSplit]):
        self._splits: tuple[TrainingSplit, ...] = tuple(splits)
        if not self._splits:
            raise ValueError("Split registry must not be empty")
        for index, split in enumerate(self._splits):
            if split.id != index:
                raise ValueError(f"Split {split.name!r} has id {split.id}, expected {index}")
            if not 0 <= split.next_split < len(self._splits):
                raise ValueError(
                    f"Split {split.name!r} points to unknown next split {split.next_split}"
                )
            if not split.focus_groups:
                raise ValueError(f"Split {split.name!r} has no primary or secondary groups")

    def __len__(self) -> int:
        return len(self._splits)

    def __iter__(self) -> Iterator[TrainingSplit]:
        return iter(self._splits)

    def __getitem__(self, index: int) -> TrainingSplit:
        return self._splits[index]

    def next_of(self, index: int) -> TrainingSplit:
        return self._splits[self._splits[index].next_split]


DEFAULT_SPLITS: tuple[TrainingSplit, ...] = (
    TrainingSplit(
        id=0,
        name="Chest & Triceps",
        description="Workout focused on chest and triceps development",
        primary_groups=(CHEST,),
        secondary_groups=(TRICEPS,),
        auxiliary_groups=(SHOULDERS, ABS),
        next_split=1,
    ),
    TrainingSplit(
        id=1,
        name="Back & Biceps",
        description="Workout for back and biceps development",
        primary_groups=(BACK,),
        secondary_groups=(BICEPS,),
        auxiliary_groups=(FOREARMS, ABS),
        next_split=2,
    ),
    TrainingSplit(
        id=2,
        name="Legs & Glutes",
        description="Complete lower-body workout",
        primary_groups=(LEGS,),
        secondary_groups=(GLUTES,),
        auxiliary_groups=(CALVES, ABS),
        next_split=3,
    ),
    TrainingSplit(
        id=3,
        name="Shoulders & Core",
        description="Workout focused on shoulders and core strength",
        primary_groups=(SHOULDERS,),
        secondary_groups=(ABS,),
        auxiliary_groups=(BICEPS, TRICEPS),
        next_split=0,  # back to the start of the rotation
    ),
)

DEFAULT_REGISTRY = SplitRegistry(DEFAULT_SPLITS)


def whole_body_split(group_ids: Iterable[int]) -> TrainingSplit:
    """Pseudo-split used when split awareness is disabled.

    Every group is auxiliary, so adherence adds a flat bonus per exercise and
    selection is driven by experience fit, goal and redundancy alone.
    """
    return TrainingSplit(
        id=-1,
        name="Full Body",
        description="Whole-body workout without a split focus",
        primary_groups=(),
        secondary_groups=(),
        auxiliary_groups=tuple(dict.fromkeys(group_ids)),
        next_split=0,
    )


def split_info(registry: SplitRegistry, index: int) -> dict:
    """Display metadata for a split, including what comes after it."""
    split = registry[index]
    following = registry.next_of(index)
    return {
        "id": split.id,
        "name": split.name,
        "description": split.description,
        "next_split_name": following.name,
        "sequence_info": (
            f"This is the next workout in your rotation. "
            f"After completing it, the recommended split is: {following.name}"
        ),
    }
