"""Tests for the exercise catalog."""

import pytest

from splitgen.catalog import ExerciseCatalog
from splitgen.models import Exercise

from conftest import FIXTURE_EXERCISES


def test_catalog_size(catalog):
    assert len(catalog) == 20
    assert catalog.ids == tuple(range(1, 21))


def test_get_known_and_unknown(catalog):
    assert catalog.get(1).name == "Bench Press"
    assert catalog.get(999) is None
    assert 7 in catalog
    assert 999 not in catalog


def test_duplicate_ids_rejected():
    dup = Exercise(1, "Copy", 1, "Chest", "easy", False)
    with pytest.raises(ValueError, match="Duplicate exercise id"):
        ExerciseCatalog(FIXTURE_EXERCISES + (dup,))


def test_resolve_skips_unknown(catalog):
    resolved, missing = catalog.resolve([1, 999, 7, -3])
    assert [ex.id for ex in resolved] == [1, 7]
    assert missing == 2


def test_in_groups_keeps_catalog_order(catalog):
    ids = [ex.id for ex in catalog.in_groups([7, 1])]
    assert ids == [1, 2, 3, 19, 20]


def test_muscle_groups_first_seen(catalog):
    groups = catalog.muscle_groups()
    assert [g.id for g in groups] == [1, 2, 3, 4, 5, 6, 7]
    assert groups[-1].name == "Core"

