# tests/test_progress.py

from __future__ import annotations

import pytest

from app.features.checklist.schemas import HeadingItem, TaskItem
from app.features.checklist.services import compute_progress


def _tasks(done: int, total: int) -> list:
    return [TaskItem(id=i, text=f"t{i}", completed=i < done, sequence_index=i) for i in range(total)]


def test_empty_list_is_zero_and_not_complete() -> None:
    p = compute_progress([])
    assert p.percentage == 0
    assert p.total == 0
    assert p.all_complete is False


def test_headings_are_excluded() -> None:
    items = [HeadingItem(id=1, text="Phase 1", sequence_index=0)]
    p = compute_progress(items)
    assert (p.percentage, p.total, p.all_complete) == (0, 0, False)

    items.append(TaskItem(id=2, text="t", completed=True, sequence_index=1))
    p = compute_progress(items)
    assert (p.percentage, p.completed, p.total, p.all_complete) == (100, 1, 1, True)


@pytest.mark.parametrize(
    "done,total,expected",
    [(1, 3, 33), (2, 3, 67), (1, 2, 50), (1, 8, 13), (3, 8, 38), (0, 5, 0), (5, 5, 100)],
)
def test_rounding_half_up(done: int, total: int, expected: int) -> None:
    assert compute_progress(_tasks(done, total)).percentage == expected


def test_hundred_only_when_everything_is_done() -> None:
    for total in (1, 2, 7, 199, 200, 201):
        for done in {0, 1, total - 1, total}:
            p = compute_progress(_tasks(done, total))
            assert 0 <= p.percentage <= 100
            assert (p.percentage == 100) == (done == total)
            assert p.all_complete == (done == total)
