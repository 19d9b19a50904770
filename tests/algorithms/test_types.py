from fractions import Fraction

import pytest

from lazyspf.algorithms.types import PathSummary, SearchStats
from lazyspf.graph import Arc


def test_search_stats_defaults_and_to_dict():
    stats = SearchStats()
    assert stats.to_dict() == {
        "extracted": 0,
        "relaxed": 0,
        "inserted": 0,
        "decreased": 0,
    }
    stats.extracted += 2
    assert stats.to_dict()["extracted"] == 2


def test_path_summary_is_frozen():
    summary = PathSummary(edges=[], vertices=["A"], cost=0, stats=SearchStats())
    with pytest.raises(AttributeError):
        summary.cost = 5  # type: ignore[misc]


def test_path_summary_goal_and_to_dict():
    summary = PathSummary(
        edges=[Arc((0, 0), (0, 1), 1)],
        vertices=[(0, 0), (0, 1)],
        cost=Fraction(3, 2),
        stats=SearchStats(extracted=2, relaxed=4, inserted=3, decreased=0),
    )
    assert summary.goal == (0, 1)
    data = summary.to_dict()
    assert data["edges"] == [[[0, 0], [0, 1], 1]]
    assert data["vertices"] == [[0, 0], [0, 1]]
    assert data["cost"] == 1.5
    assert data["stats"]["relaxed"] == 4
