import pytest

from enfrendados.stats import Ranking


def test_empty_ranking_renders_notice():
    ranking = Ranking()
    text = ranking.render()
    assert "No hay estadisticas disponibles." in text
    assert text.startswith("===== TOP 4 JUGADORES =====")
    assert len(ranking) == 0


def test_entries_are_sorted_descending():
    ranking = Ranking()
    ranking.add("a", 10)
    ranking.add("b", 30)
    ranking.add("c", 20)
    assert [name for name, _ in ranking.entries()] == ["b", "c", "a"]
    scores = [score for _, score in ranking.entries()]
    assert scores == sorted(scores, reverse=True)


def test_equal_score_goes_after_existing():
    ranking = Ranking()
    ranking.add("first", 15)
    ranking.add("second", 15)
    assert ranking.entries() == [("first", 15), ("second", 15)]


def test_capacity_drops_lowest():
    ranking = Ranking()
    for name, score in [("a", 1), ("b", 2), ("c", 3), ("d", 4), ("e", 5)]:
        ranking.add(name, score)
    assert len(ranking) == 4
    assert ("a", 1) not in ranking.entries()
    assert ranking.entries()[0] == ("e", 5)


def test_full_ranking_ignores_lower_score():
    ranking = Ranking()
    for name, score in [("a", 40), ("b", 30), ("c", 20), ("d", 10)]:
        ranking.add(name, score)
    before = ranking.entries()
    ranking.add("late", 10)
    assert ranking.entries() == before


def test_custom_capacity():
    ranking = Ranking(2)
    for name, score in [("a", 1), ("b", 2), ("c", 3)]:
        ranking.add(name, score)
    assert ranking.entries() == [("c", 3), ("b", 2)]


def test_render_line_format():
    ranking = Ranking()
    ranking.add("Ana", 50)
    lines = ranking.render().splitlines()
    assert lines[1] == " 1. Ana             - 50 pts"
    assert lines[-1] == "==========================="


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Ranking(0)