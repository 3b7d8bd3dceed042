from __future__ import annotations

import pytest

import config
from routes.errors import InvalidInput
from routes.level_evaluator import evaluate, level_for, percentage


def test_four_of_five_is_advanced() -> None:
    result = evaluate(["a", "b", "c", "d", "e"], ["a", "b", "c", "d", "f"])

    assert result.model_dump() == {"correct": 4, "total": 5, "percentage": 80, "level": "Advanced"}


@pytest.mark.parametrize(
    "percent, level",
    [(100, "Advanced"), (80, "Advanced"), (79, "Intermediate"), (60, "Intermediate"), (59, "Beginner"), (0, "Beginner")],
)
def test_level_boundaries(percent, level) -> None:
    assert level_for(percent) == level


def test_thresholds_are_configurable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "LEVEL_ADVANCED_THRESHOLD", 90)
    monkeypatch.setattr(config, "LEVEL_INTERMEDIATE_THRESHOLD", 50)

    assert level_for(80) == "Intermediate"
    assert level_for(50) == "Intermediate"
    assert level_for(90) == "Advanced"


def test_comparison_ignores_case_and_whitespace() -> None:
    result = evaluate([" Paris", "LONDON "], ["paris", "London"])

    assert result.correct == 2


def test_none_never_matches() -> None:
    result = evaluate([None, "x"], [None, "x"])

    assert result.correct == 1


def test_three_of_five_is_intermediate() -> None:
    result = evaluate(["a", "b", "c", "x", "y"], ["a", "b", "c", "d", "e"])

    assert (result.percentage, result.level) == (60, "Intermediate")


def test_empty_sequences_are_beginner() -> None:
    result = evaluate([], [])

    assert result.model_dump() == {"correct": 0, "total": 0, "percentage": 0, "level": "Beginner"}


@pytest.mark.parametrize(
    "answers, correct_answers",
    [
        (["a"], ["a", "b"]),
        (["a", "b"], []),
        ("ab", ["a", "b"]),
        (None, ["a"]),
        (["a"], None),
    ],
)
def test_invalid_input(answers, correct_answers) -> None:
    with pytest.raises(InvalidInput):
        evaluate(answers, correct_answers)


def test_percentage_rounds_half_up() -> None:
    assert percentage(1, 8) == 13
    assert percentage(2, 3) == 67
    assert percentage(0, 0) == 0
