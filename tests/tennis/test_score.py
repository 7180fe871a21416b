"""Unit tests for src/tennis/score.py"""

from itertools import product

import pytest

from src.core.shared_types import GameStatus, Side
from src.tennis.score import (
    SCORE_LABELS,
    Advantage,
    Deuce,
    InProgress,
    ScoreLabel,
    Won,
    classify,
    render_state,
    score_label,
)

NAMES = {Side.A: "P1", Side.B: "P2"}


@pytest.mark.parametrize(
    "points, label",
    [(0, ScoreLabel.LOVE), (1, ScoreLabel.FIFTEEN), (2, ScoreLabel.THIRTY), (3, ScoreLabel.FORTY), (7, ScoreLabel.FORTY)],
)
def test_score_label_is_capped_at_forty(points: int, label: ScoreLabel) -> None:
    assert score_label(points) == label


def test_labels_are_ordered() -> None:
    assert [str(label) for label in SCORE_LABELS] == ["love", "15", "30", "40"]


@pytest.mark.parametrize(
    "points, expected",
    [
        ((0, 0), InProgress(ScoreLabel.LOVE, ScoreLabel.LOVE)),
        ((2, 1), InProgress(ScoreLabel.THIRTY, ScoreLabel.FIFTEEN)),
        ((3, 2), InProgress(ScoreLabel.FORTY, ScoreLabel.THIRTY)),
        ((3, 0), InProgress(ScoreLabel.FORTY, ScoreLabel.LOVE)),
        ((3, 3), Deuce()),
        ((6, 6), Deuce()),
        ((4, 3), Advantage(Side.A)),
        ((7, 8), Advantage(Side.B)),
        ((4, 0), Won(Side.A)),
        ((4, 2), Won(Side.A)),
        ((1, 4), Won(Side.B)),
        ((5, 3), Won(Side.A)),
        ((8, 10), Won(Side.B)),
    ],
)
def test_classify(points: tuple[int, int], expected: object) -> None:
    assert classify(*points) == expected


def test_forty_fifteen_is_not_a_win() -> None:
    """A lead of two is not enough below four points."""
    assert classify(3, 1) == InProgress(ScoreLabel.FORTY, ScoreLabel.FIFTEEN)


@pytest.mark.parametrize("points_a, points_b", list(product(range(12), repeat=2)))
def test_classification_is_a_partition(points_a: int, points_b: int) -> None:
    """Every pair of counts lands in exactly one of the four states, matching the rules."""
    state = classify(points_a, points_b)
    won = max(points_a, points_b) >= 4 and abs(points_a - points_b) >= 2
    both_forty = points_a >= 3 and points_b >= 3

    matches = [
        isinstance(state, Won) == won,
        isinstance(state, Deuce) == (not won and both_forty and points_a == points_b),
        isinstance(state, Advantage) == (not won and both_forty and points_a != points_b),
        isinstance(state, InProgress) == (not won and not both_forty),
    ]
    assert all(matches)


def test_classify_rejects_negative_counts() -> None:
    with pytest.raises(ValueError):
        classify(-1, 0)


def test_state_kinds() -> None:
    assert classify(0, 0).kind == GameStatus.IN_PROGRESS
    assert classify(3, 3).kind == GameStatus.DEUCE
    assert classify(3, 4).kind == GameStatus.ADVANTAGE
    assert classify(0, 4).kind == GameStatus.WON


@pytest.mark.parametrize(
    "state, text",
    [
        (InProgress(ScoreLabel.LOVE, ScoreLabel.LOVE), "love–love"),
        (InProgress(ScoreLabel.THIRTY, ScoreLabel.FIFTEEN), "30–15"),
        (Deuce(), "Deuce"),
        (Advantage(Side.B), "Advantage P2"),
        (Won(Side.A), "P1 wins"),
    ],
)
def test_render_state(state: object, text: str) -> None:
    assert render_state(state, NAMES) == text


def test_render_unknown_state() -> None:
    with pytest.raises(TypeError):
        render_state("deuce", NAMES)
