"""Tests for strict score line validation."""

from __future__ import annotations

import pytest

from splitshappen.engine.grammar import validate_line
from splitshappen.exceptions import IncompleteGame, InvalidSymbol, MalformedFrame
from tests.conftest import ALL_NINES, ALL_SPARES, GUTTER_GAME, PERFECT_GAME, SAMPLE_LINE


class TestValidLines:
    @pytest.mark.parametrize("line", [
        SAMPLE_LINE,
        PERFECT_GAME,
        GUTTER_GAME,
        ALL_SPARES,
        ALL_NINES,
        "--" * 9 + "X5/",
        "--" * 9 + "X-/",
        "--" * 9 + "XX9",
        "--" * 9 + "X81",
        "--" * 9 + "-/X",
    ])
    def test_accepts_legal_games(self, line):
        validate_line(line)


class TestInvalidLines:
    def test_unknown_character(self):
        with pytest.raises(InvalidSymbol) as exc_info:
            validate_line("--" * 5 + "0-" + "--" * 4)
        assert exc_info.value.position == 10

    def test_spare_marker_opens_frame(self):
        with pytest.raises(MalformedFrame):
            validate_line("/5" + "--" * 9)

    def test_strike_on_second_ball(self):
        with pytest.raises(MalformedFrame) as exc_info:
            validate_line("--" + "7X" + "--" * 8)
        assert exc_info.value.index == 1

    def test_open_frame_too_many_pins(self):
        with pytest.raises(MalformedFrame, match="10 or more pins"):
            validate_line("55" + "--" * 9)

    def test_extra_symbols_after_open_tenth(self):
        with pytest.raises(MalformedFrame):
            validate_line(GUTTER_GAME + "5")

    def test_extra_symbols_after_bonus(self):
        with pytest.raises(MalformedFrame):
            validate_line(PERFECT_GAME + "X")

    @pytest.mark.parametrize("bonus", ["X/", "5X", "64", "/5"])
    def test_illegal_strike_bonus_pair(self, bonus):
        with pytest.raises(MalformedFrame):
            validate_line("--" * 9 + "X" + bonus)

    def test_spare_bonus_cannot_be_spare_marker(self):
        with pytest.raises(MalformedFrame):
            validate_line("--" * 9 + "5//")

    def test_too_few_frames(self):
        with pytest.raises(IncompleteGame) as exc_info:
            validate_line("--" * 9)
        assert exc_info.value.frames_found == 9

    def test_truncated_frame(self):
        with pytest.raises(IncompleteGame):
            validate_line("--" * 9 + "5")

    @pytest.mark.parametrize("line", ["--" * 9 + "X", "--" * 9 + "X5", "--" * 9 + "5/"])
    def test_missing_bonus_balls(self, line):
        with pytest.raises(IncompleteGame):
            validate_line(line)
