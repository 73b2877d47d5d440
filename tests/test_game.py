"""Tests for whole-game scoring and strategy dispatch."""

from __future__ import annotations

import pytest

from splitshappen.engine import Strategy, score_game, score_line
from splitshappen.exceptions import IncompleteGame, InvalidSymbol, MalformedFrame
from tests.conftest import GUTTER_GAME, PERFECT_GAME, SAMPLE_LINE, SAMPLE_TOKENS

STRATEGIES = [Strategy.FRAMES, Strategy.STREAM]


class TestScoreGame:
    def test_frames_result_detail(self):
        result = score_game(SAMPLE_LINE, Strategy.FRAMES)
        assert result.total == 167
        assert result.strategy is Strategy.FRAMES
        assert result.tokens == SAMPLE_TOKENS
        assert len(result.frames) == 10
        assert result.balls == []

    def test_stream_result_detail(self):
        result = score_game(SAMPLE_LINE, Strategy.STREAM)
        assert result.total == 167
        assert result.strategy is Strategy.STREAM
        assert len(result.balls) == 17
        assert result.tokens == []
        assert result.frames == []

    def test_strategy_by_name(self):
        assert score_game(SAMPLE_LINE, "stream").strategy is Strategy.STREAM
        assert score_game(SAMPLE_LINE, "frames").strategy is Strategy.FRAMES

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            score_game(SAMPLE_LINE, "bogus")

    def test_frames_accepts_iterable(self):
        assert score_game(iter(SAMPLE_LINE), Strategy.FRAMES).total == 167

    def test_default_is_frames(self):
        assert score_game(SAMPLE_LINE).strategy is Strategy.FRAMES


class TestScoreLine:
    @pytest.mark.parametrize("strategy", STRATEGIES)
    @pytest.mark.parametrize("line, expected", [
        (SAMPLE_LINE, 167),
        (PERFECT_GAME, 300),
        (GUTTER_GAME, 0),
    ])
    def test_both_strategies_agree(self, strategy, line, expected):
        assert score_line(line, strategy) == expected

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_incomplete(self, strategy):
        with pytest.raises(IncompleteGame):
            score_line("X" * 11, strategy)

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_invalid_symbol(self, strategy):
        with pytest.raises(InvalidSymbol):
            score_line("?" + GUTTER_GAME, strategy)


class TestStrictMode:
    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_legal_game_unchanged(self, strategy):
        assert score_line(SAMPLE_LINE, strategy, strict=True) == 167

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_trailing_symbols_rejected(self, strategy):
        assert score_line(GUTTER_GAME + "5", strategy) == 0
        with pytest.raises(MalformedFrame):
            score_line(GUTTER_GAME + "5", strategy, strict=True)

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_overfull_open_frame_rejected(self, strategy):
        assert score_line("55" + "--" * 9, strategy) == 10
        with pytest.raises(MalformedFrame):
            score_line("55" + "--" * 9, strategy, strict=True)

    def test_stray_strike_rejected_by_both(self):
        line = "7X" + "--" * 9
        with pytest.raises(MalformedFrame):
            score_line(line, Strategy.FRAMES)
        for strategy in STRATEGIES:
            with pytest.raises(MalformedFrame):
                score_line(line, strategy, strict=True)

    @pytest.mark.parametrize("strategy", STRATEGIES)
    @pytest.mark.parametrize("strict", [False, True])
    @pytest.mark.parametrize("line", [
        "X/5" + "--" * 8,
        "--" * 9 + "5//",
        "--" * 9 + "X/5",
    ])
    def test_spare_marker_in_bonus_position(self, strategy, strict, line):
        with pytest.raises(MalformedFrame):
            score_line(line, strategy, strict=strict)
