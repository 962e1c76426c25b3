"""Tests for reversi/ai/heuristic_weights.py"""

import pytest
from pydantic import ValidationError

from reversi.ai.heuristic_weights import (
    DEFAULT_LOOKAHEAD_WEIGHTS,
    LOOKAHEAD_WEIGHTS_ENV,
    LookaheadWeights,
    get_lookahead_weights,
)
from reversi.errors import ConfigurationError


def test_defaults():
    assert DEFAULT_LOOKAHEAD_WEIGHTS.corner == 3
    assert DEFAULT_LOOKAHEAD_WEIGHTS.avoid_corner == 2
    assert DEFAULT_LOOKAHEAD_WEIGHTS.multi_capture == 1


def test_negative_weight_rejected():
    with pytest.raises(ValidationError):
        LookaheadWeights(corner=-1)


class TestEnvironmentOverride:

    def test_unset_returns_defaults(self, monkeypatch):
        monkeypatch.delenv(LOOKAHEAD_WEIGHTS_ENV, raising=False)
        assert get_lookahead_weights() is DEFAULT_LOOKAHEAD_WEIGHTS

    def test_partial_override(self, monkeypatch):
        monkeypatch.setenv(LOOKAHEAD_WEIGHTS_ENV, '{"corner": 5, "multi_capture": 0}')
        weights = get_lookahead_weights()
        assert weights == LookaheadWeights(corner=5, avoid_corner=2, multi_capture=0)

    @pytest.mark.parametrize("raw", [
        "not json",
        "[1, 2]",
        '{"edges": 4}',
        '{"corner": -3}',
    ])
    def test_invalid_override(self, monkeypatch, raw):
        monkeypatch.setenv(LOOKAHEAD_WEIGHTS_ENV, raw)
        with pytest.raises(ConfigurationError) as exc_info:
            get_lookahead_weights()
        assert exc_info.value.context["value"] == raw
