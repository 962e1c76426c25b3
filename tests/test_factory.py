"""Tests for reversi/ai/factory.py"""

import pytest

from reversi.ai import (
    AvoidNeighboringCornersStrategy,
    GoForCornersStrategy,
    MaximumCaptureStrategy,
    MinimizeOpponentAdvantageStrategy,
    StrategyType,
    TryTwo,
    create_strategy,
    get_strategy_by_name,
    list_strategy_names,
)
from reversi.errors import ConfigurationError


class TestGetStrategyByName:

    @pytest.mark.parametrize("name,cls", [
        ("ChooseCorners", GoForCornersStrategy),
        ("MaxCapture", MaximumCaptureStrategy),
        ("AvoidNextToCorners", AvoidNeighboringCornersStrategy),
        ("MinimizeOpponent", MinimizeOpponentAdvantageStrategy),
    ])
    def test_known_names(self, name, cls):
        assert isinstance(get_strategy_by_name(name), cls)

    def test_case_insensitive(self):
        assert isinstance(get_strategy_by_name("maxcapture"), MaximumCaptureStrategy)
        assert isinstance(get_strategy_by_name("CHOOSECORNERS"), GoForCornersStrategy)

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError) as exc_info:
            get_strategy_by_name("Random")
        assert "MaxCapture" in exc_info.value.context["known"]

    def test_try_two_needs_operands(self):
        with pytest.raises(ConfigurationError):
            get_strategy_by_name("TryTwo")


class TestCreateStrategy:

    def test_single(self):
        assert isinstance(create_strategy(["MaxCapture"]), MaximumCaptureStrategy)

    def test_string_input(self):
        strategy = create_strategy("TryTwo ChooseCorners MaxCapture")
        assert isinstance(strategy, TryTwo)

    def test_try_two(self):
        strategy = create_strategy(["TryTwo", "ChooseCorners", "MaxCapture"])
        assert isinstance(strategy, TryTwo)
        assert isinstance(strategy.first, GoForCornersStrategy)
        assert isinstance(strategy.second, MaximumCaptureStrategy)

    def test_nested_try_two(self):
        strategy = create_strategy(
            ["TryTwo", "ChooseCorners", "TryTwo", "AvoidNextToCorners", "MaxCapture"]
        )
        assert isinstance(strategy.first, GoForCornersStrategy)
        assert isinstance(strategy.second, TryTwo)
        assert isinstance(strategy.second.first, AvoidNeighboringCornersStrategy)
        assert isinstance(strategy.second.second, MaximumCaptureStrategy)

    def test_nested_first_operand(self):
        strategy = create_strategy(
            ["TryTwo", "TryTwo", "ChooseCorners", "AvoidNextToCorners", "MaxCapture"]
        )
        assert isinstance(strategy.first, TryTwo)
        assert isinstance(strategy.second, MaximumCaptureStrategy)

    @pytest.mark.parametrize("tokens", [
        [],
        "",
        ["Unknown"],
        ["TryTwo"],
        ["TryTwo", "MaxCapture"],
        ["MaxCapture", "ChooseCorners"],
        ["TryTwo", "ChooseCorners", "MaxCapture", "MaxCapture"],
    ])
    def test_malformed(self, tokens):
        with pytest.raises(ConfigurationError):
            create_strategy(tokens)


def test_list_strategy_names():
    assert list_strategy_names() == [t.value for t in StrategyType]
    assert "TryTwo" in list_strategy_names()
