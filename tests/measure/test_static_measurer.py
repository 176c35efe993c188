"""Tests for StaticMeasurer and TextMeasurer Protocol conformance."""

from __future__ import annotations

import pytest

from json_diagram.cache import MeasurementCache
from json_diagram.measure import StaticMeasurer
from json_diagram.protocols import Size, TextMeasurer


class _UserMeasurer:
    def measure(self, label: str, has_parent: bool) -> Size:
        return Size(1.0, 1.0)


class _WrongName:
    def size_of(self, label: str) -> Size:
        return Size(1.0, 1.0)


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


class TestProtocol:
    def test_static_measurer_conforms(self) -> None:
        assert isinstance(StaticMeasurer(), TextMeasurer)

    def test_cache_conforms(self) -> None:
        assert isinstance(MeasurementCache(StaticMeasurer()), TextMeasurer)

    def test_user_class_conforms(self) -> None:
        assert isinstance(_UserMeasurer(), TextMeasurer)

    def test_wrong_method_does_not_conform(self) -> None:
        assert not isinstance(_WrongName(), TextMeasurer)


# ---------------------------------------------------------------------------
# StaticMeasurer
# ---------------------------------------------------------------------------


class TestStaticMeasurer:
    @pytest.fixture
    def measurer(self) -> StaticMeasurer:
        return StaticMeasurer()

    def test_single_line(self, measurer: StaticMeasurer) -> None:
        assert measurer.measure("hello", False) == Size(64.0, 30.0)

    def test_connector_allowance(self, measurer: StaticMeasurer) -> None:
        assert measurer.measure("hello", True) == Size(80.0, 30.0)

    def test_widest_line_wins(self, measurer: StaticMeasurer) -> None:
        size = measurer.measure("ab\nabcdef\nabc", False)
        assert size.width == 6 * 8 + 24
        assert size.height == 3 * 18 + 12

    def test_empty_label(self, measurer: StaticMeasurer) -> None:
        assert measurer.measure("", False) == Size(24.0, 30.0)

    def test_wide_characters_take_two_cells(self, measurer: StaticMeasurer) -> None:
        assert measurer.measure("日本", False).width == 4 * 8 + 24

    def test_narrow_non_ascii(self, measurer: StaticMeasurer) -> None:
        assert measurer.measure("café", False).width == 4 * 8 + 24

    def test_returns_floats(self, measurer: StaticMeasurer) -> None:
        size = measurer.measure("x", True)
        assert type(size.width) is float
        assert type(size.height) is float

    def test_custom_metrics(self) -> None:
        measurer = StaticMeasurer(
            char_width=10.0,
            line_height=20.0,
            padding_x=0.0,
            padding_y=0.0,
            connector_width=5.0,
        )
        assert measurer.measure("abc\nd", True) == Size(35.0, 40.0)

    @pytest.mark.parametrize("kwargs", [{"char_width": 0.0}, {"line_height": -1.0}])
    def test_rejects_non_positive_metrics(self, kwargs: dict[str, float]) -> None:
        with pytest.raises(ValueError):
            StaticMeasurer(**kwargs)
