"""Tests for card stat scalars and keywords."""

import pytest

from helicarrier.models.errors import DecodeError
from helicarrier.models.scalars import BasicPower, Cost, HitPoints, Keyword, KeywordName


class TestBasicPower:
    def test_parse_integer(self) -> None:
        assert BasicPower.parse(2) == BasicPower(2)

    def test_parse_numeric_string(self) -> None:
        assert BasicPower.parse("3") == BasicPower(3)

    def test_parse_bounds(self) -> None:
        assert BasicPower.parse(0).number == 0
        assert BasicPower.parse(255).number == 255

    def test_parse_x(self) -> None:
        power = BasicPower.parse("X")

        assert power.is_x
        assert power.number is None
        assert str(power) == "X"

    def test_x_is_not_a_number(self) -> None:
        """X never equals a numeric value."""
        assert BasicPower.parse("X") != BasicPower.parse(0)

    def test_render(self) -> None:
        assert str(BasicPower(2)) == "2"

    @pytest.mark.parametrize(
        "token",
        [256, "256", -1, "-1", "x", "", "2.0", 1.5, True, None]
        + ["3\n", "12\n", "\u0663", " 3", "X\n"],
    )
    def test_parse_rejects(self, token: object) -> None:
        with pytest.raises(DecodeError) as exc_info:
            BasicPower.parse(token)

        assert exc_info.value.token == token
        assert "0 to 255" in exc_info.value.expected

    def test_decode_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            BasicPower.parse("lots")

    def test_hashable(self) -> None:
        assert len({BasicPower(1), BasicPower(1), BasicPower(None)}) == 2


class TestCost:
    def test_parse(self) -> None:
        assert Cost.parse(4) == Cost(4)
        assert Cost.parse("X").is_x

    def test_cost_is_not_basic_power(self) -> None:
        """Same number, different stat."""
        assert Cost(2) != BasicPower(2)

    def test_parse_rejects_out_of_range(self) -> None:
        with pytest.raises(DecodeError):
            Cost.parse(300)


class TestHitPoints:
    def test_parse_integer(self) -> None:
        hit_points = HitPoints.parse(10)

        assert hit_points.number == 10
        assert not hit_points.per_player
        assert str(hit_points) == "10"

    def test_parse_numeric_string(self) -> None:
        assert HitPoints.parse("5") == HitPoints(5)

    def test_parse_per_player(self) -> None:
        hit_points = HitPoints.parse("2:player:")

        assert hit_points == HitPoints(2, per_player=True)
        assert str(hit_points) == "2 per Player"

    def test_per_player_differs_from_fixed(self) -> None:
        assert HitPoints.parse("2:player:") != HitPoints.parse(2)

    @pytest.mark.parametrize(
        "token",
        [
            "X",
            "2 per Player",
            "2:players:",
            ":player:",
            "256:player:",
            -3,
            "4:player:\n",
            "4\n",
            "\u0664:player:",
        ],
    )
    def test_parse_rejects(self, token: object) -> None:
        with pytest.raises(DecodeError):
            HitPoints.parse(token)


class TestKeyword:
    def test_parse_plain_keyword(self) -> None:
        keyword = Keyword.parse("Quickstrike")

        assert keyword.name == KeywordName.QUICKSTRIKE
        assert keyword.value is None
        assert str(keyword) == "Quickstrike"

    def test_parse_parameterized_keyword(self) -> None:
        keyword = Keyword.parse("Incite 2")

        assert keyword == Keyword(KeywordName.INCITE, 2)
        assert str(keyword) == "Incite 2"

    def test_parse_hinder(self) -> None:
        assert Keyword.parse("Hinder 1") == Keyword(KeywordName.HINDER, 1)

    def test_parse_rejects_unknown_keyword(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            Keyword.parse("Retaliate")

        assert exc_info.value.token == "Retaliate"

    def test_parse_rejects_missing_value(self) -> None:
        """Incite and Hinder always carry a number."""
        with pytest.raises(DecodeError):
            Keyword.parse("Incite")

    def test_parse_rejects_value_on_plain_keyword(self) -> None:
        with pytest.raises(DecodeError):
            Keyword.parse("Stalwart 1")

    def test_parse_rejects_value_out_of_range(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            Keyword.parse("Incite 256")

        assert "Incite" in exc_info.value.expected

    @pytest.mark.parametrize("token", ["Incite 2\n", "Stalwart\n", "Hinder \u0662"])
    def test_parse_rejects_trailing_or_non_ascii(self, token: str) -> None:
        with pytest.raises(DecodeError):
            Keyword.parse(token)

    def test_parse_rejects_non_string(self) -> None:
        with pytest.raises(DecodeError):
            Keyword.parse(3)
