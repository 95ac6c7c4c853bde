"""Tests for letter decoding and sequence validation."""

import pytest

from valve_flicker.errors import EmptySequence, InvalidArgumentType, InvalidSymbol
from valve_flicker.styles.decoder import LETTER_VALUES, decode, is_valid_symbol, validate_sequence


class TestDecode:

    def test_endpoints(self):
        assert decode("a") == 0.0
        assert decode("z") == 1.0

    def test_steps_of_one_twenty_fifth(self):
        assert decode("b") == pytest.approx(1 / 25)
        assert decode("m") == pytest.approx(12 / 25)

    def test_strictly_increasing(self):
        values = [decode(chr(c)) for c in range(ord("a"), ord("z") + 1)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_table_covers_alphabet(self):
        assert len(LETTER_VALUES) == 26

    @pytest.mark.parametrize("symbol", ["A", "0", " ", "{", "é", ""])
    def test_rejects_other_characters(self, symbol):
        with pytest.raises(InvalidSymbol):
            decode(symbol)
        assert not is_valid_symbol(symbol)


class TestValidateSequence:

    def test_valid_sequence_returned(self):
        assert validate_sequence("mmamammmmammamamaaamammma") == "mmamammmmammamamaaamammma"

    def test_empty(self):
        with pytest.raises(EmptySequence):
            validate_sequence("")

    def test_reports_position_of_bad_character(self):
        with pytest.raises(InvalidSymbol) as exc_info:
            validate_sequence("abcXd")
        assert exc_info.value.symbol == "X"
        assert exc_info.value.position == 4

    def test_not_a_string(self):
        with pytest.raises(InvalidArgumentType):
            validate_sequence(["a", "b"])

    def test_errors_are_value_errors(self):
        # Callers catching ValueError keep working
        with pytest.raises(ValueError):
            validate_sequence("ab1")
