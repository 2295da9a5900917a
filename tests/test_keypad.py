# Directory: tests/
# Filename: test_keypad.py

#############################################################
##
## This test file is designed to systematically cover every function
## in controllers/keypad.py.
##
## Run this test with the following command:
## pytest tests/test_keypad.py --cov=controllers.keypad --cov-report term-missing
##
#############################################################

import pytest

from controllers.keypad import (
    DIRECTIONAL_KEYPAD,
    NUMERIC_KEYPAD,
    InvalidKeyError,
    Keypad,
    KeypadLayoutError,
)


class TestNumericKeypad:

    def test_positions(self):
        assert NUMERIC_KEYPAD.position_of('7') == (0, 0)
        assert NUMERIC_KEYPAD.position_of('5') == (1, 1)
        assert NUMERIC_KEYPAD.position_of('0') == (3, 1)
        assert NUMERIC_KEYPAD.position_of('A') == (3, 2)

    def test_gap_is_bottom_left(self):
        assert NUMERIC_KEYPAD.gap == (3, 0)
        assert NUMERIC_KEYPAD.is_gap(3, 0)
        assert not NUMERIC_KEYPAD.is_gap(3, 1)

    def test_keys_in_reading_order(self):
        assert NUMERIC_KEYPAD.keys == ('7', '8', '9', '4', '5', '6', '1', '2', '3', '0', 'A')

    def test_key_at(self):
        assert NUMERIC_KEYPAD.key_at(2, 0) == '1'
        assert NUMERIC_KEYPAD.key_at(3, 0) is None  # gap
        assert NUMERIC_KEYPAD.key_at(4, 1) is None  # off the keypad
        assert NUMERIC_KEYPAD.key_at(0, -1) is None

    def test_unknown_key_is_rejected(self):
        with pytest.raises(InvalidKeyError, match="'B' is not on the Numeric keypad"):
            NUMERIC_KEYPAD.position_of('B')
        with pytest.raises(InvalidKeyError):
            NUMERIC_KEYPAD.position_of('^')

    def test_unhashable_key_is_rejected(self):
        with pytest.raises(InvalidKeyError):
            NUMERIC_KEYPAD.position_of(['1'])

    def test_contains(self):
        assert '9' in NUMERIC_KEYPAD
        assert '<' not in NUMERIC_KEYPAD


class TestDirectionalKeypad:

    def test_positions(self):
        assert DIRECTIONAL_KEYPAD.position_of('^') == (0, 1)
        assert DIRECTIONAL_KEYPAD.position_of('A') == (0, 2)
        assert DIRECTIONAL_KEYPAD.position_of('<') == (1, 0)
        assert DIRECTIONAL_KEYPAD.position_of('v') == (1, 1)
        assert DIRECTIONAL_KEYPAD.position_of('>') == (1, 2)

    def test_gap_is_top_left(self):
        assert DIRECTIONAL_KEYPAD.gap == (0, 0)
        assert DIRECTIONAL_KEYPAD.key_at(0, 0) is None

    def test_every_key_has_a_unique_position_away_from_the_gap(self):
        positions = [DIRECTIONAL_KEYPAD.position_of(key) for key in DIRECTIONAL_KEYPAD.keys]
        assert len(set(positions)) == 5
        assert DIRECTIONAL_KEYPAD.gap not in positions


class TestLayoutValidation:

    def test_unknown_layout_name(self):
        with pytest.raises(KeypadLayoutError, match="Unknown keypad layout"):
            Keypad('Phone')

    def test_layout_without_gap(self):
        with pytest.raises(KeypadLayoutError, match="exactly one gap"):
            Keypad('Full', layout=[['1', '2'], ['3', 'A']])

    def test_layout_with_two_gaps(self):
        with pytest.raises(KeypadLayoutError, match="found 2"):
            Keypad('Holes', layout=[[None, '2'], ['A', None]])

    def test_ragged_layout(self):
        with pytest.raises(KeypadLayoutError, match="row 1"):
            Keypad('Ragged', layout=[[None, '1', 'A'], ['2']])

    def test_duplicate_key(self):
        with pytest.raises(KeypadLayoutError, match="more than once"):
            Keypad('Dup', layout=[[None, '1'], ['1', 'A']])

    def test_missing_start_key(self):
        with pytest.raises(KeypadLayoutError, match="no 'A' key"):
            Keypad('NoStart', layout=[[None, '1'], ['2', '3']])

    def test_empty_layout(self):
        with pytest.raises(KeypadLayoutError, match="empty"):
            Keypad('Empty', layout=[])

    def test_custom_layout(self):
        keypad = Keypad('Tiny', layout=[[None, 'A'], ['1', '2']])
        assert keypad.position_of('1') == (1, 0)
        assert repr(keypad) == "<Keypad: Tiny>"
