# Directory: controllers
# Filename: keypad.py

import logging
from typing import Dict, List, Optional, Tuple

from utils.config.keypad_layouts import KEYPAD_LAYOUTS, START_KEY

module_logger = logging.getLogger(__name__)

# --- Buttons of the directional keypad ---
UP = '^'
DOWN = 'v'
LEFT = '<'
RIGHT = '>'
ACTIVATE = START_KEY

# (row, col) offset applied to a robot arm for each move button.
MOVE_DELTAS: Dict[str, Tuple[int, int]] = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

# Trigger name fired on a robot's state machine for each directional button.
BUTTON_TRIGGERS: Dict[str, str] = {
    UP: 'up',
    DOWN: 'down',
    LEFT: 'left',
    RIGHT: 'right',
    ACTIVATE: 'activate',
}


class InvalidKeyError(ValueError):
    """Raised when a key is not present on the keypad it is looked up on."""
    pass


class KeypadLayoutError(ValueError):
    """Raised when a layout definition is not a rectangle with exactly one gap."""
    pass


class Keypad:
    """
    Geometry of one keypad: where every key sits and where the gap is.

    Rows grow downwards and columns grow to the right, so the numeric
    keypad's '7' is at (0, 0) and its gap at (3, 0).
    """
    name: str
    rows: int
    cols: int
    gap: Tuple[int, int]

    def __init__(self, name: str, layout: Optional[List[List[Optional[str]]]] = None,
                 logger_instance: Optional[logging.Logger] = None):
        self.logger = logger_instance if logger_instance else module_logger
        self.name = name
        if layout is None:
            if name not in KEYPAD_LAYOUTS:
                raise KeypadLayoutError(f"Unknown keypad layout '{name}'. Choose from {list(KEYPAD_LAYOUTS)}.")
            layout = KEYPAD_LAYOUTS[name]

        if not layout or not layout[0]:
            raise KeypadLayoutError(f"Keypad '{name}' has an empty layout.")

        self.rows = len(layout)
        self.cols = len(layout[0])
        self._positions: Dict[str, Tuple[int, int]] = {}
        gaps: List[Tuple[int, int]] = []

        for row, line in enumerate(layout):
            if len(line) != self.cols:
                raise KeypadLayoutError(f"Keypad '{name}' row {row} has {len(line)} cells, expected {self.cols}.")
            for col, key in enumerate(line):
                if key is None:
                    gaps.append((row, col))
                elif key in self._positions:
                    raise KeypadLayoutError(f"Keypad '{name}' defines key '{key}' more than once.")
                else:
                    self._positions[key] = (row, col)

        if len(gaps) != 1:
            raise KeypadLayoutError(f"Keypad '{name}' must have exactly one gap, found {len(gaps)}.")
        if START_KEY not in self._positions:
            raise KeypadLayoutError(f"Keypad '{name}' has no '{START_KEY}' key to start from.")

        self.gap = gaps[0]
        self._keys_by_position: Dict[Tuple[int, int], str] = {pos: key for key, pos in self._positions.items()}
        self.logger.debug(f"Keypad '{name}' built: {self.rows}x{self.cols}, gap at {self.gap}.")

    @property
    def keys(self) -> Tuple[str, ...]:
        """Keys in reading order (row by row, left to right)."""
        return tuple(sorted(self._positions, key=lambda k: self._positions[k]))

    def __contains__(self, key: object) -> bool:
        return key in self._positions

    def __repr__(self) -> str:
        return f"<Keypad: {self.name}>"

    def position_of(self, key: str) -> Tuple[int, int]:
        try:
            return self._positions[key]
        except (KeyError, TypeError):
            raise InvalidKeyError(f"Key {key!r} is not on the {self.name} keypad.") from None

    def is_gap(self, row: int, col: int) -> bool:
        return (row, col) == self.gap

    def key_at(self, row: int, col: int) -> Optional[str]:
        """The key at a cell, or None for the gap and for cells off the keypad."""
        return self._keys_by_position.get((row, col))


NUMERIC_KEYPAD = Keypad('Numeric')
DIRECTIONAL_KEYPAD = Keypad('Directional')
