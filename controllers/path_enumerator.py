# Directory: controllers
# Filename: path_enumerator.py

import logging
from typing import Dict, List, Optional, Tuple

from controllers.keypad import ACTIVATE, DOWN, LEFT, MOVE_DELTAS, RIGHT, UP, Keypad

module_logger = logging.getLogger(__name__)

Path = Tuple[str, ...]


class UnreachablePathError(RuntimeError):
    """Raised when no minimal path between two keys avoids the gap. Means the layout is broken."""
    pass


class PathEnumerator:
    """
    Enumerates the shortest ways a robot arm can travel between two keys of one keypad.

    Only the two "elbow" orderings are produced: all horizontal steps then all
    vertical steps, and the reverse. An ordering that crosses the gap is dropped.
    """

    def __init__(self, keypad: Keypad, logger_instance: Optional[logging.Logger] = None):
        self.keypad = keypad
        self.logger = logger_instance if logger_instance else module_logger
        self._cache: Dict[Tuple[str, str], Tuple[Path, ...]] = {}

    def _visits_gap(self, start: Tuple[int, int], moves: Path) -> bool:
        row, col = start
        for move in moves:
            d_row, d_col = MOVE_DELTAS[move]
            row, col = row + d_row, col + d_col
            if self.keypad.is_gap(row, col):
                return True
        return False

    def paths(self, start: str, end: str) -> List[Path]:
        """
        All minimal move sequences from `start` to `end`, without the trailing activate.

        Returns [()] when start == end. Each path has |d_row| + |d_col| moves.
        The returned list is a fresh copy; changing it does not affect later calls.
        """
        cache_key = (start, end)
        if cache_key in self._cache:
            return list(self._cache[cache_key])

        start_pos = self.keypad.position_of(start)
        end_pos = self.keypad.position_of(end)
        if start_pos == end_pos:
            self._cache[cache_key] = ((),)
            return [()]

        d_row = end_pos[0] - start_pos[0]
        d_col = end_pos[1] - start_pos[1]
        vertical = (DOWN if d_row > 0 else UP) * abs(d_row)
        horizontal = (RIGHT if d_col > 0 else LEFT) * abs(d_col)

        found: List[Path] = []
        for candidate in (tuple(horizontal + vertical), tuple(vertical + horizontal)):
            if candidate in found:
                continue
            if self._visits_gap(start_pos, candidate):
                self.logger.debug(f"[{self.keypad.name}] {start}->{end}: '{''.join(candidate)}' crosses the gap, dropped.")
                continue
            found.append(candidate)

        if not found:
            raise UnreachablePathError(
                f"No gap-free shortest path from '{start}' to '{end}' on the {self.keypad.name} keypad."
            )

        self._cache[cache_key] = tuple(found)
        return found

    def press_options(self, start: str, end: str) -> List[Path]:
        """Like paths(), with the activate press appended to each path."""
        return [path + (ACTIVATE,) for path in self.paths(start, end)]
