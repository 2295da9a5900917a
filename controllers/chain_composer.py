# Directory: controllers
# Filename: chain_composer.py

import logging
from itertools import product
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from controllers.keypad import ACTIVATE, DIRECTIONAL_KEYPAD, NUMERIC_KEYPAD, Keypad
from controllers.path_enumerator import Path, PathEnumerator

module_logger = logging.getLogger(__name__)


class ChainDepthError(ValueError):
    """Raised when a chain depth is not a non-negative integer."""
    pass


class ChainComposer:
    """
    Computes what the operator has to press so the innermost robot types a code.

    A chain of depth N is: operator -> N robots on directional keypads ->
    one robot on the numeric keypad. Every robot starts hovering over 'A'
    and returns to 'A' after each press it relays, so each (prev, next)
    transition can be costed independently of the others.

    Attributes:
        numeric_keypad: Keypad the innermost robot types the code on.
        directional_keypad: Keypad every other level presses.
        logger: Logger for expansion and cache details.
    """
    numeric_keypad: Keypad
    directional_keypad: Keypad
    logger: logging.Logger

    def __init__(self,
                 numeric_keypad: Keypad = NUMERIC_KEYPAD,
                 directional_keypad: Keypad = DIRECTIONAL_KEYPAD,
                 logger_instance: Optional[logging.Logger] = None):
        self.logger = logger_instance if logger_instance else module_logger
        self.numeric_keypad = numeric_keypad
        self.directional_keypad = directional_keypad
        self._enumerators: Dict[str, PathEnumerator] = {
            keypad.name: PathEnumerator(keypad, logger_instance=self.logger.getChild(keypad.name))
            for keypad in (numeric_keypad, directional_keypad)
        }
        # (keypad name, prev key, next key, depth) -> minimal operator presses
        self._cost_cache: Dict[Tuple[str, str, str, int], int] = {}

    # --- Validation ---

    @staticmethod
    def _validate_depth(depth: int) -> None:
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise ChainDepthError(f"Chain depth must be an integer, got {depth!r}.")
        if depth < 0:
            raise ChainDepthError(f"Chain depth must be >= 0, got {depth}.")

    def _validate_code(self, code: Sequence[str]) -> Tuple[str, ...]:
        code = tuple(code)
        for key in code:
            self.numeric_keypad.position_of(key)
        return code

    def enumerator_for(self, keypad: Keypad) -> PathEnumerator:
        return self._enumerators[keypad.name]

    # --- Exhaustive candidate propagation ---

    def expand(self, target: Sequence[str], keypad: Keypad) -> List[Path]:
        """
        Every shortest press sequence that makes a robot on `keypad` press `target`.

        Per-pair options are combined as a full cross product so that no
        tie-optimal choice is lost before the next level is costed.
        """
        enumerator = self.enumerator_for(keypad)
        augmented = (ACTIVATE,) + tuple(target)
        options_per_pair = [
            enumerator.press_options(prev, nxt)
            for prev, nxt in zip(augmented, augmented[1:])
        ]
        return [sum(choice, ()) for choice in product(*options_per_pair)]

    def enumerate_sequences(self, code: Sequence[str], depth: int) -> List[Path]:
        """
        All candidate operator sequences for `code`, carried level by level.

        The candidate set grows exponentially with depth; use
        shortest_sequence_length() for anything beyond small depths.
        """
        self._validate_depth(depth)
        code = self._validate_code(code)

        candidates = self.expand(code, self.numeric_keypad)
        for level in range(depth):
            next_candidates: List[Path] = []
            for candidate in candidates:
                next_candidates.extend(self.expand(candidate, self.directional_keypad))
            candidates = next_candidates
            self.logger.debug(f"Level {level + 1}/{depth} for '{''.join(code)}': {len(candidates)} candidate(s).")
        return candidates

    # --- Memoized cost recursion ---

    def pair_cost(self, keypad: Keypad, prev: str, nxt: str, depth: int) -> int:
        """Operator presses needed to move a robot on `keypad` from `prev` to `nxt` and press it."""
        cache_key = (keypad.name, prev, nxt, depth)
        cached = self._cost_cache.get(cache_key)
        if cached is not None:
            return cached

        options = self.enumerator_for(keypad).press_options(prev, nxt)
        if depth == 0:
            cost = min(len(option) for option in options)
        else:
            cost = min(self.sequence_cost(option, self.directional_keypad, depth - 1) for option in options)

        self._cost_cache[cache_key] = cost
        return cost

    def sequence_cost(self, target: Iterable[str], keypad: Keypad, depth: int) -> int:
        """Operator presses needed for a robot on `keypad` to press `target`, starting from 'A'."""
        cost = 0
        prev = ACTIVATE
        for key in target:
            cost += self.pair_cost(keypad, prev, key, depth)
            prev = key
        return cost

    def shortest_sequence_length(self, code: Sequence[str], depth: int = 2) -> int:
        self._validate_depth(depth)
        code = self._validate_code(code)
        length = self.sequence_cost(code, self.numeric_keypad, depth)
        self.logger.debug(f"Shortest sequence for '{''.join(code)}' at depth {depth}: {length} presses.")
        return length

    def shortest_sequence(self, code: Sequence[str], depth: int = 2) -> Path:
        """
        One concrete optimal operator sequence for `code`.

        The sequence is materialized, so its length grows exponentially with depth.
        """
        self._validate_depth(depth)
        code = self._validate_code(code)
        return self._build_sequence(code, self.numeric_keypad, depth)

    def _build_sequence(self, target: Sequence[str], keypad: Keypad, depth: int) -> Path:
        enumerator = self.enumerator_for(keypad)
        result: List[str] = []
        prev = ACTIVATE
        for key in target:
            options = enumerator.press_options(prev, key)
            if depth == 0:
                best = min(options, key=len)
            else:
                best = min(options, key=lambda option: self.sequence_cost(option, self.directional_keypad, depth - 1))
                best = self._build_sequence(best, self.directional_keypad, depth - 1)
            result.extend(best)
            prev = key
        return tuple(result)

    def clear_cache(self) -> None:
        self._cost_cache.clear()
