# Directory: controllers
# Filename: robot_chain.py

import logging
from typing import Callable, Iterable, List, Optional

from transitions import Machine
from transitions.core import MachineError

from controllers.chain_composer import ChainDepthError
from controllers.keypad import (
    ACTIVATE,
    BUTTON_TRIGGERS,
    DIRECTIONAL_KEYPAD,
    MOVE_DELTAS,
    NUMERIC_KEYPAD,
    InvalidKeyError,
    Keypad,
)

module_logger = logging.getLogger(__name__)


class RobotPanicError(RuntimeError):
    """Raised when a replayed press would move a robot arm onto the gap or off its keypad."""
    pass


class KeypadRobot:
    """
    A robot arm hovering over one keypad, modelled as a finite state machine.

    The state is the key the arm is aimed at. Move triggers only exist between
    physically adjacent keys, so aiming at the gap is an invalid trigger.
    `activate` is an internal transition: the arm stays put and the key is pressed.

    Attributes:
        keypad: The keypad this arm hovers over.
        name: Label used in log messages and errors.
        pressed: Every key this arm has pressed, in order.
        machine: The `transitions` Machine driving this model.
        state: The key the arm is currently aimed at.
    """
    keypad: Keypad
    name: str
    pressed: List[str]
    machine: Machine
    state: str

    def __init__(self, keypad: Keypad, name: str,
                 on_press: Optional[Callable[[str], None]] = None,
                 logger_instance: Optional[logging.Logger] = None):
        self.keypad = keypad
        self.name = name
        self.pressed = []
        self._on_press = on_press
        self.logger = logger_instance if logger_instance else module_logger

        transitions = []
        for key in keypad.keys:
            row, col = keypad.position_of(key)
            for button, (d_row, d_col) in MOVE_DELTAS.items():
                dest = keypad.key_at(row + d_row, col + d_col)
                if dest is not None:
                    transitions.append({'trigger': BUTTON_TRIGGERS[button], 'source': key, 'dest': dest})
        transitions.append({'trigger': BUTTON_TRIGGERS[ACTIVATE], 'source': '*', 'dest': None, 'after': '_emit_press'})

        self.machine = Machine(
            model=self,
            states=list(keypad.keys),
            transitions=transitions,
            initial=ACTIVATE,
            auto_transitions=False,
        )

        # --- Public triggers --- #
        self.up: Callable
        self.down: Callable
        self.left: Callable
        self.right: Callable
        self.activate: Callable

    def __repr__(self) -> str:
        return f"<KeypadRobot: {self.name} at '{self.state}'>"

    def _emit_press(self) -> None:
        self.pressed.append(self.state)
        self.logger.debug(f"{self.name} pressed '{self.state}'.")
        if self._on_press is not None:
            self._on_press(self.state)

    def press(self, button: str) -> None:
        """Applies one directional-keypad button to this arm."""
        trigger_name = BUTTON_TRIGGERS.get(button)
        if trigger_name is None:
            raise InvalidKeyError(f"Button {button!r} is not on the {DIRECTIONAL_KEYPAD.name} keypad.")
        try:
            self.trigger(trigger_name)
        except MachineError as e:
            raise RobotPanicError(
                f"{self.name} cannot move '{button}' from '{self.state}' on the {self.keypad.name} keypad."
            ) from e


class RobotChain:
    """
    `depth` robots on directional keypads relaying presses to one robot on the numeric keypad.

    robots[0] is driven directly by the operator's presses; robots[-1] types
    on the numeric keypad.
    """

    def __init__(self, depth: int = 2,
                 numeric_keypad: Keypad = NUMERIC_KEYPAD,
                 directional_keypad: Keypad = DIRECTIONAL_KEYPAD,
                 logger_instance: Optional[logging.Logger] = None):
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
            raise ChainDepthError(f"Chain depth must be a non-negative integer, got {depth!r}.")

        self.logger = logger_instance if logger_instance else module_logger
        self.depth = depth
        self.typed: List[str] = []

        self.robots: List[KeypadRobot] = [
            KeypadRobot(directional_keypad, f"Robot{level + 1}", logger_instance=self.logger)
            for level in range(depth)
        ]
        self.robots.append(KeypadRobot(numeric_keypad, "NumericRobot",
                                       on_press=self.typed.append, logger_instance=self.logger))

        # Each directional robot's press drives the next robot in line.
        for outer, inner in zip(self.robots, self.robots[1:]):
            outer._on_press = inner.press

    def replay(self, sequence: Iterable[str]) -> str:
        """Feeds operator presses into the chain and returns what the numeric robot typed."""
        operator_robot = self.robots[0]
        for button in sequence:
            operator_robot.press(button)
        typed = ''.join(self.typed)
        self.logger.debug(f"Chain of depth {self.depth} typed '{typed}'.")
        return typed
