# File: utils/config/keypad_layouts.py

"""
Centralized definition for keypad layouts to be used across the solver.

Each layout is a list of rows; `None` marks the single gap cell that no
robot arm may ever hover over.
"""

KEYPAD_LAYOUTS = {
    'Numeric': [
        ['7', '8', '9'],
        ['4', '5', '6'],
        ['1', '2', '3'],
        [None, '0', 'A']
    ],
    'Directional': [
        [None, '^', 'A'],
        ['<', 'v', '>']
    ]
}

# Every robot starts (and every press sequence ends) on the activate key.
START_KEY = 'A'
