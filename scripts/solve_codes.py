# Filename: scripts/solve_codes.py
#!/usr/bin/env python3

"""
Prints the sum of code complexities for a batch of keypad codes.

    python scripts/solve_codes.py [input_file] [depth ...]

Codes are read from `input_file`, or from stdin when it is omitted or '-'.
Depths default to the configured `chain_depths`.
"""

import sys
import os
import logging
from typing import Dict, Iterable, List, Optional, Sequence

# --- Path Setup ---
SCRIPT_DIR_SOLVE = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT_SOLVE = os.path.dirname(SCRIPT_DIR_SOLVE)
if PROJECT_ROOT_SOLVE not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_SOLVE)
# --- End Path Setup ---

from controllers.complexity import complexity_report
from utils.codes import read_codes

script_logger = logging.getLogger("SolveCodesScript")


def run_codes(codes: Sequence[Sequence[str]], composer, depths: Iterable[int]) -> Dict[int, int]:
    """
    Scores every code at every requested depth.
    Takes the composer as an argument so tests can pass in a mock.
    """
    results = {}
    for depth in depths:
        script_logger.info(f"--- Scoring {len(codes)} code(s) at chain depth {depth} ---")
        reports = complexity_report(codes, depth=depth, composer=composer, logger_instance=script_logger)
        results[depth] = sum(report['complexity'] for report in reports)
        script_logger.info(f"Depth {depth} complexity sum: {results[depth]}")
    return results


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        from keypad_toolkit import get_composer, get_settings
        composer = get_composer()
        settings = get_settings()
    except Exception as e:
        logging.basicConfig(level=logging.CRITICAL)
        logging.critical(f"Failed to get the composer from keypad_toolkit: {e}", exc_info=True)
        return 2

    input_path = args.pop(0) if args else '-'
    try:
        depths = [int(arg) for arg in args] if args else settings['chain_depths']
        if input_path == '-':
            codes = read_codes(sys.stdin)
        else:
            with open(input_path, 'r') as f:
                codes = read_codes(f)
        results = run_codes(codes, composer, depths)
    except (OSError, ValueError, RuntimeError) as e:
        script_logger.error(f"Could not score codes from '{input_path}': {e}", exc_info=True)
        return 1

    for depth, total in results.items():
        print(f"Complexity sum (depth {depth}): {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
