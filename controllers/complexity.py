# Directory: controllers
# Filename: complexity.py

import copy
import logging
import string
from typing import Iterable, List, Optional, Sequence

from controllers.chain_composer import ChainComposer
from controllers.keypad import ACTIVATE
from utils.codes import CodeFormatError

module_logger = logging.getLogger(__name__)

# The template is a constant for every scored code.
CODE_REPORT_TEMPLATE = {
    'code': '',
    'length': 0,
    'numeric': 0,
    'complexity': 0
}


def code_numeric_part(code: Sequence[str]) -> int:
    """The code's keys without the trailing 'A', read as a base-10 integer ('029A' -> 29)."""
    code = tuple(code)
    if not code or code[-1] != ACTIVATE:
        raise CodeFormatError(f"Code {''.join(code)!r} must end with '{ACTIVATE}'.")
    digits = code[:-1]
    if not all(key in string.digits for key in digits):
        raise CodeFormatError(f"Code {''.join(code)!r} has a non-digit before its trailing '{ACTIVATE}'.")
    return int(''.join(digits)) if digits else 0


def code_complexity(code: Sequence[str], depth: int = 2, composer: Optional[ChainComposer] = None) -> int:
    composer = composer if composer else ChainComposer()
    return composer.shortest_sequence_length(code, depth) * code_numeric_part(code)


def complexity_report(codes: Iterable[Sequence[str]], depth: int = 2,
                      composer: Optional[ChainComposer] = None,
                      logger_instance: Optional[logging.Logger] = None) -> List[dict]:
    """
    Scores every code and returns one report dict per code, in input order.
    """
    logger = logger_instance if logger_instance else module_logger
    composer = composer if composer else ChainComposer()

    reports = []
    for code in codes:
        report = copy.deepcopy(CODE_REPORT_TEMPLATE)
        length = composer.shortest_sequence_length(code, depth)
        numeric = code_numeric_part(code)
        report.update({
            'code': ''.join(code),
            'length': length,
            'numeric': numeric,
            'complexity': length * numeric
        })
        logger.info(f"Code {report['code']}: {length} presses x {numeric} = {report['complexity']}")
        reports.append(report)
    return reports


def complexities_sum(codes: Iterable[Sequence[str]], depth: int = 2,
                     composer: Optional[ChainComposer] = None) -> int:
    return sum(report['complexity'] for report in complexity_report(codes, depth, composer))
