# Directory: utils/
# Filename: codes.py

import re
from typing import Iterable, List, Tuple

Code = Tuple[str, ...]

# Digits followed by the trailing activate key, e.g. '029A'.
CODE_PATTERN = re.compile(r'[0-9]*A')


class CodeFormatError(ValueError):
    """Raised when a line is not a well-formed keypad code."""
    pass


def parse_code(line: str) -> Code:
    """Turns one line such as '029A' into ('0', '2', '9', 'A'). Surrounding whitespace is ignored."""
    text = line.strip()
    if not CODE_PATTERN.fullmatch(text):
        raise CodeFormatError(f"Invalid code {text!r}: expected digits followed by a trailing 'A'.")
    return tuple(text)


def read_codes(lines: Iterable[str]) -> List[Code]:
    """Parses every non-blank line; the first malformed line aborts the whole read."""
    codes = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            codes.append(parse_code(line))
        except CodeFormatError as e:
            raise CodeFormatError(f"Line {line_number}: {e}") from e
    return codes
