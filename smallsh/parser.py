import os
import re
from dataclasses import dataclass
from typing import List, Optional

from smallsh.errors import RedirectionError

# Only spaces and newlines separate words; tabs belong to the word.
_DELIMITERS = re.compile(r"[ \n]+")

INPUT_MARKER = "<"
OUTPUT_MARKER = ">"
BACKGROUND_MARKER = "&"
_MARKERS = (INPUT_MARKER, OUTPUT_MARKER, BACKGROUND_MARKER)


def tokenize(line):
    """Split a raw line into words. No quoting."""
    return [tok for tok in _DELIMITERS.split(line) if tok]


def is_background(tokens):
    return bool(tokens) and tokens[-1] == BACKGROUND_MARKER


def parse_command(line):
    """
    Parse command line into tokens and background flag.
    Returns: (tokens: list, background: bool)
    """
    tokens = tokenize(line)
    return tokens, is_background(tokens)


def _find(tokens, marker):
    try:
        return tokens.index(marker)
    except ValueError:
        return None


def find_input_marker(tokens):
    """Index of the first '<' token, or None."""
    return _find(tokens, INPUT_MARKER)


def find_output_marker(tokens):
    """Index of the first '>' token, or None."""
    return _find(tokens, OUTPUT_MARKER)


@dataclass
class ExecPlan:
    """What a child needs to set up before exec."""
    argv: List[str]
    stdin_path: Optional[str] = None
    stdout_path: Optional[str] = None
    stdin_null: bool = False
    stdout_null: bool = False


def _target(tokens, index, marker):
    if index + 1 >= len(tokens) or tokens[index + 1] in _MARKERS:
        raise RedirectionError(f"syntax error: expected a file name after '{marker}'")
    return os.path.expanduser(tokens[index + 1])


def build_exec_args(tokens, background=False):
    """
    Strip redirection and background tokens from the command.
    Returns: ExecPlan
    Raises: RedirectionError if a marker has no file name or no command is left.
    """
    words = list(tokens)
    if background and words and words[-1] == BACKGROUND_MARKER:
        words.pop()

    in_idx = find_input_marker(words)
    out_idx = find_output_marker(words)

    stdin_path = _target(words, in_idx, INPUT_MARKER) if in_idx is not None else None
    stdout_path = _target(words, out_idx, OUTPUT_MARKER) if out_idx is not None else None

    # Marker and file name go together; drop from the highest index down
    # so the lower pair's positions stay valid.
    for idx in sorted(i for i in (in_idx, out_idx) if i is not None)[::-1]:
        del words[idx:idx + 2]

    if not words:
        raise RedirectionError("missing command")

    return ExecPlan(
        argv=words,
        stdin_path=stdin_path,
        stdout_path=stdout_path,
        stdin_null=background and stdin_path is None,
        stdout_null=background and stdout_path is None,
    )
