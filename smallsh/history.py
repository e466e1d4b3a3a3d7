import os
import readline
import sys

from config import HISTORY_FILE, MAX_HISTORY


def init_readline():
    """Line editing like an ordinary terminal; only when attached to one."""
    if not sys.stdin.isatty():
        return False
    try:
        readline.parse_and_bind("set editing-mode emacs")
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)
    return True


def load_history(path=HISTORY_FILE):
    try:
        if os.path.exists(path):
            readline.read_history_file(path)
        readline.set_history_length(MAX_HISTORY)
    except OSError as e:
        print(f"Warning: Could not load history: {e}", file=sys.stderr)


def save_history(path=HISTORY_FILE):
    try:
        readline.set_history_length(MAX_HISTORY)
        readline.write_history_file(path)
    except OSError as e:
        print(f"Warning: Could not save history: {e}", file=sys.stderr)


def read_line(prompt):
    """
    Print the prompt and read one line.
    Returns: the line, or None at end of input
    """
    sys.stdout.flush()
    try:
        return input(prompt)
    except EOFError:
        print()
        return None
    except UnicodeDecodeError as e:
        print(f"smallsh: cannot decode input: {e.reason}")
        return ""
