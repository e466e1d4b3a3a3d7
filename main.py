import logging
import sys

from config import LOG_LEVEL
from smallsh.errors import SpawnError
from smallsh.history import init_readline, load_history, read_line, save_history
from smallsh.session import ShellSession
from smallsh.shell import Shell


def log_level(name):
    """Numeric level for a level name; WARNING when the name is unknown."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def main():
    logging.basicConfig(
        level=log_level(LOG_LEVEL),
        stream=sys.stderr,
        format="[%(asctime)s] %(levelname)-8s %(name)s: %(message)s",
    )

    interactive = init_readline()
    if interactive:
        load_history()

    try:
        return Shell(ShellSession(read_line=read_line)).run()
    except SpawnError as e:
        print(f"fork: {e}", file=sys.stderr)
        return 1
    finally:
        if interactive:
            save_history()


if __name__ == "__main__":
    sys.exit(main())
