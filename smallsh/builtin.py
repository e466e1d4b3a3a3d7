import os

from config import USAGE

CONTINUE = True
TERMINATE = False


def builtin_cd(args, session):
    """Change directory"""
    if len(args) > 1:
        print(USAGE)
        return CONTINUE

    if args:
        path = os.path.expanduser(args[0])
    else:
        path = session.env.get("HOME") or os.path.expanduser("~")

    try:
        os.chdir(path)
    except OSError as e:
        print(f"cd: {e.strerror}: {path}")
    return CONTINUE


def builtin_status(args, session):
    """Print how the last waited-for process ended"""
    print(session.last_status.describe())
    return CONTINUE


def builtin_exit(args, session):
    print("Exiting shell...")
    return TERMINATE


BUILTINS = {
    "cd": builtin_cd,
    "status": builtin_status,
    "exit": builtin_exit,
}


def run_builtin(tokens, session):
    """
    Execute built-in command if it matches.
    Returns: CONTINUE / TERMINATE, or None when the command is not a built-in
    """
    if not tokens or tokens[0].startswith("#"):
        return CONTINUE

    handler = BUILTINS.get(tokens[0])
    if handler is None:
        return None
    return handler(tokens[1:], session)
