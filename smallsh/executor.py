import logging
import os
import sys

from config import NULL_DEVICE, OUTPUT_MODE
from smallsh.errors import RedirectionError, SpawnError
from smallsh.parser import build_exec_args
from smallsh.signals import SigintPolicy, apply_policy, restore_child_defaults
from smallsh.status import ExitStatus

log = logging.getLogger(__name__)


def print_error(msg):
    """Write straight to fd 2; safe in a forked child before exec."""
    os.write(2, (msg + "\n").encode(errors="replace"))


def _redirect(path, flags, target_fd, mode=0o666):
    fd = os.open(path, flags, mode)
    try:
        os.dup2(fd, target_fd)
    finally:
        if fd != target_fd:
            os.close(fd)


def apply_redirections(plan):
    """
    Bind fd 0 / fd 1 as the plan says. Runs in the child.
    Raises: OSError when a file cannot be opened or duplicated.
    """
    if plan.stdin_path is not None:
        _redirect(plan.stdin_path, os.O_RDONLY, 0)
    elif plan.stdin_null:
        _redirect(NULL_DEVICE, os.O_RDONLY, 0)

    if plan.stdout_path is not None:
        _redirect(plan.stdout_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 1, OUTPUT_MODE)
    elif plan.stdout_null:
        _redirect(NULL_DEVICE, os.O_WRONLY, 1)


def _run_child(plan, background):
    """Set up and exec. Never returns into the shell."""
    try:
        if not background:
            apply_policy(SigintPolicy.DEFAULT)
        restore_child_defaults()

        try:
            apply_redirections(plan)
        except OSError as e:
            print_error(f"smallsh: {e.filename or ''}: {e.strerror}")
            os._exit(1)

        try:
            os.execvp(plan.argv[0], plan.argv)
        except FileNotFoundError:
            print_error(f"smallsh: command not found: {plan.argv[0]}")
        except PermissionError:
            print_error(f"smallsh: permission denied: {plan.argv[0]}")
        except OSError as e:
            print_error(f"smallsh: failed to execute '{plan.argv[0]}': {e.strerror}")
    except BaseException as e:
        print_error(f"smallsh: {e!r}")
    finally:
        os._exit(1)


def _wait_foreground(pid, session):
    try:
        _, raw = os.waitpid(pid, 0)
    except ChildProcessError as e:
        print(f"smallsh: wait for {pid} failed: {e}", flush=True)
        return
    session.last_status = ExitStatus.from_wait_status(raw)
    log.debug("foreground pid %d finished: %s", pid, session.last_status)


def launch(tokens, background, session):
    """
    Fork and exec an external command.
    Foreground: wait and record its status. Background: record the pid and return.
    Raises: SpawnError if fork itself fails.
    """
    try:
        plan = build_exec_args(tokens, background)
    except RedirectionError as e:
        print(f"smallsh: {e}", flush=True)
        return

    # Anything still buffered would be written twice.
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        pid = os.fork()
    except OSError as e:
        raise SpawnError(e) from e

    if pid == 0:
        _run_child(plan, background)

    if background:
        print(f"Background process, pid: {pid} created.", flush=True)
        session.jobs.add(pid, " ".join(tokens))
        log.debug("started background pid %d: %s", pid, plan.argv)
        return

    _wait_foreground(pid, session)
