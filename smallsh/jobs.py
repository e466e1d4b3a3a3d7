import logging
import os
import signal

import psutil

from config import JOB_TERMINATE_TIMEOUT
from smallsh.status import ExitStatus

log = logging.getLogger(__name__)


class JobTable:
    """Background jobs in launch order: pid -> command line."""

    def __init__(self):
        self._jobs = {}

    def add(self, pid, cmdline):
        self._jobs[pid] = cmdline

    def remove(self, pid):
        return self._jobs.pop(pid, None)

    def pids(self):
        return list(self._jobs)

    def __contains__(self, pid):
        return pid in self._jobs

    def __len__(self):
        return len(self._jobs)


def _report(pid, status):
    if status.signal is not None:
        print(f"Background Process PID: {pid} terminated by signal {status.signal}", flush=True)
    else:
        print(f"Background Process PID: {pid} exited with status of {status.code}", flush=True)


def poll(session):
    """
    Non-blocking check of every background job.
    Finished jobs are reported, recorded as the last status and forgotten.
    Returns: list of reaped pids
    """
    reaped = []
    for pid in session.jobs.pids():
        try:
            done, raw = os.waitpid(pid, os.WNOHANG)
        except ChildProcessError:
            # Reaped elsewhere; nothing left to report
            log.warning("background pid %d is no longer a child, dropping it", pid)
            session.jobs.remove(pid)
            continue
        if done == 0:
            continue
        status = ExitStatus.from_wait_status(raw)
        session.jobs.remove(pid)
        session.last_status = status
        _report(pid, status)
        log.debug("reaped background pid %d: %s", pid, status)
        reaped.append(pid)
    return reaped


def cleanup(session, timeout=JOB_TERMINATE_TIMEOUT):
    """Terminate and reap every background job still running at exit."""
    procs = []
    for pid in session.jobs.pids():
        try:
            p = psutil.Process(pid)
            p.send_signal(signal.SIGTERM)
            procs.append(p)
        except psutil.NoSuchProcess:
            session.jobs.remove(pid)

    if not procs:
        return

    gone, alive = psutil.wait_procs(procs, timeout=timeout)
    for p in alive:
        log.warning("background pid %d ignored SIGTERM, killing it", p.pid)
        try:
            p.kill()
        except psutil.NoSuchProcess:
            continue
    if alive:
        more, _ = psutil.wait_procs(alive, timeout=timeout)
        gone.extend(more)

    for p in gone:
        session.jobs.remove(p.pid)
        status = ExitStatus.from_returncode(p.returncode)
        session.last_status = status
        _report(p.pid, status)
