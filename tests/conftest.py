import os
import time

import pytest

from smallsh import jobs
from smallsh.session import ShellSession


def scripted(lines):
    """A read_line that hands out lines in order, then end of input."""
    it = iter(lines)

    def read_line(prompt):
        return next(it, None)

    return read_line


def wait_for_jobs(session, timeout=5.0):
    """Poll until every background job has been reaped."""
    deadline = time.monotonic() + timeout
    while len(session.jobs) and time.monotonic() < deadline:
        jobs.poll(session)
        time.sleep(0.02)
    assert len(session.jobs) == 0, "background jobs did not finish in time"


@pytest.fixture
def make_session():
    def factory(lines=(), env=None):
        return ShellSession(read_line=scripted(lines), env=env if env is not None else dict(os.environ))
    return factory


@pytest.fixture
def session(make_session):
    s = make_session()
    yield s
    # Don't leave children behind if a test failed half way
    jobs.cleanup(s, timeout=0.5)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def reap():
    return wait_for_jobs
