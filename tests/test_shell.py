"""End-to-end runs of the shell loop with scripted input."""

import re
import signal

from smallsh.shell import Shell


def run(make_session, lines):
    session = make_session(lines)
    return Shell(session).run(), session


def test_redirect_then_status(make_session, workdir, capfd):
    code, _ = run(make_session, ["echo hello > out.txt\n", "status\n", "exit\n"])
    assert code == 0
    assert (workdir / "out.txt").read_text() == "hello\n"
    out = capfd.readouterr().out
    assert "Exited with status: 0" in out
    assert out.rstrip().endswith("Exiting shell...")


def test_status_after_failure(make_session, workdir, capfd):
    script = workdir / "fail.sh"
    script.write_text("#!/bin/sh\nexit 2\n")
    script.chmod(0o755)
    run(make_session, ["./fail.sh", "status", "status", "exit"])
    lines = [l for l in capfd.readouterr().out.splitlines() if "status" in l]
    assert lines == ["Exited with status: 2", "Exited with status: 2"]


def test_comments_and_blank_lines_do_not_touch_status(make_session, workdir, capfd):
    run(make_session, ["false", "# false", "", "   ", "#", "status", "exit"])
    assert "Exited with status: 1" in capfd.readouterr().out


def test_whitespace_collapses_in_argv(make_session, workdir):
    run(make_session, ["echo   a    b > out.txt", "exit"])
    assert (workdir / "out.txt").read_text() == "a b\n"


def test_background_completion_is_reported_on_a_later_cycle(make_session, workdir, capfd):
    run(make_session, ["sleep 0.1 &", "sleep 0.5", "status", "exit"])
    out = capfd.readouterr().out
    created = re.search(r"Background process, pid: (\d+) created\.", out)
    assert created
    pid = created.group(1)
    assert f"Background Process PID: {pid} exited with status of 0" in out
    # the status built-in ran after the foreground sleep
    assert out.index(f"PID: {pid} exited") < out.index("Exited with status: 0")


def test_exit_terminates_outstanding_jobs(make_session, workdir, capfd):
    _, session = run(make_session, ["sleep 30 &", "exit"])
    assert len(session.jobs) == 0
    assert "terminated by signal 15" in capfd.readouterr().out


def test_end_of_input_stops_the_loop(make_session, workdir, capfd):
    code, _ = run(make_session, ["echo one > one.txt"])
    assert code == 0
    assert (workdir / "one.txt").read_text() == "one\n"


def test_sigint_handler_restored_after_run(make_session, workdir):
    before = signal.getsignal(signal.SIGINT)
    run(make_session, ["exit"])
    assert signal.getsignal(signal.SIGINT) is before


def test_cd_then_relative_redirect(make_session, workdir):
    (workdir / "sub").mkdir()
    run(make_session, ["cd sub", "echo here > f.txt", "exit"])
    assert (workdir / "sub" / "f.txt").read_text() == "here\n"
