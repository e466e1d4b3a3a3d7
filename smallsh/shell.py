import logging
import signal

from config import PROMPT
from smallsh import jobs
from smallsh.builtin import CONTINUE, TERMINATE, run_builtin
from smallsh.executor import launch
from smallsh.parser import parse_command
from smallsh.signals import SigintPolicy, apply_policy

log = logging.getLogger(__name__)


class Shell:
    """Read, dispatch, repeat until exit or end of input."""

    def __init__(self, session, prompt=PROMPT):
        self.session = session
        self.prompt = prompt

    def run_once(self):
        """
        One cycle: poll background jobs, read a line, dispatch it.
        Returns: CONTINUE / TERMINATE
        """
        apply_policy(SigintPolicy.IGNORE)
        jobs.poll(self.session)

        line = self.session.read_line(self.prompt)
        if line is None:
            return TERMINATE

        tokens, background = parse_command(line)
        result = run_builtin(tokens, self.session)
        if result is not None:
            return result

        launch(tokens, background, self.session)
        return CONTINUE

    def run(self):
        """Returns: the shell's own exit code, which is always 0"""
        previous = signal.getsignal(signal.SIGINT)
        try:
            while self.run_once():
                pass
        finally:
            if len(self.session.jobs):
                log.info("terminating %d background job(s)", len(self.session.jobs))
            jobs.cleanup(self.session)
            signal.signal(signal.SIGINT, previous)
        return 0
