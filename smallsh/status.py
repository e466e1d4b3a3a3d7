import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExitStatus:
    """How the last waited-for child ended: an exit code or a signal number."""
    code: Optional[int] = 0
    signal: Optional[int] = None

    @classmethod
    def exited(cls, code):
        return cls(code=code)

    @classmethod
    def signaled(cls, signo):
        return cls(code=None, signal=signo)

    @classmethod
    def from_wait_status(cls, status):
        """Decode a raw status from os.waitpid()."""
        if os.WIFSIGNALED(status):
            return cls.signaled(os.WTERMSIG(status))
        return cls.exited(os.WEXITSTATUS(status))

    @classmethod
    def from_returncode(cls, returncode):
        """Decode a Popen/psutil style code, negative for signals."""
        if returncode is not None and returncode < 0:
            return cls.signaled(-returncode)
        return cls.exited(returncode or 0)

    def describe(self):
        if self.signal is not None:
            return f"terminated by signal: {self.signal}"
        return f"Exited with status: {self.code}"
