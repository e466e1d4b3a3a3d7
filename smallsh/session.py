import os
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from smallsh.jobs import JobTable
from smallsh.status import ExitStatus


@dataclass
class ShellSession:
    """
    State shared across cycles of one shell run.

    last_status is written by every completed wait, foreground or background,
    and read by the status built-in.
    """
    read_line: Callable[[str], Optional[str]]
    env: Mapping[str, str] = field(default_factory=lambda: os.environ)
    jobs: JobTable = field(default_factory=JobTable)
    last_status: ExitStatus = field(default_factory=ExitStatus)
