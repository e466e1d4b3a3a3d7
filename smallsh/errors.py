class ShellError(Exception):
    """Base class for errors raised by the shell itself."""


class RedirectionError(ShellError):
    """Malformed command line: a marker without a filename, or nothing to run."""


class SpawnError(ShellError):
    """fork() failed. The shell cannot continue."""

    def __init__(self, cause):
        super().__init__(str(cause))
        self.cause = cause
