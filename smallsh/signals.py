import signal
from enum import Enum


class SigintPolicy(Enum):
    # The shell and its background children
    IGNORE = signal.SIG_IGN
    # Foreground children only
    DEFAULT = signal.SIG_DFL


def apply_policy(policy):
    """Install the preset as the SIGINT disposition. Returns the previous handler."""
    return signal.signal(signal.SIGINT, policy.value)


def restore_child_defaults():
    """Undo the interpreter's own SIG_IGN settings before exec."""
    for name in ("SIGPIPE", "SIGXFSZ"):
        signo = getattr(signal, name, None)
        if signo is not None:
            signal.signal(signo, signal.SIG_DFL)
