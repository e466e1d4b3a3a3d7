import os

# Prompt printed before each line is read
PROMPT = os.getenv("SMALLSH_PROMPT", ": ")

HISTORY_FILE = os.path.expanduser(os.getenv("SMALLSH_HISTORY", "~/.smallsh_history"))
MAX_HISTORY = 1000

# Background jobs read from / write to this when not redirected
NULL_DEVICE = os.devnull

# rw-rw-r--
OUTPUT_MODE = 0o664

# Seconds to wait for background jobs after SIGTERM on exit
JOB_TERMINATE_TIMEOUT = float(os.getenv("SMALLSH_JOB_TIMEOUT", "2.0"))

LOG_LEVEL = os.getenv("SMALLSH_LOG_LEVEL", "WARNING")

USAGE = "command [arg1 arg2 ...] [< input_file] [> output_file] [&]"
