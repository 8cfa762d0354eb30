# config.example.py

"""
Documentation-only module (safe to commit).

Configuration is read from environment variables (optionally via a local .env
file in the working directory). This file lists them so the repo documents
itself without opening the code.
"""

ENV_VARS = {
    # Logging
    "TASKRUN_LOG_LEVEL": "Console (stderr) log level (default: WARNING).",
    "TASKRUN_LOG_DIR": "Directory for taskrun.log with full DEBUG logs (default: unset, no file).",
    # Registry
    "TASKRUN_TASKS": (
        "Registry reference used when taskrun is called without arguments "
        "(default: tasks:tasks). Several references may be joined with ','."
    ),
}
