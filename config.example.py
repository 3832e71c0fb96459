# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKBOT_APP_NAME": "App display name (default: taskbot).",
    "TASKBOT_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKBOT_LOG_TO_FILE": "Write full DEBUG logs to <log_dir>/taskbot.log (true/false, default: true).",
    # Paths (gitignored)
    "TASKBOT_DATA_DIR": "Local data directory (default: .local/taskbot).",
    "TASKBOT_LOG_DIR": "Log directory (default: <data_dir>).",
}
