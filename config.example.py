# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKDESK_APP_NAME": "App display name (default: taskdesk).",
    "TASKDESK_LOG_LEVEL": "Logging level (default: INFO).",
    "TASKDESK_LOG_TO_FILE": "Write full logs to <data_dir>/taskdesk.log (true/false, default: false).",
    # Board
    "TASKDESK_BOARD_FILTERS": (
        "Comma separated list filters, one list each "
        "(Not Started, In Progress, Completed, incomplete; default: Not Started,Completed)."
    ),
    "TASKDESK_DEMO_SEED": "Start the in-memory store with a few sample tasks (default: true).",
    "TASKDESK_MAX_TITLE_WIDTH": "Clip task names in the console after N chars (default: 48).",
    # Paths (gitignored)
    "TASKDESK_DATA_DIR": "Local data directory (default: .local/taskdesk).",
}
