# logger_utils.py - session log for the explorer UIs, written to a file

import os
from datetime import datetime

# Path to the default log file, can be overriden (config key "log_path")
DEFAULT_LOG_PATH = os.path.join("logs", "trie_explorer.log")


class Log:
    """Lightweight logger writing timestamped lines to a file."""

    def __init__(self, path: str = None):
        self.path = path or DEFAULT_LOG_PATH

    def write(self, level: str, msg: str) -> str:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
        return line

    # Public logging methods
    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)
