# logger_utils.py -  log messages and timing metrics for training/generation runs

import os
import sys
import time
from datetime import datetime
from typing import Optional, TextIO

# Directory where log files go unless a path is given
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "markov_generator.log")

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Log:
    """Lightweight logger that appends to a file and optionally echoes to a stream."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(self,
                 path: Optional[str] = None,
                 use_color: bool = True,
                 stream: Optional[TextIO] = sys.stderr,
                 level: str = "INFO"):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.stream = stream
        if level not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        self.level = level

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if LEVELS.index(level) < LEVELS.index(self.level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        self._append(line)

        if self.stream is None:
            return
        if self.use_color and level in self.COLORS:
            self.stream.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
        else:
            self.stream.write(line + "\n")

    def _append(self, line: str):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (timings, counts) to the log file only.
        Example: [12:45:02] train corpus.txt: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        self._append(f"[{ts}] {tag}: {value}{unit}")

    def time_block(self, label):
        """
        Measure the execution time of a code block.
            with log.time_block("training"):
                chain.train_text(text)
        The duration is recorded as a metric and kept on the timer as `.elapsed`.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 6), "s")
