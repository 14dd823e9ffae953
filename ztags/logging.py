"""Run logging for debugging tag generation."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

# Log directory
LOG_DIR = Path.home() / ".ztags" / "logs"


class RunLogger:
    """Logs the stages of a ztags run to a JSONL file.

    A disabled logger accepts every call and writes nothing.
    """

    def __init__(self, enabled: bool = False, log_dir: Optional[Path] = None):
        self.enabled = enabled
        self.log_dir = Path(log_dir) if log_dir else LOG_DIR
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        self.log_file = self.log_dir / f"run_{self.session_id}.jsonl"

    def log_run_start(self, path: str, output: str) -> None:
        """Log the input file and output target."""
        self._write_entry({
            "type": "run_start",
            "path": path,
            "output": output,
        })

    def log_parse(self, path: str, declarations: int, has_errors: bool) -> None:
        self._write_entry({
            "type": "parse",
            "path": path,
            "declarations": declarations,
            "has_errors": has_errors,
        })

    def log_run_end(self, path: str, tags: int) -> None:
        self._write_entry({
            "type": "run_end",
            "path": path,
            "tags": tags,
        })

    def log_error(self, error: str) -> None:
        """Log error."""
        self._write_entry({
            "type": "error",
            "error": error,
        })

    def _write_entry(self, entry: dict) -> None:
        """Write a log entry to file."""
        if not self.enabled:
            return
        entry["timestamp"] = datetime.now().isoformat()
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry, ensure_ascii=False) + "\n")
        except OSError:
            pass  # Logging must not break tag generation

    @property
    def log_path(self) -> Path:
        """Return path to current log file."""
        return self.log_file


# Global logger instance
_logger: Optional[RunLogger] = None


def get_logger() -> RunLogger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = RunLogger()
    return _logger


def init_logger(enabled: bool, log_dir: Optional[str] = None) -> RunLogger:
    """Initialize the global logger."""
    global _logger
    _logger = RunLogger(enabled=enabled, log_dir=Path(log_dir) if log_dir else None)
    return _logger
