"""Logging utilities with JSON formatting."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


class JSONFormatter(logging.Formatter):
    """Custom formatter that outputs JSON lines."""
    
    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_data = {
            "timestamp": timestamp.replace(tzinfo=None).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        
        # Timer records carry their label and raw duration
        if hasattr(record, 'extra_data'):
            log_data.update(record.extra_data)
            
        return json.dumps(log_data, ensure_ascii=False)


def setup_logger(
    log_path: Optional[Path] = None,
    verbose: bool = False,
    level: int = logging.DEBUG,
    name: str = "timelapse",
) -> logging.Logger:
    """
    Set up a logger with JSON formatting for timer records.
    
    Intended for the application's entry point; the library itself never
    calls it.
    
    Args:
        log_path: Directory to write a JSONL log file to (no file when None)
        verbose: Whether to also log to the console
        level: Minimum level the logger accepts
        name: Logger to configure
        
    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Remove any existing handlers
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    
    if log_path is not None:
        log_path = Path(log_path)
        log_path.mkdir(parents=True, exist_ok=True)
        
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S")
        log_file = log_path / f"timelapse_{timestamp}.jsonl"
        
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)
    
    if verbose:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(JSONFormatter())
        logger.addHandler(console_handler)
    
    # Keep the silent default when nothing was requested
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    
    return logger
