import logging
import logging.config
import re
from pathlib import Path
from typing import Optional

# ANSI escape codes (colours, bold...) emitted by coloured console formatters
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


class StripAnsiFilter(logging.Filter):
    """Remove ANSI colour codes from records written to log files."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if isinstance(record.msg, str):
            record.msg = ANSI_ESCAPE_RE.sub("", record.msg)
        return True


def attach_strip_ansi_to_file_handlers() -> None:
    """Attach StripAnsiFilter to every FileHandler on the root logger."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.addFilter(StripAnsiFilter())


def configure_logging(config_file: Optional[str], level: str = "INFO") -> Optional[Path]:
    """
    Configure logging from an ini file when present, else fall back to basicConfig.

    Returns the path of the ini file that was loaded, or None for the fallback.
    """
    if config_file:
        config_path = Path(config_file)
        if not config_path.is_absolute():
            config_path = Path(__file__).resolve().parent.parent.parent / config_path
        if config_path.exists():
            logging.config.fileConfig(config_path, disable_existing_loggers=False)
            attach_strip_ansi_to_file_handlers()
            return config_path

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=DEFAULT_FORMAT,
        datefmt=DEFAULT_DATEFMT,
    )
    return None
