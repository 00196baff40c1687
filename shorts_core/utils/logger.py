import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from shorts_core.config_manager import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logger(log_dir: str, settings: Optional[LoggingConfig] = None, level: Optional[str] = None) -> Any:
    """
    Points loguru at the console and at `<log_dir>/<file_stem>.log`.

    Args:
        log_dir (str): Directory for the log files; created when missing.
        settings (LoggingConfig): The `logging` section of settings.yaml.
        level (str): Console level override, e.g. from `--log-level`.
    """
    settings = settings or LoggingConfig()
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=(level or settings.level).upper())

    file_options = {"rotation": settings.rotation, "retention": settings.retention}
    logger.add(log_path / f"{settings.file_stem}.log", level="DEBUG", **file_options)

    if settings.json_sink:
        logger.add(log_path / f"{settings.file_stem}.json.log", level="INFO", serialize=True, **file_options)

    logger.debug(f"Logging to {log_path.absolute()} (stem={settings.file_stem})")
    return logger
