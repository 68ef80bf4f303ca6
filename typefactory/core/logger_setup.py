import logging
from pathlib import Path
from typing import Optional

from .config import LoggingConfig, get_config


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Configure package logging based on config settings.

    Args:
        config: Logging settings. Defaults to the active configuration's.

    Returns:
        The configured ``typefactory`` logger
    """
    config = config or get_config().logging

    logger = logging.getLogger('typefactory')
    logger.setLevel(config.level)

    formatter = logging.Formatter(config.format)

    # Drop handlers from an earlier call so repeated setup does not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.file_path:
        log_dir = Path(config.file_path).parent
        if not log_dir.exists():
            log_dir.mkdir(parents=True)
        file_handler = logging.FileHandler(config.file_path, mode='a')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
