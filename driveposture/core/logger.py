"""
Logging setup - reads its settings from system_config.json
"""
import logging
import os
from datetime import datetime
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _load_logging_section():
    """Return the `logging` section of system_config.json, or None when unavailable."""
    try:
        # Deferred import to avoid a cycle with config_loader
        from driveposture.core.config_loader import find_config_path, load_config

        config_path = find_config_path()
        if config_path is None or not config_path.exists():
            return None
        return load_config(config_path=config_path).get("logging")
    except (OSError, ValueError) as e:
        # A broken config must not stop the logger from starting
        logging.getLogger(__name__).warning(
            "Could not read logging settings from system_config.json, using defaults: %s", e
        )
        return None


def setup_logger(
    name: str = 'DrivePosture',
    level: Optional[int] = None,
    log_dir: Optional[str] = None,
    enable_console: Optional[bool] = None,
    enable_file: Optional[bool] = None,
    max_size_mb: int = 10,
    file_rotation: str = 'daily'
) -> logging.Logger:
    """
    Configure a logger (parameters fall back to system_config.json)

    Priority:
    1. Explicit argument
    2. Environment variable DRIVEPOSTURE_LOG_LEVEL (level only)
    3. `logging` section of system_config.json
    4. Defaults (INFO, console only)

    Args:
        name: Logger name
        level: Log level (None reads from config)
        log_dir: Directory for log files (None reads from config)
        enable_console: Attach a console handler (None reads from config)
        enable_file: Attach a file handler (None reads from config, default off)
        max_size_mb: Maximum file size for size rotation (MB)
        file_rotation: 'daily' or 'size'

    Returns:
        logger: Configured logger
    """
    section = _load_logging_section()

    if level is None:
        env_level = os.getenv("DRIVEPOSTURE_LOG_LEVEL")
        if env_level:
            level = getattr(logging, env_level.upper(), logging.INFO)
        elif section is not None:
            level_str = section.get('level', 'INFO')
            level = getattr(logging, str(level_str).upper(), logging.INFO)
        else:
            level = logging.INFO

    if log_dir is None:
        log_dir = section.get('log_dir', 'logs') if section is not None else 'logs'

    if enable_console is None:
        enable_console = section.get('enable_console', True) if section is not None else True

    if enable_file is None:
        # Embedded library: no files unless the host asks for them
        enable_file = section.get('enable_file', False) if section is not None else False

    if section is not None:
        file_rotation = section.get('file_rotation', file_rotation)
        max_size_mb = section.get('max_size_mb', max_size_mb)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Do not stack handlers on repeated setup
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if enable_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        if file_rotation == 'daily':
            log_file = log_path / f'{name}_{datetime.now().strftime("%Y%m%d")}.log'
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
        else:
            log_file = log_path / f'{name}.log'
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_size_mb * 1024 * 1024,
                backupCount=5,
                encoding='utf-8'
            )

        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# Shared package logger
logger = setup_logger()
