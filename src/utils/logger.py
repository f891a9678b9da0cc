"""
Logging utilities
"""
import logging
import logging.config
import time
import functools
from pathlib import Path
from typing import Callable, Any, Optional
import yaml
from config.settings import settings

PROJECT_ROOT = Path(__file__).parent.parent.parent


def setup_logging(config_path: Optional[str] = None, log_level: Optional[str] = None) -> None:
    """
    Initialize logging

    The YAML file supplies handlers and formatters; log_level always sets the
    level of the root and src loggers.

    Args:
        config_path: YAML dictConfig file, relative paths resolved against the
            project root (default: settings.log_config_path)
        log_level: level name (default: settings.log_level)
    """
    config_file = Path(config_path or settings.log_config_path)
    if not config_file.is_absolute():
        config_file = PROJECT_ROOT / config_file
    level = getattr(logging, (log_level or settings.log_level).upper())

    if config_file.exists():
        with open(config_file, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
            logging.config.dictConfig(config)
    else:
        # Fallback configuration
        logging.basicConfig(
            level=level,
            format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    logging.getLogger().setLevel(level)
    logging.getLogger("src").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger

    Args:
        name: logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_execution_time(logger: logging.Logger = None):
    """
    Decorator logging how long a function took

    Args:
        logger: logger instance (None uses the function's module logger)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            if logger is None:
                log = get_logger(func.__module__)
            else:
                log = logger

            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                execution_time = time.time() - start_time
                log.info(
                    f"{func.__name__} finished in {execution_time:.3f}s"
                )
                return result
            except Exception as e:
                execution_time = time.time() - start_time
                log.error(
                    f"{func.__name__} failed after {execution_time:.3f}s - error: {str(e)}"
                )
                raise

        return wrapper
    return decorator
