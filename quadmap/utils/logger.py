"""
Logger Setup with Color Support
Configures logging with console and file output
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional
from colorama import init, Fore, Style

# Initialize colorama for Windows color support
init(autoreset=True)


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support"""

    COLORS = {
        'DEBUG': Fore.CYAN,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Style.BRIGHT,
    }

    def format(self, record):
        # Color a copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{Style.RESET_ALL}"

        return super().format(record)


def setup_logger(
    name: str = 'quadmap',
    log_level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    colored: bool = True
) -> logging.Logger:
    """
    Setup logger with console and optional file output

    Args:
        name: Logger name
        log_level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        log_file: Log file name (None for auto-generated when log_dir is set)
        log_dir: Directory to store logs (None disables file output)
        colored: Use colored output in console

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Clear existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG)

    formatter_cls = ColoredFormatter if colored else logging.Formatter
    console_handler.setFormatter(formatter_cls(
        fmt='%(levelname)-8s | %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(console_handler)

    if log_file or log_dir:
        log_path = Path(log_dir or 'logs')
        log_path.mkdir(parents=True, exist_ok=True)

        if log_file is None:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            log_file = f"{name}_{timestamp}.log"

        file_handler = logging.FileHandler(
            log_path / log_file,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_path / log_file}")

    return logger


def get_logger(name: str = 'quadmap') -> logging.Logger:
    """Get existing logger or create new one with default settings"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        return setup_logger(name)

    return logger


def log_separator(logger: logging.Logger, char: str = '=', length: int = 80):
    logger.info(char * length)


def log_section(logger: logging.Logger, title: str, char: str = '=', length: int = 80):
    """Log a section header"""
    logger.info(char * length)
    logger.info(f"  {title}")
    logger.info(char * length)


def log_config(logger: logging.Logger, config: dict, title: str = "Configuration"):
    """Log configuration in a readable format"""
    log_section(logger, title)

    def log_dict(d, indent=0):
        for key, value in d.items():
            if isinstance(value, dict):
                logger.info(f"{'  ' * indent}{key}:")
                log_dict(value, indent + 1)
            else:
                logger.info(f"{'  ' * indent}{key}: {value}")

    log_dict(config)
    log_separator(logger)
