"""Custom log formatter with color support and abbreviated level markers"""
import logging
import os
from datetime import datetime


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support and short level names"""

    # ANSI color codes
    COLORS = {
        'WARNING': '\033[93m',  # Yellow
        'ERROR': '\033[91m',    # Red
        'CRITICAL': '\033[91m', # Red
        'RESET': '\033[0m'      # Reset
    }

    # Short level names mapping
    LEVEL_NAMES = {
        'DEBUG': 'D',
        'INFO': 'I',
        'WARNING': 'W',
        'ERROR': 'E',
        'CRITICAL': 'C'
    }

    def __init__(self, fmt=None, datefmt=None, use_colors=False):
        """
        Initialize formatter

        Args:
            fmt: Log format string
            datefmt: Date format string
            use_colors: Whether to apply ANSI colors to console output
        """
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record):
        """Format log record with short level name and optional colors"""
        original_levelname = record.levelname
        record.levelname = self.LEVEL_NAMES.get(original_levelname, original_levelname)
        try:
            formatted = super().format(record)
        finally:
            # other handlers share the same record
            record.levelname = original_levelname

        if self.use_colors and original_levelname in self.COLORS:
            formatted = f"{self.COLORS[original_levelname]}{formatted}{self.COLORS['RESET']}"

        return formatted


LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
LOG_DATEFMT = '%m-%d %H:%M:%S'


def setup_logger(name, config=None):
    """Setup a named logger writing to a dated file and the console
    Args:
        name: logger name, also used for the log file name
        config: loaded configuration dict, only the 'logging' section is read
    Returns:
        logging.Logger: Configured logger instance
    """
    log_config = (config or {}).get('logging', {})
    log_dir = log_config.get('directory', 'logs')
    level = getattr(logging, str(log_config.get('level', 'INFO')).upper(), logging.INFO)
    use_colors = bool(log_config.get('use_colors', True))

    os.makedirs(log_dir, exist_ok=True)
    current_date = datetime.now().strftime('%Y-%m-%d')
    log_file = os.path.join(log_dir, f'{name}_{current_date}.log')

    logger = logging.getLogger(name)

    # Clear any existing handlers
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    logger.setLevel(level)

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(ColoredFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT, use_colors=False))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT, use_colors=use_colors))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
