from .singleton import Singleton, SingletonMeta
from .config_loader import ConfigLoader, ConfigError
from .log_formatter import ColoredFormatter, setup_logger

__all__ = ['Singleton', 'SingletonMeta', 'ConfigLoader', 'ConfigError', 'ColoredFormatter', 'setup_logger']
