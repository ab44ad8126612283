import copy
import os

import yaml

DEFAULT_CONFIG_PATH = 'config.yaml'

DEFAULT_CONFIG = {
    'cinema': {
        'capacity': 10,
    },
    'logging': {
        'directory': 'logs',
        'level': 'INFO',
        'use_colors': True,
    },
}


class ConfigError(Exception):
    """Raised when config.yaml cannot be read or holds invalid values"""


class ConfigLoader:
    @staticmethod
    def get_config_path():
        """Config file path, CINEMA_CONFIG overrides the default"""
        return os.environ.get('CINEMA_CONFIG', DEFAULT_CONFIG_PATH)

    @staticmethod
    def load_config(path=None):
        """Load config.yaml merged over the defaults
        Args:
            path: optional explicit file path
        Returns:
            dict: full configuration
        """
        path = path or ConfigLoader.get_config_path()
        config = copy.deepcopy(DEFAULT_CONFIG)

        if not os.path.exists(path):
            return config

        try:
            with open(path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load {path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigError(f"{path} must contain a mapping at the top level")

        ConfigLoader._merge(config, loaded)
        ConfigLoader._validate(config)
        return config

    @staticmethod
    def get_capacity(config=None):
        """Seat capacity of the screen"""
        if config is None:
            config = ConfigLoader.load_config()
        return config['cinema']['capacity']

    @staticmethod
    def _merge(base, override):
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                ConfigLoader._merge(base[key], value)
            else:
                base[key] = value

    @staticmethod
    def _validate(config):
        for section in ('cinema', 'logging'):
            if not isinstance(config.get(section), dict):
                raise ConfigError(f"'{section}' section must be a mapping")

        capacity = config['cinema'].get('capacity')
        # bool is an int subclass
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise ConfigError(f"cinema.capacity must be a non-negative integer, got {capacity!r}")
