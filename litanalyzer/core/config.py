"""
Configuration management for litanalyzer.
"""
from typing import Any


class Configuration:
    """Configuration manager for litanalyzer."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Configuration, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Initialize the configuration with defaults."""
        self._config = {
            'analysis': {
                'property_decorator': 'property',
                'static_properties_name': 'properties',
                'custom_element_decorator': 'customElement',
                'lit_base_classes': ['LitElement', 'ReactiveElement'],
                'skip_failed_classes': True,
                'file_extensions': ['.ts', '.tsx', '.js', '.jsx', '.mjs']
            },
            'logging': {
                'level': 'WARNING'
            }
        }

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        try:
            return self._config[section][key]
        except KeyError:
            return default

    def set(self, section: str, key: str, value: Any):
        """Set a configuration value."""
        if section not in self._config:
            self._config[section] = {}
        self._config[section][key] = value

    def reset(self):
        """Restore the defaults."""
        self._initialize()

# Initialize configuration
config = Configuration()
