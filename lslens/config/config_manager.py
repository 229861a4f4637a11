import os
import json
import click
from typing import Dict, Any

from lslens.core.records import SortMode


class ConfigManager:
    """
    Manages saved defaults for lslens, stored as JSON in the user's config directory.
    """
    DEFAULT_CONFIG = {
        'sort_by': 'none',           # Sort order: 'none', 'name', 'size', 'time', 'extension', 'version'
        'human_readable': False,     # Show sizes as 1.5K, 3.0M, ...
        'output_format': 'text',     # Output format: 'text', 'table' or 'json'
        'show_owners': False,        # Add owner and group columns
        'log_path': None,            # Log file path (None logs warnings to stderr)
    }

    BOOL_KEYS = ('human_readable', 'show_owners')
    OUTPUT_FORMATS = ('text', 'table', 'json')

    @classmethod
    def _get_config_path(cls) -> str:
        """
        Get the path to the configuration file.
        """
        config_dir = os.path.expanduser('~/.config/lslens')
        os.makedirs(config_dir, exist_ok=True)
        return os.path.join(config_dir, 'config.json')

    @classmethod
    def load_config(cls) -> Dict[str, Any]:
        """
        Load configuration from file, merging with defaults.
        """
        config_path = cls._get_config_path()
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                saved_config = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError):
            return cls.DEFAULT_CONFIG.copy()
        if not isinstance(saved_config, dict):
            return cls.DEFAULT_CONFIG.copy()
        return {**cls.DEFAULT_CONFIG, **saved_config}

    @classmethod
    def save_config(cls, config: Dict[str, Any]):
        """
        Save configuration to file.
        """
        config_path = cls._get_config_path()
        # Remove keys with None or default values
        clean_config = {
            k: v for k, v in config.items()
            if v is not None and v != cls.DEFAULT_CONFIG.get(k)
        }

        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(clean_config, f, indent=4)

    @classmethod
    def reset_config(cls):
        """
        Reset configuration to default values.
        """
        config_path = cls._get_config_path()
        try:
            os.remove(config_path)
        except FileNotFoundError:
            pass

    @classmethod
    def update_config(cls, updates: Dict[str, Any]):
        """
        Update specific configuration values.
        """
        current_config = cls.load_config()
        current_config.update({k: v for k, v in updates.items() if v is not None})
        cls.save_config(current_config)

    @classmethod
    def sort_mode(cls, config: Dict[str, Any]) -> SortMode:
        """Sort mode named by a config, DEFAULT when unknown"""
        return SortMode.from_name(config.get('sort_by'))


def config_command(action, key=None, value=None):
    """
    Handle configuration management CLI actions.
    """
    if action == 'view':
        config = ConfigManager.load_config()
        for k, v in config.items():
            click.echo(f"{k}: {v}")

    elif action == 'reset':
        ConfigManager.reset_config()
        click.echo("Configuration reset to default.")

    elif action == 'set':
        if not key or value is None:
            click.echo("Error: Both key and value are required.", err=True)
            return

        if key not in ConfigManager.DEFAULT_CONFIG:
            click.echo(f"Unknown setting {key}.", err=True)
            return

        if key in ConfigManager.BOOL_KEYS:
            value = value.lower() in ['true', '1', 'yes']
        elif key == 'sort_by':
            value = value.lower()
            if SortMode.from_name(value).value != value:
                click.echo(f"Invalid value for {key}.", err=True)
                return
        elif key == 'output_format' and value not in ConfigManager.OUTPUT_FORMATS:
            click.echo(f"Invalid value for {key}.", err=True)
            return

        ConfigManager.update_config({key: value})
        click.echo(f"Set {key} to {value}")
