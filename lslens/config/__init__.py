"""Saved defaults for lslens"""
from lslens.config.config_manager import ConfigManager, config_command

__all__ = ['ConfigManager', 'config_command']
