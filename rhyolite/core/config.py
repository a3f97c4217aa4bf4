#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
config.py - Configuration management for Rhyolite

This module centralizes configuration settings loaded from multiple sources:
1. Default values
2. Configuration file
3. Environment variables (a .env file is loaded first)
4. Command line arguments (overrides all others)
"""

import os
import yaml
from typing import Any, Optional, List
from dotenv import load_dotenv


class Config:
    """
    Configuration manager for Rhyolite.

    This class provides a unified interface for all application settings,
    with prioritized loading from multiple sources.
    """

    # Default configuration values
    DEFAULTS = {
        # General settings
        "workspace_path": "",  # Falls back to the current directory
        "verbose": False,
        "progress": True,

        # Command availability
        "enabled": True,
        "allowed_directories": [],

        # Index documents
        "index_filename": "index.md",
        "index_title": "Index",
        "note_extension": ".md",

        # Note creation
        "assume_yes": False,
    }

    # Map config keys to environment variable names
    ENV_MAPPING = {
        "workspace_path": "RHYOLITE_WORKSPACE",
        "enabled": "RHYOLITE_ENABLED",
        "allowed_directories": "RHYOLITE_ALLOWED_DIRECTORIES",
        "verbose": "RHYOLITE_VERBOSE",
    }

    def __init__(self, config_file: Optional[str] = None, load_env: bool = True):
        """
        Initialize the configuration manager.

        Args:
            config_file: Path to a configuration file to load from
            load_env: Whether to read .env and environment variables
        """
        self._config = {
            key: list(value) if isinstance(value, list) else value
            for key, value in self.DEFAULTS.items()
        }

        if config_file:
            self.load_from_file(config_file)
        else:
            for path in self.default_locations():
                if os.path.exists(path):
                    self.load_from_file(path)
                    break

        if load_env:
            load_dotenv()
            self.load_from_env()

    @staticmethod
    def default_locations() -> List[str]:
        """Configuration files tried when none is given explicitly."""
        return [
            os.path.join(os.getcwd(), "rhyolite.yaml"),
            os.path.expanduser("~/.config/rhyolite/config.yaml"),
        ]

    def load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a YAML file.

        Unknown keys are ignored. A file that can't be read or parsed is
        reported and skipped.

        Args:
            config_file: Path to the configuration file
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Error loading configuration from {config_file}: {str(e)}")
            return

        if isinstance(config_data, dict):
            for key, value in config_data.items():
                if key in self:
                    self[key] = value

    def load_from_env(self) -> None:
        """Load configuration from environment variables."""
        for config_key, env_var in self.ENV_MAPPING.items():
            if env_var not in os.environ:
                continue
            value = os.environ[env_var]

            # Convert to the type of the default
            default = self.DEFAULTS[config_key]
            if isinstance(default, bool):
                value = value.lower() in ('true', 'yes', '1')
            elif isinstance(default, list):
                value = [part for part in value.split(os.pathsep) if part]

            self[config_key] = value

    def load_from_args(self, args: Any) -> None:
        """
        Load configuration from parsed command line arguments.

        Args:
            args: argparse.Namespace; only attributes that are set and known
                  to the configuration are applied
        """
        for key, value in vars(args).items():
            config_key = key.replace('-', '_')
            if value is not None and config_key in self:
                self[config_key] = value

    @property
    def workspace_root(self) -> str:
        """Absolute workspace directory."""
        return os.path.abspath(os.path.expanduser(self._config["workspace_path"] or os.getcwd()))

    def __getitem__(self, key: str) -> Any:
        return self._config.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self._config[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._config

    def save_to_file(self, config_file: str) -> bool:
        """
        Save the current configuration to a file.

        Args:
            config_file: Path where to save the configuration

        Returns:
            True if successful, False otherwise
        """
        try:
            with open(config_file, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self._config, f, default_flow_style=False)
            return True
        except OSError as e:
            print(f"Error saving configuration to {config_file}: {str(e)}")
            return False


# Global configuration instance
config = Config()
