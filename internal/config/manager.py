"""
Configuration management for the markdown forms renderer.
"""

import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "markdown": {
        "escape": True,
        "plugins": ["table", "strikethrough"],
        "allow_spaces_in_links": True,
    },
    "logging": {
        "level": "WARNING",
        "console": True,
    },
}


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace environment variable placeholders with actual values.

    Args:
        match: A regex match object containing the environment variable name.

    Returns:
        str: The value of the environment variable or the original placeholder
             if the variable is not set.
    """
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ${VAR_NAME} placeholders in strings, dicts and lists."""
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


class ConfigManager:
    """Manages configuration loading for the markdown forms renderer."""

    def __init__(self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None):
        """Initialize ConfigManager with config file path and optional config directories."""
        self.configPath = configPath
        self.configDirs = configDirs or []
        self.config = substituteEnvVars(self._loadConfig())

    def _findTomlFilesRecursive(self, directory: str) -> List[Path]:
        """Recursively find all .toml files in a directory."""
        tomlFiles: List[Path] = []
        dirPath = Path(directory)

        if not dirPath.exists():
            logger.warning(f"Config directory {directory} does not exist, skipping")
            return tomlFiles

        if not dirPath.is_dir():
            logger.warning(f"Config path {directory} is not a directory, skipping")
            return tomlFiles

        for tomlFile in dirPath.rglob("*.toml"):
            if tomlFile.is_file():
                tomlFiles.append(tomlFile)
                logger.debug(f"Found config file: {tomlFile}")

        return sorted(tomlFiles)

    def _mergeConfigs(self, baseConfig: Dict[str, Any], newConfig: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge two configuration dictionaries."""
        merged = baseConfig.copy()

        for key, value in newConfig.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._mergeConfigs(merged[key], value)
            else:
                merged[key] = value

        return merged

    def _loadConfig(self) -> Dict[str, Any]:
        """
        Load configuration on top of the defaults.

        The main TOML file is optional: the renderer has no mandatory
        settings. Files found in the config directories are merged in
        sorted order, later files overriding earlier ones.

        Raises:
            SystemExit: If the main configuration file cannot be parsed
        """
        config = self._mergeConfigs({}, DEFAULT_CONFIG)

        configFile = Path(self.configPath)
        if configFile.exists():
            try:
                with open(configFile, "rb") as f:
                    config = self._mergeConfigs(config, tomli.load(f))
                logger.info(f"Loaded main config from {self.configPath}")
            except (OSError, tomli.TOMLDecodeError) as e:
                logger.error(f"Failed to load configuration: {e}")
                sys.exit(1)
        else:
            logger.debug(f"Configuration file {self.configPath} not found, using defaults")

        for configDir in self.configDirs:
            tomlFiles = self._findTomlFilesRecursive(configDir)
            logger.info(f"Found {len(tomlFiles)} .toml files in {configDir}")

            for tomlFile in tomlFiles:
                try:
                    with open(tomlFile, "rb") as f:
                        config = self._mergeConfigs(config, tomli.load(f))
                    logger.info(f"Merged config from {tomlFile}")
                except (OSError, tomli.TOMLDecodeError) as e:
                    # Continue with other files instead of exiting
                    logger.error(f"Failed to load config file {tomlFile}: {e}")

        return config

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging-specific configuration."""
        return self.get("logging", {})

    def getMarkdownConfig(self) -> Dict[str, Any]:
        """Get FormsMarkdown options."""
        return self.get("markdown", {})
