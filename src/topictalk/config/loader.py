"""Config loader for YAML configuration files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from topictalk.config.models import SUPPORTED_VERSIONS, TopicTalkConfig
from topictalk.core.errors import ConfigError


class ConfigLoader:
    """Load TopicTalkConfig from YAML files."""

    @staticmethod
    def load(path: Path | str) -> TopicTalkConfig:
        """Load configuration from YAML file.

        Relative ``graph.path`` and ``patterns_path`` entries are resolved
        against the directory holding the config file.

        Args:
            path: Path to config directory or topictalk.yaml file

        Returns:
            Parsed TopicTalkConfig instance
        """
        config_path = Path(path)

        if config_path.is_dir():
            yaml_file = config_path / "topictalk.yaml"
            if not yaml_file.exists():
                yaml_file = config_path / "config.yaml"
            if not yaml_file.exists():
                raise FileNotFoundError(f"No config files found in {config_path}")
        else:
            yaml_file = config_path
            if not yaml_file.exists():
                raise FileNotFoundError(f"Config file not found: {yaml_file}")

        with open(yaml_file, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        try:
            config = TopicTalkConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {yaml_file}: {e}") from e

        if config.version not in SUPPORTED_VERSIONS:
            raise ConfigError(f"Unsupported config version: {config.version}")

        base = yaml_file.parent
        if config.graph.path and not Path(config.graph.path).is_absolute():
            config.graph.path = str(base / config.graph.path)
        if config.patterns_path and not Path(config.patterns_path).is_absolute():
            config.patterns_path = str(base / config.patterns_path)
        return config
