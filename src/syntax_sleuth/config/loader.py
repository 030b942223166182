"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from pathlib import Path

import yaml

from .schema import SleuthConfig


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ValueError: If a referenced environment variable is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ValueError(f"Environment variable {var_name} not found")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def load_config(path: Path | None = None) -> SleuthConfig:
    """
    Load configuration from YAML file with environment variable substitution.

    Without a path the defaults (plus any SYNTAX_SLEUTH_ environment
    overrides) are returned.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated SleuthConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If environment variables are missing or config is invalid
        ValidationError: If config doesn't match schema
    """
    if path is None:
        config = SleuthConfig()
        validate_config(config)
        return config

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with path.open() as f:
        raw_yaml = f.read()

    yaml_with_env = substitute_env_vars(raw_yaml)

    # An empty file is a valid "all defaults" config
    config_dict = yaml.safe_load(yaml_with_env) or {}
    if not isinstance(config_dict, dict):
        raise ValueError(f"Configuration root must be a mapping: {path}")

    config = SleuthConfig.model_validate(config_dict)

    validate_config(config)

    return config


def validate_config(config: SleuthConfig) -> None:
    """
    Perform additional cross-field validation.

    A word cannot both open and close a block.

    Args:
        config: Configuration to validate

    Raises:
        ValueError: If keyword sets overlap
    """
    language = config.language
    openers = set(language.block_keywords) | set(language.trailing_keywords)
    overlap = openers & set(language.terminator_keywords)
    if overlap:
        raise ValueError(
            f"Keywords cannot be both openers and terminators: {', '.join(sorted(overlap))}"
        )
