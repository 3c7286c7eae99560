import json
import logging
import re
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .errors import ConfigError
from .models import EnterpriseConfig
from .script_literal import LiteralParseError, parse_object_literal

logger = logging.getLogger(__name__)

# Checked in order; the first one that exists and parses wins.
CONFIG_FILE_NAMES = ("config.json", "config.js", "enterprise.config.json")

MODULE_EXPORTS_PATTERN = re.compile(r"module\.exports\s*=\s*(\{[\s\S]*\})\s*;?\s*\Z")


def _validate(data, config_path: Path) -> EnterpriseConfig:
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must contain an object, got {type(data).__name__}")
    try:
        return EnterpriseConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> EnterpriseConfig:
    # json.JSONDecodeError is left to propagate: a broken JSON config aborts the run.
    return _validate(json.loads(config_path.read_text(encoding="utf-8", errors="replace")), config_path)


def _load_script_config(config_path: Path, template_path: str) -> Optional[EnterpriseConfig]:
    match = MODULE_EXPORTS_PATTERN.search(config_path.read_text(encoding="utf-8", errors="replace"))
    if not match:
        logger.error(f"Error parsing JS config for {template_path}: no 'module.exports = {{...}}' object found in {config_path}")
        return None
    try:
        return _validate(parse_object_literal(match.group(1)), config_path)
    except (LiteralParseError, ConfigError) as e:
        logger.error(f"Error parsing JS config for {template_path}: {e}")
        return None


def find_enterprise_config(template_path: str) -> Optional[EnterpriseConfig]:
    """
    Resolves the enterprise settings for a template from its own directory.

    Returns None when no candidate file exists or none of the script configs
    could be parsed. A JSON config with a syntax error raises instead.
    """
    template_dir = Path(template_path).parent
    for name in CONFIG_FILE_NAMES:
        config_path = template_dir / name
        if not config_path.is_file():
            continue
        logger.debug(f"Reading enterprise config {config_path}")
        if config_path.suffix == ".json":
            return _load_json_config(config_path)
        config = _load_script_config(config_path, template_path)
        if config is not None:
            return config

    logger.warning(f"Warning: No config file found for template {template_path}")
    return None
