"""Request document loading for artifact-session.

Reads YAML documents and expands environment variable references in
their string values, so credentials can be supplied by the build
environment instead of being written into the document.
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .logger import get_logger

logger = get_logger("config")

# ${NAME}, ${NAME:-default} or $NAME
ENV_REFERENCE = re.compile(
    r"\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
    r"|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load a YAML request document.

    Args:
        config_path: Path to the document

    Returns:
        Document mapping with environment references expanded

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file is invalid YAML
        TypeError: If the document root is not a mapping
    """
    config_file = Path(config_path)
    if not config_file.is_file():
        raise FileNotFoundError(f"Request document not found: {config_path}")

    with config_file.open("r") as f:
        document = yaml.safe_load(f)

    if document is None:
        logger.debug(f"Request document {config_file} is empty")
        return {}
    if not isinstance(document, dict):
        raise TypeError(
            f"Request document root must be a mapping, got {type(document).__name__}"
        )

    return expand_env_vars(document)


def expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment references in string values.

    ``${NAME:-default}`` falls back to ``default`` when NAME is unset.
    References to unset variables without a default are left as written.
    Mapping keys are never expanded.
    """
    if isinstance(obj, dict):
        return {key: expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [expand_env_vars(item) for item in obj]
    if isinstance(obj, str):
        return ENV_REFERENCE.sub(_resolve_reference, obj)
    return obj


def _resolve_reference(match: "re.Match[str]") -> str:
    name = match.group("braced") or match.group("bare")
    value = os.environ.get(name)
    if value is not None:
        return value
    if match.group("default") is not None:
        return match.group("default")
    logger.debug(f"Environment variable {name} is not set")
    return match.group(0)
