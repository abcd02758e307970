"""User-agent string reported to remote repositories."""

import platform
from importlib import metadata
from typing import Any, Mapping, Optional

from ..common.logger import get_logger

logger = get_logger("user_agent")

DISTRIBUTION_NAME = "artifact-session"
UNKNOWN_VERSION = "unknown-version"


def get_product_version(distribution: str = DISTRIBUTION_NAME) -> str:
    """Look up the installed version of a distribution.

    Falls back to ``unknown-version`` when the distribution metadata is
    missing or unreadable.
    """
    try:
        return metadata.version(distribution) or UNKNOWN_VERSION
    except (metadata.PackageNotFoundError, OSError, ValueError) as e:
        logger.debug(f"Failed to read {distribution} version: {e}")
        return UNKNOWN_VERSION


def get_user_agent(
    product_name: str,
    product_version: Optional[str] = None,
    system_properties: Optional[Mapping[str, Any]] = None,
) -> str:
    """Build ``<Product>/<Version> (<Runtime> <version>; <OS> <OS version>)``.

    The runtime is reported as Java when the system properties carry
    ``java.version``; ``os.name`` and ``os.version`` likewise override the
    host platform values.
    """
    props = system_properties or {}
    version = product_version or get_product_version()

    if props.get("java.version"):
        runtime = f"Java {props['java.version']}"
    else:
        runtime = f"Python {platform.python_version()}"
    os_name = props.get("os.name") or platform.system()
    os_version = props.get("os.version") or platform.release()

    return f"{product_name}/{version} ({runtime}; {os_name} {os_version})"
