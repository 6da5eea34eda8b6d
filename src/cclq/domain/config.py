from __future__ import annotations

"""
Runtime Configuration Domain.

Defines the default session configuration consumed by the CLI and the
environment variables that may override it. Precedence, lowest first:
defaults, environment, command-line flags.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CURRENT_VERSION = "0.1.0"
OUTPUT_FORMATS = ("ccl", "json", "flat")
DEFAULT_OUTPUT_FORMAT = "ccl"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_JSON_INDENT = 2

ENV_LOG_LEVEL = "CCLQ_LOG_LEVEL"
ENV_LOG_FILE = "CCLQ_LOG_FILE"
ENV_MAX_DEPTH = "CCLQ_MAX_DEPTH"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Sources (empty means stdin)
        "files": [],

        # Query paths (empty means print everything)
        "queries": [],

        # Rendering
        "output_format": DEFAULT_OUTPUT_FORMAT,
        "json_indent": DEFAULT_JSON_INDENT,

        # Resource bounds (None means unbounded)
        "max_depth": None,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": None,
    }


def load_env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Collect configuration overrides from environment variables.

    Values are returned raw; type coercion is left to the validator.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Dict[str, Any]: Only the keys whose variables are set and non-empty.
    """
    env = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}

    level = (env.get(ENV_LOG_LEVEL) or "").strip()
    if level:
        overrides["log_level"] = level

    log_file = (env.get(ENV_LOG_FILE) or "").strip()
    if log_file:
        overrides["log_file"] = log_file

    max_depth = (env.get(ENV_MAX_DEPTH) or "").strip()
    if max_depth:
        overrides["max_depth"] = max_depth

    if overrides:
        logger.debug(f"Environment overrides detected: {sorted(overrides)}")
    return overrides
