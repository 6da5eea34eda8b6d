from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between raw configuration sources (defaults, environment, CLI) and
the runtime. Coerces loosely typed inputs, fills missing keys with defaults and
reports every correction as a warning, or raises when strict mode is on.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from cclq.domain.config import OUTPUT_FORMATS, get_default_config

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
        list of warnings describing every correction applied.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on a value of the right type but out of range.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing & Normalization
    merged["files"] = _as_list_str(
        merged.get("files"), defaults["files"], "files", warnings, strict, strip_items=True
    )
    merged["queries"] = _as_list_str(
        merged.get("queries"), defaults["queries"], "queries", warnings, strict, strip_items=False
    )
    merged["output_format"] = _as_choice(
        merged.get("output_format"), defaults["output_format"], OUTPUT_FORMATS,
        "output_format", warnings, strict, upper=False,
    )
    merged["log_level"] = _as_choice(
        merged.get("log_level"), defaults["log_level"], _LOG_LEVELS,
        "log_level", warnings, strict, upper=True,
    )
    merged["json_indent"] = _as_int(
        merged.get("json_indent"), defaults["json_indent"], 0, "json_indent", warnings, strict
    )
    merged["max_depth"] = _as_optional_int(
        merged.get("max_depth"), 1, "max_depth", warnings, strict
    )
    merged["log_file"] = _as_optional_str(merged.get("log_file"), "log_file", warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_list_str(
        value: Any,
        fallback: List[str],
        field: str,
        warnings: List[str],
        strict: bool,
        *,
        strip_items: bool,
) -> List[str]:
    """Ensure input is a list of strings; a bare string becomes a one-item list."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        warnings.append(f"Field '{field}' converted from string to single-item list.")
        value = [value]

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if not isinstance(item, str):
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
                continue
            if strip_items:
                item = item.strip()
                if not item:
                    continue
            out.append(item)
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


def _as_choice(
        value: Any,
        fallback: str,
        choices: Sequence[str],
        field: str,
        warnings: List[str],
        strict: bool,
        *,
        upper: bool,
) -> str:
    """Validate a string against a closed set of (case-insensitive) choices."""
    if value is None:
        return fallback
    if not isinstance(value, str):
        msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    v = value.strip().upper() if upper else value.strip().lower()
    if v in choices:
        return v

    msg = f"Invalid field '{field}': '{value}' is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_int(
        value: Any,
        fallback: int,
        minimum: int,
        field: str,
        warnings: List[str],
        strict: bool,
) -> int:
    """Coerce to an int not lower than `minimum`."""
    if value is None:
        return fallback
    parsed = _coerce_int(value, field, warnings, strict)
    if parsed is None:
        return fallback
    if parsed < minimum:
        msg = f"Invalid field '{field}': {parsed} is lower than {minimum}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback
    return parsed


def _as_optional_int(
        value: Any,
        minimum: int,
        field: str,
        warnings: List[str],
        strict: bool,
) -> Optional[int]:
    """Like _as_int, but None (unbounded) is both allowed and the fallback."""
    if value is None:
        return None
    parsed = _coerce_int(value, field, warnings, strict)
    if parsed is None:
        return None
    if parsed < minimum:
        msg = f"Invalid field '{field}': {parsed} is lower than {minimum}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Ignoring bound.")
        return None
    return parsed


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        v = value.strip()
        return v or None

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignoring value.")
    return None


def _coerce_int(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[int]:
    """Accept ints as-is and numeric strings (non-strict only)."""
    if isinstance(value, bool):
        msg = f"Invalid field '{field}': expected int, received bool."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Ignoring value.")
        return None
    if isinstance(value, int):
        return value

    if isinstance(value, str) and not strict:
        s = value.strip()
        try:
            parsed = int(s)
        except ValueError:
            pass
        else:
            warnings.append(f"Field '{field}' converted from '{value}' to {parsed}.")
            return parsed

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignoring value.")
    return None
