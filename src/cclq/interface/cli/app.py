from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults,
environment, flags), logging bootstrap, loading and merging of sources,
query execution and result rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from cclq.core.canonical.printer import pretty, pretty_key_vals
from cclq.core.query import query_many
from cclq.core.services.loader import load_key_vals, load_sources
from cclq.core.stages.validator import validate_config
from cclq.domain.canonical_models import CCL
from cclq.domain.config import get_default_config, load_env_overrides
from cclq.domain.errors import (
    KeyNotFoundError,
    NestingTooDeepError,
    SourceParseError,
    SourceReadError,
)
from cclq.infra.fs import STDIN_MARKER, normalize_path, read_source
from cclq.infra.logging import LoggingConfig, configure_logging, get_logger
from cclq.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)
    if args.flat and args.queries:
        parser.error("--flat cannot be combined with -q/--query")

    # 2. Resolve configuration hierarchy (defaults < environment < flags)
    raw_conf: Dict[str, Any] = get_default_config()
    raw_conf.update(load_env_overrides())
    raw_conf.update(cli_args.args_to_overrides(args))

    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (stderr, optional rotating file)
    configure_logging(
        LoggingConfig(level=conf["log_level"], console=True, log_file=conf["log_file"]),
        force=True,
    )
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    logger.debug(f"Resolved configuration: {conf}")

    # 4. Execution phase
    try:
        if conf["output_format"] == "flat":
            return _run_flat(conf)
        return _run_merge(conf)
    except SourceReadError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE
    except (SourceParseError, NestingTooDeepError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

# -----------------------------------------------------------------------------
# EXECUTION MODES
# -----------------------------------------------------------------------------

def _run_merge(conf: Dict[str, Any]) -> int:
    """Load every source, merge them and print the document or the queries."""
    merged = load_sources(conf["files"], max_depth=conf["max_depth"])

    if not conf["queries"]:
        _emit(merged, conf)
        return EXIT_OK

    try:
        for path, result in query_many(merged, conf["queries"]):
            logger.debug(f"Query '{path}' matched {len(result)} key(s).")
            _emit(result, conf)
            print()
    except KeyNotFoundError as e:
        logger.info(f"Query miss on segment '{e.segment}'.")
        print(f"Query failed: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


def _run_flat(conf: Dict[str, Any]) -> int:
    """Print the flat pairs of each source without grouping or merging."""
    targets = conf["files"] or [STDIN_MARKER]
    for target in targets:
        resolved = normalize_path(target)
        label = "<stdin>" if resolved == STDIN_MARKER else resolved
        pairs = load_key_vals(read_source(resolved), source=label)
        if len(targets) > 1:
            print(f"# {label}")
        if pairs:
            print(pretty_key_vals(pairs))
    return EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _emit(value: CCL, conf: Dict[str, Any]) -> None:
    if conf["output_format"] == "json":
        print(json.dumps(value.to_dict(), ensure_ascii=False, indent=conf["json_indent"]))
    else:
        sys.stdout.write(pretty(value))


# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
