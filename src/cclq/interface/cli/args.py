from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from cclq.domain.config import CURRENT_VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the cclq CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="cclq",
        description="Merge CCL files and query.",
        epilog="Queries are key paths separated by '=', e.g. 'database=ports'.",
    )

    # --- Sources and Queries ---
    p.add_argument(
        "-f", "--file",
        dest="files",
        nargs="+",
        default=None,
        metavar="FILE",
        help="Input files, merged left to right ('-' for stdin; default: stdin).",
    )
    p.add_argument(
        "-q", "--query",
        dest="queries",
        nargs="+",
        default=None,
        metavar="KEY",
        help="Key paths to print (default: print the whole merged document).",
    )

    # --- Output Format ---
    fmt = p.add_mutually_exclusive_group()
    fmt.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Render results as JSON objects instead of CCL.",
    )
    fmt.add_argument(
        "--flat",
        action="store_true",
        help="Print the flat key/value pairs of each source (no merging).",
    )

    # --- Resource Bounds ---
    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        metavar="N",
        help="Reject documents nested deeper than N levels.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostic logs to this rotating file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {CURRENT_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options the user did not pass are left out so that lower-precedence
    sources (environment, defaults) stay in effect.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.files is not None:
        overrides["files"] = list(args.files)
    if args.queries is not None:
        overrides["queries"] = list(args.queries)

    if args.json_output:
        overrides["output_format"] = "json"
    elif args.flat:
        overrides["output_format"] = "flat"

    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    if args.log_file is not None:
        overrides["log_file"] = args.log_file
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
