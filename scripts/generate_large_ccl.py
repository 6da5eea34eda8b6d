from __future__ import annotations

"""
Large Document Generator.

Writes a randomly generated, canonicalized document to disk for stress and
performance runs of the cclq pipeline. The same seed always produces the
same file.
"""

import argparse
import os
import random
import sys
from typing import List, Optional

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

SRC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from cclq.core.canonical.builder import from_key_vals  # noqa: E402
from cclq.core.canonical.printer import pretty  # noqa: E402
from cclq.domain.key_val_models import KeyVals  # noqa: E402
from cclq.utils.generators import large_document  # noqa: E402

DEFAULT_OUTPUT = "large_generated.ccl"


# -----------------------------------------------------------------------------
# MAIN EXECUTION
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Generate a large CCL document.")
    p.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="Target file path.")
    p.add_argument("--seed", type=int, default=0, help="Random seed.")
    p.add_argument("--min-pairs", type=int, default=100)
    p.add_argument("--max-pairs", type=int, default=5000)
    args = p.parse_args(argv)

    if args.min_pairs < 0 or args.max_pairs < args.min_pairs:
        print("[!] Invalid pair range.", file=sys.stderr)
        return 2

    rng = random.Random(args.seed)
    pairs = KeyVals.of(large_document(rng, args.min_pairs, args.max_pairs))
    content = pretty(from_key_vals(pairs))

    try:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        print(f"[!] Cannot write '{args.output}': {e}", file=sys.stderr)
        return 1

    print(f"[+] Generated large CCL file: {args.output}")
    print(f"[*] {len(pairs)} pairs, {len(content)} bytes")
    return 0


if __name__ == "__main__":
    sys.exit(main())
