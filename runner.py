from __future__ import annotations

"""Repo-root convenience shim for the deadlinelab CLI.

This keeps the most common local workflow short:

    python runner.py simulate --seed 1

It delegates to the canonical entry point:

    python -m deadlinelab
"""

import sys


def main() -> int:
    """Run the deadlinelab CLI.

    Arguments are forwarded exactly as in `python -m deadlinelab`.
    """

    from deadlinelab.cli import main as cli_main

    return cli_main(sys.argv[1:])


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
