"""Allow running tasklist with ``python -m tasklist``."""

from __future__ import annotations

from tasklist.cli import main

if __name__ == "__main__":
    main(prog_name="tasklist")
