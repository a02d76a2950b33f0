"""
Run one service status snapshot from the CLI.
"""

from __future__ import annotations

from status_snapshot.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
