"""
Command-line entry point for one service status snapshot run.
"""

from __future__ import annotations

import json
import logging
import os

from status_snapshot.scraping.logging_utils import configure_logging, log_event
from status_snapshot.services import StatusSnapshotService

logger = logging.getLogger(__name__)


def main() -> int:
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    try:
        result = StatusSnapshotService().run()
    except Exception as exc:
        log_event(
            logger,
            logging.ERROR,
            "status_run_failed",
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return 1

    outcome = result.outcome
    payload = {
        "timestamp": result.snapshot.timestamp,
        "statuses": len(result.snapshot.statuses),
        "local_path": outcome.local_path,
        "remote_status": outcome.remote_status,
        "remote_action": outcome.remote_action,
        "remote_error": outcome.remote_error,
    }
    print(json.dumps(payload, indent=2))
    return 0
