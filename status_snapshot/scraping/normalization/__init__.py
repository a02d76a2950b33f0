"""
Status normalization exports.
"""

from status_snapshot.scraping.normalization.status_normalizer import (
    DEFAULT_DISPLAY_NAMES,
    DEFAULT_STATUS_ALIASES,
    StatusNormalizer,
)

__all__ = ["DEFAULT_DISPLAY_NAMES", "DEFAULT_STATUS_ALIASES", "StatusNormalizer"]
