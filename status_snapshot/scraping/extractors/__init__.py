"""
Status page extractor exports.
"""

from status_snapshot.scraping.extractors.apple import AppleSystemStatusExtractor
from status_snapshot.scraping.extractors.play_store import PlayStoreStatusExtractor
from status_snapshot.scraping.extractors.statuspage import (
    AppCenterStatusExtractor,
    StatuspageComponentExtractor,
    TestRailStatusExtractor,
)

__all__ = [
    "AppCenterStatusExtractor",
    "AppleSystemStatusExtractor",
    "PlayStoreStatusExtractor",
    "StatuspageComponentExtractor",
    "TestRailStatusExtractor",
]
