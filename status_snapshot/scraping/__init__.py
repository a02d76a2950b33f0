"""
Status page scraping: browser access, extractors, normalization and engine.
"""
