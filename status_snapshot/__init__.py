"""
Service status snapshot collector.
"""
