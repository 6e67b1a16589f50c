"""Shorts Script Studio - hearing-driven YouTube Shorts script generation"""

__version__ = "1.0.0"
