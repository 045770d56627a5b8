"""Mirae: course reflection companion with a scripted fallback dialogue engine."""

__version__ = "0.1.0"
