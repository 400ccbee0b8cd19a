"""Lecture Scribe: turns lecture recordings into structured study notes."""

__version__ = "0.1.0"
