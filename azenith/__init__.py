"""Daemon that switches device performance profiles based on the foreground game."""

__version__ = "0.1.0"