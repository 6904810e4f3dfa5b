"""Framtidsbygget - content and rules layer for the digital strategy game."""

__version__ = "1.0.0"
