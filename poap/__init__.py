"""Proof-of-attendance badge registry.

Event owners register events with a validity window and mint one
non-transferable badge per attendee per event.
"""

__version__ = "0.1.0"
