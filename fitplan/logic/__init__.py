"""Core tracking logic.

Subpackages:
- calendar: day number <-> weekday/date/week mapping
- progress: checkmark toggles over the progress store
- reporting: completion-rate aggregation
"""
__all__ = ["calendar", "progress", "reporting"]
