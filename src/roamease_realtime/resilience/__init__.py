"""Resilience – timeouts for calls to external collaborators."""

from roamease_realtime.resilience.timeouts import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
