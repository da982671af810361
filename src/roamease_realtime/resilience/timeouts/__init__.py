"""Resilience – timeout policies."""
from roamease_realtime.resilience.timeouts.policy import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
