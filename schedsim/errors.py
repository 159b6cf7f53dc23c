from __future__ import annotations


class SchedulerError(Exception):
    """Base class for every error raised by schedsim."""


class EmptyWaitingSetError(SchedulerError, IndexError):
    """Raised when a candidate is requested from an empty waiting set."""


class WorkloadError(SchedulerError, ValueError):
    """Raised when a workload file cannot be read or parsed."""


class InvalidArgumentsError(SchedulerError):
    """Raised for a malformed command line."""
