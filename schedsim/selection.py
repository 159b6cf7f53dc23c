"""
Candidate selection for the tick-driven engines.

A rule is a key function over a job; smaller keys rank better. Every
helper scans the waiting list front to back and only replaces its current
best on a strictly smaller key, so the first-encountered job wins ties.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .errors import EmptyWaitingSetError
from .models import Job

Rule = Callable[[Job], Tuple[int, ...]]


def shortest_burst(job: Job) -> Tuple[int, ...]:
    return (job.burst_left,)


def highest_priority(job: Job) -> Tuple[int, ...]:
    # Lower number means higher priority; remaining burst breaks ties.
    return (job.priority, job.burst_left)


def _best_index(waiting: List[Job], rule: Rule, baseline: Optional[Job] = None) -> Optional[int]:
    best_idx: Optional[int] = None
    best_key = rule(baseline) if baseline is not None else None
    for idx, job in enumerate(waiting):
        key = rule(job)
        if best_key is None or key < best_key:
            best_idx = idx
            best_key = key
    return best_idx


def pop_best(waiting: List[Job], rule: Rule) -> Job:
    """
    Remove and return the best-ranked job from the waiting list.
    """
    if not waiting:
        raise EmptyWaitingSetError("cannot select a job from an empty waiting set")
    idx = _best_index(waiting, rule)
    return waiting.pop(idx)


def challenge(current: Job, waiting: List[Job], rule: Rule) -> Job:
    """
    Return the job that should hold the CPU: `current`, or a strictly better
    waiting job. On preemption the challenger leaves the waiting list and
    `current` is appended to its back.
    """
    idx = _best_index(waiting, rule, baseline=current)
    if idx is None:
        return current

    challenger = waiting.pop(idx)
    waiting.append(current)
    return challenger
