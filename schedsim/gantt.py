from __future__ import annotations

from typing import List, Optional

from .models import ScheduledSlice

CELL_WIDTH = 8


def compact(slices: List[ScheduledSlice]) -> List[ScheduledSlice]:
    """
    Merge consecutive slices that belong to the same pid.

    Assumes the timeline is contiguous and in chronological order. Idle
    slices merge like any other pid. The input slices are left untouched.
    """
    merged: List[ScheduledSlice] = []
    building: Optional[ScheduledSlice] = None

    for sl in slices:
        if building is not None and building.pid == sl.pid:
            building.end_time = sl.end_time
            continue
        if building is not None:
            merged.append(building)
        building = ScheduledSlice(pid=sl.pid, start_time=sl.start_time, end_time=sl.end_time)

    if building is not None:
        merged.append(building)
    return merged


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart: one fixed-width cell per slice with the slice
    boundaries printed underneath.
    """
    if not slices:
        return "(no execution)"

    bar = "|"
    time_marks = ""
    for sl in slices:
        label = "idle" if sl.idle else str(sl.pid)
        cell = label.center(CELL_WIDTH)
        bar += cell + "|"
        # Long labels widen their cell; the mark must follow.
        time_marks += f"{sl.start_time:<{len(cell) + 1}}"
    time_marks += str(slices[-1].end_time)

    return "\n".join(["Gantt schedule", bar, time_marks])
