from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import List, Mapping, Sequence

from .errors import WorkloadError
from .models import Process


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload into a list of Process objects.

    `.json` files hold a list of objects with `pid`, `burst`, `arrival` and
    an optional `priority`. Anything else is read as headerless CSV rows of
    `pid,burst,arrival[,priority]`.
    """
    path = Path(path)

    try:
        if path.suffix.lower() == ".json":
            return _load_json(path)
        return _load_csv(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise WorkloadError(f"Cannot read workload {path}: {exc}") from exc


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise WorkloadError(f"{path}: invalid JSON ({exc})") from exc

    if not isinstance(raw, list):
        raise WorkloadError(f"{path}: JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.reader(f)
        for row in reader:
            if not any(field.strip() for field in row):
                continue
            try:
                processes.append(_process_from_row(row))
            except WorkloadError as exc:
                raise WorkloadError(f"{path}:{reader.line_num}: {exc}") from exc
    return processes


def _process_from_row(row: Sequence[str]) -> Process:
    if len(row) not in (3, 4):
        raise WorkloadError(f"expected 3 or 4 fields (pid,burst,arrival[,priority]), got {len(row)}")

    try:
        values = [int(field.strip()) for field in row]
    except ValueError as exc:
        raise WorkloadError(f"Invalid process row: {row!r}") from exc

    pid, burst_time, arrival_time = values[:3]
    priority = values[3] if len(values) == 4 else 0
    return _build_process(pid, arrival_time, burst_time, priority)


def _as_int(value) -> int:
    # Rejects bool and float instead of coercing them.
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"expected an integer, got {value!r}")
    return int(value)


def _process_from_mapping(mapping: Mapping) -> Process:
    try:
        pid = _as_int(mapping["pid"])
        burst_time = _as_int(mapping["burst"])
        arrival_time = _as_int(mapping["arrival"])
        priority_val = mapping.get("priority")
        priority = _as_int(priority_val) if priority_val not in (None, "") else 0
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise WorkloadError(f"Invalid process entry: {mapping!r}") from exc

    return _build_process(pid, arrival_time, burst_time, priority)


def _build_process(pid: int, arrival_time: int, burst_time: int, priority: int) -> Process:
    if arrival_time < 0 or burst_time < 0:
        raise WorkloadError(f"P{pid}: arrival and burst must be non-negative")
    return Process(pid=pid, arrival_time=arrival_time, burst_time=burst_time, priority=priority)
