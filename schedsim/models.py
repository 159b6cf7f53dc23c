from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

# Slice owner used when no process is eligible to run.
IDLE_PID = -1


@dataclass(frozen=True)
class Process:
    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0


@dataclass
class Job:
    """
    Per-run scheduling state for one process.

    Engines build their own jobs from the caller's processes, so a job is
    only ever touched by the simulation that created it.
    """

    process: Process
    burst_left: int
    exit_time: Optional[int] = None

    @classmethod
    def from_process(cls, process: Process) -> "Job":
        return cls(process=process, burst_left=process.burst_time)

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def arrival_time(self) -> int:
        return self.process.arrival_time

    @property
    def burst_time(self) -> int:
        return self.process.burst_time

    @property
    def priority(self) -> int:
        return self.process.priority

    def run(self, units: int = 1) -> None:
        if units > self.burst_left:
            raise ValueError(f"P{self.pid} has only {self.burst_left} units left, cannot run {units}")
        self.burst_left -= units

    def finish(self, exit_time: int) -> None:
        if self.exit_time is not None:
            raise ValueError(f"P{self.pid} already finished at {self.exit_time}")
        self.burst_left = 0
        self.exit_time = exit_time


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    start_time: int
    end_time: int

    @property
    def idle(self) -> bool:
        return self.pid == IDLE_PID

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass
class ProcessMetrics:
    pid: int
    priority: int
    burst_time: int
    arrival_time: int
    waiting_time: int
    turnaround_time: int
    completion_time: int


@dataclass
class SystemMetrics:
    avg_waiting: float
    avg_turnaround: float
    throughput: float
    makespan: int = 0
    cpu_busy_time: int = 0


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[ProcessMetrics] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    system: Optional[SystemMetrics] = None
