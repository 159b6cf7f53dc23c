from __future__ import annotations

from typing import List, Optional

from .models import Job, ProcessMetrics, ScheduleResult, ScheduledSlice, SystemMetrics


def process_metrics(job: Job) -> ProcessMetrics:
    """
    Waiting and turnaround figures for a finished job.
    """
    if job.exit_time is None:
        raise ValueError(f"P{job.pid} has not finished")

    turnaround_time = job.exit_time - job.arrival_time
    return ProcessMetrics(
        pid=job.pid,
        priority=job.priority,
        burst_time=job.burst_time,
        arrival_time=job.arrival_time,
        waiting_time=turnaround_time - job.burst_time,
        turnaround_time=turnaround_time,
        completion_time=job.exit_time,
    )


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Average waiting/turnaround time and throughput of a populated result.

    Throughput is the process count over the last completion time of the run.
    """
    if not result.processes:
        system = SystemMetrics(avg_waiting=0.0, avg_turnaround=0.0, throughput=0.0)
        result.system = system
        return system

    n = len(result.processes)
    makespan = max(p.completion_time for p in result.processes)
    cpu_busy_time = sum(sl.duration for sl in result.timeline if not sl.idle)

    system = SystemMetrics(
        avg_waiting=sum(p.waiting_time for p in result.processes) / n,
        avg_turnaround=sum(p.turnaround_time for p in result.processes) / n,
        throughput=n / makespan if makespan > 0 else 0.0,
        makespan=makespan,
        cpu_busy_time=cpu_busy_time,
    )
    result.system = system
    return system


def build_result(
    algorithm: str,
    finished: List[Job],
    timeline: List[ScheduledSlice],
    quantum: Optional[int] = None,
) -> ScheduleResult:
    result = ScheduleResult(
        algorithm=algorithm,
        quantum=quantum,
        processes=[process_metrics(job) for job in finished],
        timeline=timeline,
    )
    compute_system_metrics(result)
    return result
