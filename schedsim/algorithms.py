from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional

from .config import DEFAULT_QUANTUM
from .gantt import compact
from .metrics import build_result
from .models import IDLE_PID, Job, Process, ScheduleResult, ScheduledSlice
from .selection import Rule, challenge, highest_priority, pop_best, shortest_burst

logger = logging.getLogger(__name__)


def _clone(processes: List[Process]) -> List[Job]:
    return [Job.from_process(p) for p in processes]


def schedule_fcfs(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive).

    Processes are served in the order given; the caller is expected to pass
    them sorted by arrival. The CPU is treated as busy back-to-back from
    time 0, so gaps between arrivals do not produce idle time.
    """
    service_time = 0
    timeline: List[ScheduledSlice] = []
    finished: List[Job] = []

    for job in _clone(processes):
        waiting_time = max(0, service_time - job.arrival_time)

        start_time = service_time
        service_time += job.burst_time
        if job.burst_time > 0:
            timeline.append(ScheduledSlice(pid=job.pid, start_time=start_time, end_time=service_time))

        job.run(job.burst_time)
        job.finish(job.arrival_time + waiting_time + job.burst_time)
        logger.debug("FCFS: P%d waited %d, exits at %d", job.pid, waiting_time, job.exit_time)
        finished.append(job)

    return build_result("First-come, first-serve", finished, timeline)


def _simulate_ticks(processes: List[Process], rule: Rule, preemptive: bool, label: str):
    """
    Unit-step simulation shared by the SJF family.

    Each job sits in exactly one of pending, waiting, the running slot or
    finished. When `preemptive` is set, the running job is challenged by the
    waiting set on every tick that saw a new arrival.
    """
    pending = _clone(processes)
    waiting: List[Job] = []
    finished: List[Job] = []
    current: Optional[Job] = None
    raw: List[ScheduledSlice] = []

    t = 0
    while pending or waiting or current is not None:
        arrived = [job for job in pending if job.arrival_time == t]
        pending = [job for job in pending if job.arrival_time != t]
        for job in arrived:
            if job.burst_left == 0:
                # Needs no CPU time at all.
                job.finish(t)
                finished.append(job)
            else:
                waiting.append(job)
        new_arrival = any(job.exit_time is None for job in arrived)

        if current is None:
            if not waiting:
                if not pending:
                    break
                raw.append(ScheduledSlice(pid=IDLE_PID, start_time=t, end_time=t + 1))
                t += 1
                continue
            current = pop_best(waiting, rule)
            logger.debug("%s: t=%d dispatch P%d (%d left)", label, t, current.pid, current.burst_left)
        elif preemptive and new_arrival:
            challenger = challenge(current, waiting, rule)
            if challenger is not current:
                logger.debug(
                    "%s: t=%d P%d preempts P%d (%d left)",
                    label,
                    t,
                    challenger.pid,
                    current.pid,
                    current.burst_left,
                )
            current = challenger

        raw.append(ScheduledSlice(pid=current.pid, start_time=t, end_time=t + 1))
        current.run()
        if current.burst_left == 0:
            current.finish(t + 1)
            logger.debug("%s: P%d exits at %d", label, current.pid, current.exit_time)
            finished.append(current)
            current = None

        t += 1

    return finished, compact(raw)


def schedule_sjf(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive).

    Whenever the CPU is free, the waiting job with the least remaining burst
    runs to completion; ties go to the job that entered the waiting set first.
    """
    finished, timeline = _simulate_ticks(processes, shortest_burst, preemptive=False, label="SJF")
    return build_result("Shortest-job-first", finished, timeline)


def schedule_priority(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Priority scheduling with preemption (SJF within a priority level).

    Lower numeric priority value means higher priority. A new arrival that
    outranks the running job takes the CPU in the same tick; the evicted job
    goes back to waiting and later resumes with its remaining burst.
    """
    finished, timeline = _simulate_ticks(processes, highest_priority, preemptive=True, label="Priority")
    return build_result("Priority", finished, timeline)


def schedule_srtf(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Remaining Time First (preemptive SJF).

    The running job is re-checked against the waiting set whenever a process
    arrives and yields to anything with strictly less remaining burst.
    """
    finished, timeline = _simulate_ticks(processes, shortest_burst, preemptive=True, label="SRTF")
    return build_result("Shortest-remaining-time", finished, timeline)


def schedule_rr(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Arrivals join the back of the ready queue and are only admitted at
    quantum boundaries. A job that exhausts its quantum is re-queued behind
    anything that arrived while it ran.
    """
    if quantum is None:
        quantum = DEFAULT_QUANTUM
    if quantum <= 0:
        raise ValueError("Round Robin requires a positive quantum (use --quantum)")

    pending = _clone(processes)
    ready: Deque[Job] = deque()
    finished: List[Job] = []
    raw: List[ScheduledSlice] = []

    def enqueue_new_arrivals(current_time: int) -> None:
        nonlocal pending
        ready.extend(job for job in pending if job.arrival_time <= current_time)
        pending = [job for job in pending if job.arrival_time > current_time]

    time = 0
    while ready or pending:
        enqueue_new_arrivals(time)

        if not ready:
            raw.append(ScheduledSlice(pid=IDLE_PID, start_time=time, end_time=time + 1))
            time += 1
            continue

        job = ready.popleft()
        if job.burst_left > quantum:
            job.run(quantum)
            raw.append(ScheduledSlice(pid=job.pid, start_time=time, end_time=time + quantum))
            time += quantum
            logger.debug("RR: P%d ran to %d, %d left", job.pid, time, job.burst_left)

            enqueue_new_arrivals(time)
            ready.append(job)
        else:
            run_time = job.burst_left
            if run_time > 0:
                raw.append(ScheduledSlice(pid=job.pid, start_time=time, end_time=time + run_time))
            job.run(run_time)
            time += run_time
            job.finish(time)
            logger.debug("RR: P%d exits at %d", job.pid, time)
            finished.append(job)

    return build_result("Round-robin", finished, compact(raw), quantum=quantum)


ALGORITHMS = {
    "fcfs": schedule_fcfs,
    "sjf": schedule_sjf,
    "priority": schedule_priority,
    "rr": schedule_rr,
    "srtf": schedule_srtf,
}


def run_algorithm(name: str, processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. Only round-robin uses the quantum.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    func = ALGORITHMS[name]
    return func(processes, quantum=quantum)
