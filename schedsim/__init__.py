"""
schedsim package.

Simulates FCFS, SJF, preemptive priority and round-robin CPU scheduling over
a fixed workload and reports Gantt charts with waiting, turnaround and
throughput figures.
"""

__all__ = ["cli"]
