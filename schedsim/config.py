"""
Tunables shared by the engines and the command line.
"""

# Round-robin time slice, overridable per run with --quantum.
DEFAULT_QUANTUM = 2

# Reports printed by a plain `schedsim <workload>` run, in this order.
DEFAULT_REPORT = ("fcfs", "sjf", "priority", "rr")
