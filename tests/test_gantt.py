from schedsim.gantt import compact, render_gantt
from schedsim.models import IDLE_PID, ScheduledSlice


def _units(pids, start=0):
    return [ScheduledSlice(pid=pid, start_time=start + i, end_time=start + i + 1) for i, pid in enumerate(pids)]


def _spans(slices):
    return [(s.pid, s.start_time, s.end_time) for s in slices]


def _covered(slices):
    return {t for s in slices for t in range(s.start_time, s.end_time)}


def test_compact_merges_runs():
    raw = _units([IDLE_PID, IDLE_PID, 1, 1, 1, 2, 1, 1])
    assert _spans(compact(raw)) == [(IDLE_PID, 0, 2), (1, 2, 5), (2, 5, 6), (1, 6, 8)]


def test_compact_is_idempotent():
    once = compact(_units([3, 3, 1, 2, 2, 2, 3]))
    assert _spans(compact(once)) == _spans(once)


def test_compact_preserves_coverage():
    raw = _units([1, 1, 2, IDLE_PID, IDLE_PID, 2, 2], start=4)
    merged = compact(raw)
    assert _covered(merged) == _covered(raw)
    for left, right in zip(merged, merged[1:]):
        assert left.pid != right.pid


def test_compact_does_not_touch_input():
    raw = _units([1, 1])
    compact(raw)
    assert _spans(raw) == [(1, 0, 1), (1, 1, 2)]


def test_compact_empty():
    assert compact([]) == []


def test_compact_single_slice():
    assert _spans(compact(_units([5]))) == [(5, 0, 1)]


def test_render_gantt_labels_and_marks():
    text = render_gantt(
        [
            ScheduledSlice(pid=IDLE_PID, start_time=0, end_time=2),
            ScheduledSlice(pid=12, start_time=2, end_time=7),
        ]
    )
    title, bar, marks = text.splitlines()
    assert title == "Gantt schedule"
    assert bar == "|  idle  |   12   |"
    assert marks.split() == ["0", "2", "7"]
    # Each start mark sits under the bar separator that opens its cell.
    assert marks.index("2") == bar.index("|", 1)


def test_render_gantt_empty():
    assert render_gantt([]) == "(no execution)"


def test_render_gantt_marks_follow_wide_labels():
    text = render_gantt(
        [
            ScheduledSlice(pid=123456789, start_time=0, end_time=3),
            ScheduledSlice(pid=2, start_time=3, end_time=4),
        ]
    )
    _, bar, marks = text.splitlines()
    assert marks.index("3") == bar.index("|", 1)
    assert marks.index("4") == len(bar) - 1
