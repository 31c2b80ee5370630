from datetime import datetime, timedelta

from argusui.models import Project, Status, StatusCounts, Task, count_statuses


def test_status_counts_total():
    sc = StatusCounts(pending=2, in_progress=1, in_review=3, complete=4)
    assert sc.total() == 10


def test_status_counts_total_zero():
    assert StatusCounts().total() == 0


def test_count_statuses_per_project():
    tasks = [
        Task(project="alpha", status=Status.PENDING),
        Task(project="alpha", status=Status.IN_PROGRESS),
        Task(project="alpha", status=Status.COMPLETE),
        Task(project="bravo", status=Status.IN_REVIEW),
    ]
    counts = count_statuses(tasks)
    assert counts["alpha"] == StatusCounts(pending=1, in_progress=1, complete=1)
    assert counts["alpha"].total() == 3
    assert counts["bravo"] == StatusCounts(in_review=1)
    assert "unknown" not in counts


def test_status_string_values():
    assert str(Status.IN_PROGRESS) == "in_progress"
    assert Status("in_progress") is Status.IN_PROGRESS


def test_status_display_glyphs_distinct():
    glyphs = {
        Status.PENDING.display(),
        Status.IN_PROGRESS.display(),
        Status.IN_REVIEW.display(),
        Status.COMPLETE.display(),
    }
    assert len(glyphs) == 4
    assert "" not in glyphs


def test_display_alt():
    assert Status.IN_PROGRESS.display_alt() != Status.IN_PROGRESS.display()
    assert Status.PENDING.display_alt() == Status.PENDING.display()


def test_elapsed_not_started():
    assert Task(name="t").elapsed_string() == ""


def test_elapsed_minutes():
    task = Task(started_at=datetime.now() - timedelta(minutes=5))
    assert task.elapsed_string() == "5m"


def test_elapsed_uses_end_time():
    start = datetime.now() - timedelta(hours=3)
    a = Task(started_at=start, ended_at=start + timedelta(minutes=5))
    b = Task(started_at=datetime.now() - timedelta(minutes=5))
    assert a.elapsed_string() == b.elapsed_string()


def test_tasks_compare_by_identity():
    tasks = [Task(name="x"), Task(name="x")]
    assert tasks.count(tasks[0]) == 1
    assert tasks.index(tasks[1]) == 1


def test_projects_compare_by_value():
    assert Project(path="/a") == Project(path="/a")
    assert Project(path="/a").path == "/a"
    assert Project(path="/a") != Project(path="/b")