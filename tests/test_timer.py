from gotkit.timer import Task, Timer


def noop():
    return None


def test_constructor_sorts_tasks():
    tasks = [Task(30, noop), Task(10, noop), Task(20, noop)]
    timer = Timer(*tasks)
    assert [t.run_at for t in timer.tasks] == [10, 20, 30]
    assert timer.tasks[0] is tasks[1]


def test_empty_timer_has_no_tasks():
    timer = Timer()
    assert timer.tasks == []
    assert timer.next_time == 0


def test_first_task_sets_next_time():
    timer = Timer()
    timer.add_task(500, noop)
    assert timer.next_time == 500
    assert [t.run_at for t in timer.tasks] == [500]


def test_add_task_keeps_order():
    timer = Timer()
    times = [50, 10, 40, 20, 30, 60, 5]
    for run_at in times:
        timer.add_task(run_at, noop)
    assert [t.run_at for t in timer.tasks] == sorted(times)
    assert timer.next_time == 50


def test_equal_times_keep_insertion_order():
    def first():
        return "first"

    def second():
        return "second"

    timer = Timer(Task(1, noop), Task(9, noop))
    timer.add_task(5, first)
    timer.add_task(5, second)
    actions = [t.action for t in timer.tasks if t.run_at == 5]
    assert actions == [first, second]


def test_tasks_snapshot_is_a_copy():
    timer = Timer(Task(1, noop))
    snapshot = timer.tasks
    snapshot.clear()
    assert len(timer.tasks) == 1


def test_action_is_kept():
    calls = []
    timer = Timer()
    timer.add_task(3, lambda: calls.append(3))
    timer.tasks[0].action()
    assert calls == [3]