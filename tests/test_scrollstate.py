from argusui.scrollstate import ScrollState


def test_initial_state_at_top():
    s = ScrollState()
    assert (s.cursor, s.offset) == (0, 0)


def test_cursor_down_stops_at_last_row():
    total = 3
    s = ScrollState()
    for _ in range(total + 5):
        s.cursor_down(total, 10)
    assert s.cursor == total - 1


def test_cursor_up_stops_at_zero():
    s = ScrollState(cursor=2)
    for _ in range(5):
        s.cursor_up()
    assert s.cursor == 0
    assert s.offset == 0


def test_cursor_stays_within_window():
    total, visible = 20, 4
    s = ScrollState()
    for _ in range(total):
        s.cursor_down(total, visible)
        assert s.offset <= s.cursor < s.offset + visible
    for _ in range(total):
        s.cursor_up()
        assert s.offset <= s.cursor < s.offset + visible


def test_clamp_cursor_shrinks():
    s = ScrollState(cursor=5)
    s.clamp_cursor(2)
    assert s.cursor == 2 - 1
    s.clamp_cursor(0)
    assert s.cursor == 0


def test_clamp_cursor_keeps_valid():
    s = ScrollState(cursor=3)
    s.clamp_cursor(10)
    assert s.cursor == 3


def test_reset():
    s = ScrollState(cursor=7, offset=4)
    s.reset()
    assert s == ScrollState()