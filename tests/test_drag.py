from maltese.drag import DragTracker, MouseButton


def test_left_press_records_offset():
    tracker = DragTracker()
    assert tracker.press(MouseButton.LEFT, (150, 220), (100, 200)) is True
    assert tracker.offset == (50, 20)


def test_other_buttons_are_not_handled():
    tracker = DragTracker()
    assert tracker.press(MouseButton.RIGHT, (150, 220), (100, 200)) is False
    assert tracker.offset == (0, 0)


def test_move_keeps_grab_point_under_cursor():
    tracker = DragTracker()
    tracker.press(MouseButton.LEFT, (150, 220), (100, 200))
    new_pos = tracker.move(MouseButton.LEFT, (300, 400))
    assert (300 - new_pos[0], 400 - new_pos[1]) == tracker.offset


def test_move_back_to_press_point_restores_window():
    tracker = DragTracker()
    tracker.press(MouseButton.LEFT, (37, 81), (12, 40))
    assert tracker.move(MouseButton.LEFT, (37, 81)) == (12, 40)


def test_move_without_left_button_does_nothing():
    tracker = DragTracker()
    tracker.press(MouseButton.LEFT, (10, 10), (0, 0))
    assert tracker.move(MouseButton.NONE, (50, 50)) is None
    assert tracker.move(MouseButton.RIGHT, (50, 50)) is None


def test_move_with_several_buttons_held():
    tracker = DragTracker()
    tracker.press(MouseButton.LEFT, (10, 10), (0, 0))
    assert tracker.move(MouseButton.LEFT | MouseButton.RIGHT, (20, 20)) == (10, 10)