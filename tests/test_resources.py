import logging

import pytest

from maltese.resources import ResourceManager, RoleAct, instance


def _make_frames(root, act, count):
    for i in range(count):
        path = root / act.default_pattern.format(i)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")


def test_role_act_labels_follow_enumeration_order():
    labels = [RoleAct(value).label for value in range(5)]
    assert labels == [
        "Rolling",
        "RideScooter",
        "RideMaltese",
        "Bickering",
        "MelodySprint",
    ]


def test_role_act_values_are_sequential(tmp_path):
    for act in RoleAct:
        _make_frames(tmp_path, act, 1)
    manager = ResourceManager(tmp_path)
    for value in range(len(RoleAct)):
        act = RoleAct(value)
        assert int(act) == value
        assert manager.frames_for(act) == [tmp_path / act.default_pattern.format(0)]


def test_default_pattern_layout():
    assert RoleAct.RIDE_SCOOTER.default_pattern.format(3) == "img/ride_scooter/ride_scooter_3.png"


def test_frames_collected_in_order(tmp_path):
    _make_frames(tmp_path, RoleAct.ROLLING, 4)
    manager = ResourceManager(tmp_path)
    frames = manager.frames_for(RoleAct.ROLLING)
    assert frames == [tmp_path / RoleAct.ROLLING.default_pattern.format(i) for i in range(4)]


def test_collection_stops_at_first_gap(tmp_path):
    _make_frames(tmp_path, RoleAct.BICKERING, 2)
    (tmp_path / RoleAct.BICKERING.default_pattern.format(3)).write_bytes(b"")
    manager = ResourceManager(tmp_path)
    assert len(manager.frames_for(RoleAct.BICKERING)) == 2


def test_missing_frames_warn_and_give_empty_list(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="maltese.resources"):
        manager = ResourceManager(tmp_path)
    assert manager.frames_for(RoleAct.MELODY_SPRINT) == []
    assert any("Missing frames" in record.getMessage() for record in caplog.records)


def test_add_frames_with_custom_pattern(tmp_path):
    for i in range(3):
        (tmp_path / f"frame{i}.png").write_bytes(b"")
    manager = ResourceManager(tmp_path)
    returned = manager.add_frames(RoleAct.RIDE_MALTESE, "frame{}.png")
    assert returned == manager.frames_for(RoleAct.RIDE_MALTESE)
    assert [p.name for p in returned] == ["frame0.png", "frame1.png", "frame2.png"]


def test_frames_for_returns_a_copy(tmp_path):
    _make_frames(tmp_path, RoleAct.ROLLING, 2)
    manager = ResourceManager(tmp_path)
    manager.frames_for(RoleAct.ROLLING).clear()
    assert len(manager.frames_for(RoleAct.ROLLING)) == 2


def test_instance_is_shared_per_root(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    assert instance(first) is instance(str(first))
    assert instance(first) is not instance(second)


@pytest.mark.parametrize("act", list(RoleAct))
def test_every_act_has_entry(tmp_path, act):
    _make_frames(tmp_path, act, 1)
    assert len(ResourceManager(tmp_path).frames_for(act)) == 1