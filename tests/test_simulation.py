import pytest

from rrtnav.simulation import GOAL, START, Camera, PathFollower, main, run
from rrtnav.vector import Vec3


def test_camera_zoom_zero_keeps_position():
    cam = Camera()
    before = cam.position
    cam.zoom(0.0)
    assert cam.position == before


@pytest.mark.parametrize("wheel", [1.0, -1.0, 2.5])
def test_camera_zoom_moves_along_view(wheel):
    cam = Camera()
    before = cam.position.distance_to(cam.target)
    cam.zoom(wheel)
    after = cam.position.distance_to(cam.target)
    assert before - after == pytest.approx(wheel * 2.0)


def test_follower_ignores_empty_path():
    f = PathFollower()
    f.update([], 0.1)
    assert f.position == Vec3()
    assert f.index == 0


def test_follower_steps_towards_target():
    f = PathFollower()
    f.update([Vec3(10, 0, 0)], 0.5)
    assert tuple(f.position) == pytest.approx((1.0, 0.0, 0.0))
    assert f.index == 0


def test_follower_advances_when_close():
    f = PathFollower(position=Vec3(0.1, 0, 0))
    f.update([Vec3(0, 0, 0), Vec3(5, 0, 0)], 0.1)
    assert f.index == 1
    assert f.position == Vec3(0.1, 0, 0)


def test_follower_does_not_advance_past_last_point():
    f = PathFollower(position=Vec3(0.1, 0, 0))
    f.update([Vec3(0, 0, 0)], 0.01)
    assert f.index == 0
    assert f.position.distance_to(Vec3()) < 0.1


def test_follower_eventually_reaches_end():
    path = [Vec3(1, 0, 0), Vec3(2, 0, 0), Vec3(2, 0, 3)]
    f = PathFollower()
    for _ in range(1000):
        f.update(path, 1.0 / 60)
    assert f.index == len(path) - 1
    assert f.position.distance_to(path[-1]) < 0.1


def test_run_zero_frames():
    planner, follower = run(0, seed=1)
    assert planner.full_path() == [START]
    assert follower.position == Vec3()


def test_run_is_deterministic_for_seed():
    p1, f1 = run(200, seed=42)
    p2, f2 = run(200, seed=42)
    assert p1.full_path() == p2.full_path()
    assert [n.position for n in p1.tree] == [n.position for n in p2.tree]
    assert f1.position == f2.position


def test_run_long_enough_completes():
    planner, _ = run(50000, seed=7)
    assert planner.complete
    assert planner.full_path()[-1] == GOAL


def test_main_prints_path_size(capsys):
    assert main(["--frames", "0", "--seed", "1"]) == 0
    assert capsys.readouterr().out.strip() == "Path size: 1"


def test_main_rejects_negative_frames():
    with pytest.raises(SystemExit):
        main(["--frames", "-1"])