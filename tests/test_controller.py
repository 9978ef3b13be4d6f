import pytest

from rrtnav.controller import Key, SphereController
from rrtnav.vector import Vec3


def test_default_state():
    ctrl = SphereController()
    assert ctrl.position == Vec3(5.0, 1.0, -3.0)
    assert ctrl.velocity == Vec3()
    assert ctrl.radius == 1.0


def test_no_keys_leaves_sphere_at_rest():
    ctrl = SphereController()
    ctrl.update(0.5)
    assert ctrl.position == Vec3(5.0, 1.0, -3.0)
    assert ctrl.velocity == Vec3()
    assert ctrl.rotation == Vec3()


def test_forward_key_accelerates_along_negative_z():
    ctrl = SphereController()
    ctrl.update(0.1, {Key.W})
    assert ctrl.acceleration == Vec3(0.0, 0.0, -2.0)
    assert ctrl.velocity.z == pytest.approx(-2.0 * 0.1)
    assert ctrl.velocity.x == 0.0
    assert ctrl.position.z < -3.0


def test_diagonal_acceleration_is_normalized():
    ctrl = SphereController()
    ctrl.update(0.1, {Key.W, Key.D, Key.E})
    assert ctrl.acceleration.length() == pytest.approx(ctrl.max_acceleration)


def test_opposing_keys_cancel():
    ctrl = SphereController()
    ctrl.update(0.2, {Key.W, Key.S, Key.A, Key.D})
    assert ctrl.acceleration == Vec3()
    assert ctrl.velocity == Vec3()


def test_velocity_is_capped():
    ctrl = SphereController()
    for _ in range(200):
        ctrl.update(0.1, {Key.D})
    assert ctrl.velocity.length() == pytest.approx(ctrl.max_velocity)
    assert ctrl.velocity.x > 0


def test_velocity_persists_after_release():
    ctrl = SphereController()
    ctrl.update(0.5, {Key.A})
    held = ctrl.velocity
    before = ctrl.position
    ctrl.update(0.5)
    assert ctrl.velocity == held
    assert ctrl.position.x < before.x


def test_rotation_integrates_angular_velocity():
    ctrl = SphereController()
    ctrl.update(0.2, {Key.UP})
    assert ctrl.angular_velocity == Vec3(-0.5, 0.0, 0.0)
    assert ctrl.rotation.x == pytest.approx(-0.5 * 0.2)
    ctrl.update(0.2)
    assert ctrl.angular_velocity == Vec3()
    assert ctrl.rotation.x == pytest.approx(-0.5 * 0.2)


def test_angular_input_is_normalized():
    ctrl = SphereController()
    ctrl.update(1.0, {Key.RIGHT, Key.X})
    assert ctrl.angular_velocity.length() == pytest.approx(ctrl.max_angular_velocity)
    assert ctrl.angular_velocity.y > 0
    assert ctrl.angular_velocity.z > 0