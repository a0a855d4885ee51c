import math

import pytest

from traffictrainer.geometry import Transform, Vec3
from traffictrainer.wheels import Brakes, DriveTrain, Wheel, Wheels, slip_ratio


def test_default_wheel_values():
    wheel = Wheel()
    assert wheel.radius == 0.3
    assert wheel.grip == 0.8
    assert wheel.angle == 0.0
    assert wheel.powered is False


def test_powered_wheel_differs_only_in_power():
    wheel = Wheel.powered_wheel()
    assert wheel.powered is True
    assert wheel == Wheel(powered=True)


@pytest.mark.parametrize(
    "drivetrain, front, rear",
    [
        (DriveTrain.FWD, True, False),
        (DriveTrain.RWD, False, True),
        (DriveTrain.AWD, True, True),
    ],
)
def test_for_drivetrain_powers_driven_wheels(drivetrain, front, rear):
    wheels = Wheels.for_drivetrain(drivetrain)
    assert wheels.drivetrain is drivetrain
    assert (wheels.tl.powered, wheels.tr.powered) == (front, front)
    assert (wheels.bl.powered, wheels.br.powered) == (rear, rear)
    assert wheels.brakes == Brakes()


def test_default_wheels_are_rwd_and_unpowered():
    wheels = Wheels()
    assert wheels.drivetrain is DriveTrain.RWD
    assert not any(wheel.powered for wheel in wheels)


def test_slip_ratio_zero_at_low_speed():
    assert slip_ratio(5000.0, 0.05) == 0.0
    assert slip_ratio(5000.0, -0.05) == 0.0


def test_slip_ratio_locked_wheel():
    assert slip_ratio(0.0, 10.0) == pytest.approx(-1.0)
    assert slip_ratio(0.0, -5.0) == pytest.approx(1.0)


def test_slip_ratio_grows_with_rpm():
    values = [slip_ratio(rpm, 10.0) for rpm in (0.0, 100.0, 500.0, 2000.0)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_unpowered_wheel_is_untouched():
    wheel = Wheel()
    wheel.calculate_slip_ratio(1000.0, 2.0, Transform(), Vec3(0.0, 0.0, -10.0))
    assert wheel == Wheel()


def test_powered_wheel_rpm_follows_ratio():
    wheel = Wheel.powered_wheel()
    wheel.calculate_slip_ratio(1000.0, -2.0, Transform(), Vec3())
    assert wheel.rpm * 2.0 == pytest.approx(1000.0)
    assert wheel.slip == 0.0


def test_powered_wheel_slip_uses_forward_speed():
    wheel = Wheel.powered_wheel()
    wheel.calculate_slip_ratio(1000.0, 4.0, Transform(), Vec3(0.0, 0.0, -10.0))
    assert wheel.slip == pytest.approx(slip_ratio(wheel.rpm, 10.0))


def test_neutral_ratio_gives_unbounded_rpm():
    wheel = Wheel.powered_wheel()
    wheel.calculate_slip_ratio(1000.0, 0.0, Transform(), Vec3())
    assert wheel.rpm == math.inf
    idle = Wheel.powered_wheel()
    idle.calculate_slip_ratio(0.0, 0.0, Transform(), Vec3())
    assert idle.rpm == pytest.approx(math.nan, nan_ok=True)


def test_brake_friction():
    assert Brakes().friction() == 1.0
    assert Brakes(pressure=0.5, power=2.0).friction() == pytest.approx(0.0)