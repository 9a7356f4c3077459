import math

import pytest

from tanksim.errors import DomainError
from tanksim.hydraulics import head_loss, pump_power
from tanksim.models import Pipe, Pump


def test_zero_flow_has_exactly_zero_loss():
    pipe = Pipe()
    loss = head_loss(pipe, 0.0)
    assert loss.head_loss == 0.0
    assert loss.velocity == 0.0


def test_reference_pipe_loss_matches_darcy_weisbach():
    pipe = Pipe(length=50.0, diameter=0.1, density=1000.0)
    loss = head_loss(pipe, 0.01)
    velocity = 0.01 / (math.pi * 0.05**2)
    assert loss.velocity == pytest.approx(velocity)
    assert loss.reynolds_number == pytest.approx(1000.0 * velocity * 0.1 / 0.001)
    assert loss.friction_factor == 0.02
    assert loss.head_loss == pytest.approx(0.02 * 500.0 * velocity**2 / (2 * 9.81))


def test_head_loss_does_not_touch_the_pipe():
    pipe = Pipe()
    head_loss(pipe, 0.01)
    assert pipe.velocity == 0.0


def test_laminar_flow_uses_laminar_friction():
    pipe = Pipe(length=10.0, diameter=0.1, density=1000.0)
    loss = head_loss(pipe, 1e-5)
    assert loss.reynolds_number < 2000
    assert loss.friction_factor == pytest.approx(64.0 / loss.reynolds_number)


@pytest.mark.parametrize("flow_rate", [1e-6, 1e-4, 0.01, 0.5])
def test_positive_flow_gives_non_negative_loss(flow_rate):
    assert head_loss(Pipe(), flow_rate).head_loss >= 0.0


def test_velocity_and_loss_increase_with_flow_in_turbulent_regime():
    pipe = Pipe()
    flows = [0.005, 0.01, 0.02, 0.04]
    losses = [head_loss(pipe, q) for q in flows]
    velocities = [loss.velocity for loss in losses]
    values = [loss.head_loss for loss in losses]
    assert all(loss.friction_factor == 0.02 for loss in losses)
    assert velocities == sorted(velocities) and len(set(velocities)) == len(flows)
    assert values == sorted(values) and len(set(values)) == len(flows)


def test_negative_flow_is_rejected():
    with pytest.raises(DomainError):
        head_loss(Pipe(), -0.01)


def test_pump_power_ignores_roughness():
    pump = Pump(flow_rate=0.01, head=10.0)
    smooth = pump_power(pump, Pipe(roughness=0.0))
    rough = pump_power(pump, Pipe(roughness=0.5))
    assert smooth == pytest.approx(1000.0 * 9.81 * 0.01 * 10.0)
    assert rough == smooth
