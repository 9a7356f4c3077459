import pytest

from tanksim.config import SimulationSettings
from tanksim.errors import DomainError


def test_defaults_build_reference_plant():
    pump, pipe, tank = SimulationSettings().build_system()
    assert (pump.flow_rate, pump.head, pump.power) == (0.01, 10.0, 0.0)
    assert (pipe.length, pipe.diameter, pipe.roughness, pipe.density) == (50.0, 0.1, 0.015, 1000.0)
    assert (tank.height, tank.radius, tank.water_level) == (5.0, 1.0, 0.0)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TANKSIM_PUMP_HEAD", "0")
    monkeypatch.setenv("TANKSIM_TIME_STEP", "0.5")
    settings = SimulationSettings()
    assert settings.pump_head == 0.0
    assert settings.time_step == 0.5


def test_each_call_builds_fresh_entities():
    settings = SimulationSettings()
    first = settings.build_system()
    second = settings.build_system()
    assert all(a is not b for a, b in zip(first, second))


@pytest.mark.parametrize(
    "field,value",
    [
        ("pipe_diameter", 0.0),
        ("pipe_length", -1.0),
        ("fluid_density", 0.0),
        ("tank_radius", 0.0),
        ("tank_height", -5.0),
        ("pump_flow_rate", -0.01),
        ("time_step", 0.0),
        ("simulation_duration", -60.0),
        ("initial_water_level", 6.0),
        ("pipe_length", float("inf")),
    ],
)
def test_invalid_parameters_raise_domain_error(field, value):
    settings = SimulationSettings(**{field: value})
    with pytest.raises(DomainError, match=field):
        settings.build_system()
