"""Shared physical constants and default parameters for the tank filling model."""

from __future__ import annotations

GRAVITY_M_S2 = 9.81
WATER_VISCOSITY_PA_S = 0.001  # dynamic viscosity, held fixed (no temperature dependence)

LAMINAR_REYNOLDS_LIMIT = 2000.0
LAMINAR_FRICTION_COEFFICIENT = 64.0
# Stand-in for a turbulent correlation; the model does not solve Colebrook-White.
TURBULENT_FRICTION_FACTOR = 0.02

DEFAULT_SIMULATION_DURATION_S = 60.0
DEFAULT_TIME_STEP_S = 1.0

# Literal plant parameters of the reference pump-pipe-tank setup.
DEFAULT_PUMP_FLOW_RATE_M3_S = 0.01  # 10 L/s
DEFAULT_PUMP_HEAD_M = 10.0
DEFAULT_PIPE_LENGTH_M = 50.0
DEFAULT_PIPE_DIAMETER_M = 0.1
DEFAULT_PIPE_ROUGHNESS = 0.015  # typical for steel pipes
DEFAULT_FLUID_DENSITY_KG_M3 = 1000.0
DEFAULT_TANK_HEIGHT_M = 5.0
DEFAULT_TANK_RADIUS_M = 1.0
