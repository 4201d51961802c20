import math

import numpy as np
import pytest

from acoustic.core.errors import InvalidArgumentError
from acoustic.core.grid import GridInfo
from acoustic.numerics.spatial import spatial_derivs_order4
from acoustic.numerics.time_evolution import (
    LeapfrogConfig,
    LeapfrogIntegrator,
    STABILITY_LIMIT,
    stability_number,
)
from acoustic.physics import AcousticModel, AcousticPropagator, PointSource, impulse


def test_stability_limit_value():
    assert STABILITY_LIMIT == pytest.approx(math.sqrt(3.0 / 8.0))
    assert stability_number(2000.0, 0.001, 5.0) == pytest.approx(0.4)


def test_leapfrog_rejects_bad_config():
    with pytest.raises(InvalidArgumentError):
        LeapfrogIntegrator(LeapfrogConfig(dt=0.0))
    with pytest.raises(InvalidArgumentError):
        LeapfrogIntegrator(LeapfrogConfig(dt=0.001, stability_limit=1.0))


def test_leapfrog_update():
    integrator = LeapfrogIntegrator(LeapfrogConfig(dt=0.5))
    previous = np.full((2, 2), 1.0)
    current = np.full((2, 2), 2.0)
    derivative = np.full((2, 2), 4.0)

    result = integrator.integrate(previous, current, derivative, velocity=2.0)

    np.testing.assert_allclose(result, 2 * 2.0 - 1.0 + (2.0 * 0.5) ** 2 * 4.0)
    assert integrator.get_stability_diagnostics()["steps"] == 1


def test_leapfrog_tracks_peak_amplitude():
    integrator = LeapfrogIntegrator(LeapfrogConfig(dt=1.0))
    assert integrator.get_stability_diagnostics()["max_amplitude"] is None

    zeros = np.zeros((2, 2))
    for value in (3.0, -7.0, 0.5):
        current = np.array([[0.0, value], [0.0, 0.0]])
        integrator.integrate(zeros, current / 2.0, zeros, velocity=1.0)

    diagnostics = integrator.get_stability_diagnostics()
    assert diagnostics["steps"] == 3
    assert diagnostics["max_amplitude"] == 7.0


def test_unstable_timestep_rejected(small_grid):
    model = AcousticModel.constant(small_grid, velocity=3000.0)
    with pytest.raises(InvalidArgumentError):
        AcousticPropagator(model, dt=0.002)


def test_step_matches_formula(constant_model, rng):
    dt = 0.001
    propagator = AcousticPropagator(constant_model, dt=dt)
    previous = rng.standard_normal(constant_model.grid.shape)
    current = rng.standard_normal(constant_model.grid.shape)

    result = propagator.step(previous, current)

    expected = 2 * current - previous + (1500.0 * dt) ** 2 * spatial_derivs_order4(
        current, constant_model.log_density, constant_model.grid.delx
    )
    np.testing.assert_allclose(result, expected)


def test_zero_field_stays_zero(constant_model):
    propagator = AcousticPropagator(constant_model, dt=0.001)
    frames = list(propagator.run(constant_model.grid.zeros(), nsteps=5))

    assert len(frames) == 1
    step, t, _, current = frames[0]
    assert step == 5
    assert t == pytest.approx(0.005)
    np.testing.assert_array_equal(current, 0.0)


def test_snapshot_schedule_and_seismogram(constant_model):
    grid = constant_model.grid
    propagator = AcousticPropagator(constant_model, dt=0.001)
    initial = impulse(grid, 10, 12)

    steps = [
        frame[0]
        for frame in propagator.run(initial, nsteps=10, snapshot_interval=4, receiver_row=3)
    ]

    assert steps == [4, 8, 10]
    assert propagator.seismogram.shape == (11, grid.cols)
    np.testing.assert_array_equal(propagator.seismogram[0], initial[3])


def test_symmetric_spreading():
    grid = GridInfo(shape=(31, 31), delx=5.0)
    model = AcousticModel.constant(grid, velocity=1500.0)
    propagator = AcousticPropagator(model, dt=0.001)

    *_, (_, _, _, final) = propagator.run(impulse(grid, 15, 15), nsteps=8)

    np.testing.assert_allclose(final, final[:, ::-1], atol=1e-12)
    assert np.all(np.isfinite(final))


def test_source_injection(constant_model):
    grid = constant_model.grid
    dt = 0.001
    wavelet = np.array([0.5, 1.0, 0.5])
    source = PointSource(row=10, col=12, wavelet=wavelet)
    propagator = AcousticPropagator(constant_model, dt=dt, source=source)

    first = propagator.step(grid.zeros(), grid.zeros(), step_index=0)

    expected = np.zeros(grid.shape)
    expected[10, 12] = 0.5 * (1500.0 * dt) ** 2
    np.testing.assert_allclose(first, expected)

    late = propagator.step(grid.zeros(), grid.zeros(), step_index=5)
    np.testing.assert_array_equal(late, 0.0)


def test_source_outside_grid(constant_model):
    source = PointSource(row=100, col=0, wavelet=np.ones(3))
    with pytest.raises(InvalidArgumentError):
        AcousticPropagator(constant_model, dt=0.001, source=source)


def test_run_rejects_bad_arguments(constant_model):
    propagator = AcousticPropagator(constant_model, dt=0.001)
    grid = constant_model.grid
    with pytest.raises(InvalidArgumentError):
        next(propagator.run(np.zeros((3, 3)), nsteps=2))
    with pytest.raises(InvalidArgumentError):
        next(propagator.run(grid.zeros(), nsteps=0))
    with pytest.raises(InvalidArgumentError):
        next(propagator.run(grid.zeros(), nsteps=2, receiver_row=grid.rows))


def test_diagnostics(constant_model):
    propagator = AcousticPropagator(constant_model, dt=0.001)
    diag = propagator.get_diagnostics()

    assert diag["stability_number"] == pytest.approx(1500.0 * 0.001 / 5.0)
    assert diag["operator"]["order"] == 4
    assert diag["source"] is None
