# tests/test_solver.py

import logging

import pytest

from polycal.core.config import SolverConfig
from polycal.reference.astro_args import wrap_deg
from polycal.reference.solver import solve_longitude


def test_linear_longitude_converges():
    t = solve_longitude(lambda x: wrap_deg(10.0 * x), seed=0.0, target_deg=45.0, fallback_step=1.0)
    assert t == pytest.approx(4.5, abs=1e-6)


def test_wraparound_target():
    # longitude 350 at t=0 moving 1 deg/day reaches 0 (=360) after ten days
    t = solve_longitude(lambda x: wrap_deg(350.0 + x), seed=0.0, target_deg=0.0, fallback_step=1.0)
    assert t == pytest.approx(10.0, abs=1e-6)


def test_flat_function_already_on_target_does_not_move():
    t = solve_longitude(lambda x: 30.0, seed=123.0, target_deg=30.0, fallback_step=5.0)
    assert t == 123.0


def test_flat_function_steps_by_fallback_and_gives_up(caplog):
    cfg = SolverConfig(max_iterations=4)
    with caplog.at_level(logging.DEBUG, logger="polycal.reference.solver"):
        t = solve_longitude(lambda x: 0.0, seed=0.0, target_deg=90.0, fallback_step=2.5, config=cfg)
    assert t == pytest.approx(10.0)
    assert any("stopped after 4 iterations" in r.getMessage() for r in caplog.records)


def test_solver_config_validation():
    with pytest.raises(ValueError):
        SolverConfig(max_iterations=0)
    with pytest.raises(ValueError):
        SolverConfig(tolerance_deg=0.0)


def test_flat_function_with_nominal_rate_steps_by_error():
    # 2 deg short at ~1 deg/day: one step of about two days, not the full cap
    cfg = SolverConfig(max_iterations=1)
    t = solve_longitude(lambda x: 88.0, seed=0.0, target_deg=90.0, fallback_step=3.0, fallback_rate=0.9856, config=cfg)
    assert t == pytest.approx(2.0 / 0.9856)


def test_nominal_rate_fallback_is_capped():
    cfg = SolverConfig(max_iterations=1)
    t = solve_longitude(lambda x: 0.0, seed=0.0, target_deg=90.0, fallback_step=3.0, fallback_rate=0.9856, config=cfg)
    assert t == pytest.approx(3.0)
    t = solve_longitude(lambda x: 0.0, seed=0.0, target_deg=-90.0, fallback_step=3.0, fallback_rate=0.9856, config=cfg)
    assert t == pytest.approx(-3.0)
