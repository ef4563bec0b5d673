#!/usr/bin/env python3
"""
Validation tests for fluidmatrix module (Brooks-Corey parameters and curves).
Run with: python3 -m pytest pymatprops/tests/ -v
Or standalone: python3 pymatprops/tests/run_all_tests.py
"""

import sys
import os
import dataclasses
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pymatprops.fluidmatrix as fluidmatrix
from pymatprops.fluidmatrix import BrooksCoreyParams, RegularizedBrooksCoreyParams
from pymatprops.constants import THRESHOLD_SW

# =============================================================================
# Parameter sets
# =============================================================================

def test_params_stored_verbatim():
    params = BrooksCoreyParams(pe=1e4, alpha=2.0)
    assert params.pe == 1e4
    assert params.alpha == 2.0

def test_params_immutable():
    params = RegularizedBrooksCoreyParams(5e3, 1.5)
    try:
        params.pe = 1.0
    except dataclasses.FrozenInstanceError:
        pass
    else:
        assert False, "Parameters should be immutable"
    assert params.pe == 5e3

def test_threshold_sw_constant():
    """Threshold is 1% for every parameter set, including non-physical ones"""
    for pe, alpha in [(1e4, 2.0), (0.0, 0.0), (-1e3, -2.0), (1e9, 0.1), (1.0, 1e6)]:
        params = RegularizedBrooksCoreyParams(pe, alpha)
        assert params.threshold_sw() == 0.01, f"threshold_sw for ({pe}, {alpha}) = {params.threshold_sw()}"
    assert THRESHOLD_SW == 0.01

def test_threshold_sw_shared_between_instances():
    a = RegularizedBrooksCoreyParams(1e4, 2.0)
    b = RegularizedBrooksCoreyParams(2e5, 0.7)
    assert a.threshold_sw() == b.threshold_sw()

def test_threshold_sw_override_by_subclass():
    """A different threshold needs a subclass, the shared constant is untouched"""
    class TightParams(RegularizedBrooksCoreyParams):
        def threshold_sw(self):
            return 1e-3
    assert TightParams(1e4, 2.0).threshold_sw() == 1e-3
    assert RegularizedBrooksCoreyParams(1e4, 2.0).threshold_sw() == 0.01

def test_regularized_params_are_brooks_corey_params():
    params = RegularizedBrooksCoreyParams(1e4, 2.0)
    assert isinstance(params, BrooksCoreyParams)
    assert params == RegularizedBrooksCoreyParams(1e4, 2.0)
    assert params != BrooksCoreyParams(1e4, 2.0)

# =============================================================================
# Brooks-Corey curves
# =============================================================================

PARAMS = BrooksCoreyParams(pe=1e4, alpha=2.0)

def test_pc_values():
    assert abs(fluidmatrix.pc(PARAMS, 1.0) - 1e4) < 1e-9, "pc at Swe = 1 is the entry pressure"
    assert abs(fluidmatrix.pc(PARAMS, 0.25) - 2e4) < 1e-9

def test_sw_inverse_of_pc():
    swe = np.linspace(0.05, 1.0, 20)
    back = fluidmatrix.sw(PARAMS, fluidmatrix.pc(PARAMS, swe))
    assert np.allclose(back, swe, rtol=1e-12)

def test_dpc_dsw_matches_finite_difference():
    swe, h = 0.4, 1e-6
    fd = (fluidmatrix.pc(PARAMS, swe + h) - fluidmatrix.pc(PARAMS, swe - h)) / (2 * h)
    assert abs(fluidmatrix.dpc_dsw(PARAMS, swe) / fd - 1) < 1e-6

def test_dsw_dpc_matches_finite_difference():
    pc, h = 3e4, 1e-2
    fd = (fluidmatrix.sw(PARAMS, pc + h) - fluidmatrix.sw(PARAMS, pc - h)) / (2 * h)
    assert abs(fluidmatrix.dsw_dpc(PARAMS, pc) / fd - 1) < 1e-6

def test_kr_endpoints():
    assert fluidmatrix.krw(PARAMS, 1.0) == 1.0
    assert fluidmatrix.krw(PARAMS, 0.0) == 0.0
    assert fluidmatrix.krn(PARAMS, 1.0) == 0.0
    assert fluidmatrix.krn(PARAMS, 0.0) == 1.0

def test_kr_monotonic():
    """krw increases and krn decreases with Swe"""
    swe = np.linspace(0.0, 1.0, 30)
    krw = fluidmatrix.krw(PARAMS, swe)
    krn = fluidmatrix.krn(PARAMS, swe)
    assert all(np.diff(krw) > 0)
    assert all(np.diff(krn) < 0)
    assert all((krw >= 0) & (krw <= 1))
    assert all((krn >= 0) & (krn <= 1))
