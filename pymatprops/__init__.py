"""
pymatprops
===================================

-------------------------------------------------------
Material property correlations for porous media flow
-------------------------------------------------------

Stateless property functions that a porous media simulator calls per cell and per
iteration. No input is range checked, and every function accepts floats, numpy scalars,
numpy arrays or automatic differentiation numbers, returning the same kind of value.

Includes;

- Pure component properties (density, viscosity, molar mass) of water, nitrogen and a test oil
- IAPWS-IF97 water density and vapor pressure, IAPWS 2008 water viscosity
- Henry coefficients with the IAPWS guideline, gas diffusion coefficients with the Fuller method
- A registry of binary coefficient calculators for component pairs
- Brooks-Corey and regularized Brooks-Corey parameter sets, and the Brooks-Corey Sw-pc and kr curves
- Property tables as pandas DataFrames

Units are SI throughout: K, Pa, kg/m3, Pa.s, m2/s, kg/mol

"""

submodules = [
    'binarycoeff',
    'classes',
    'components',
    'constants',
    'fluidmatrix',
    'shared_fns',
    'validate'
]

__all__ = submodules 

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pymatprops.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pymatprops' has no attribute '{name}'"
            )
