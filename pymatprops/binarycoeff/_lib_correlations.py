"""
Empirical correlations shared by the binary coefficient calculators.

Provides:
    - henry_iapws(E, F, G, H, T): Henry coefficient of a gas in water, Pa
    - fuller_method(M, SigmaNu, T, P): binary gas diffusion coefficient, m2/s

Both use arithmetic, powers and np.exp only so that any scalar type (floats,
numpy scalars or arrays, automatic differentiation numbers) passes through.

References:
    IAPWS (2004). "Guideline on the Henry's Constant and Vapor-Liquid
    Distribution Constant for Gases in H2O and D2O at High Temperatures."
    http://www.iapws.org/relguide/HenGuide.pdf

    Fuller, E.N., Schettler, P.D., Giddings, J.C. (1966). "A new method for
    prediction of binary gas-phase diffusion coefficients."
    Ind. Eng. Chem., 58(5), 18-27.
    Reid, R. et al. (1987). "The Properties of Gases and Liquids", 4th
    edition, pp. 587, McGraw-Hill.

Units: T in K, P in Pa
"""

import numpy as np

from pymatprops.components import H2O
from pymatprops.shared_fns import harmonic_mean

# IAPWS guideline, solvent (water) dependent coefficients
_HENRY_C = [1.99274064, 1.09965342, -0.510839303, -1.75493479, -45.5170352, -6.7469445e5]
_HENRY_D = [1 / 3, 2 / 3, 5 / 3, 16 / 3, 43 / 3, 110 / 3]
_HENRY_Q = -0.023767


def henry_iapws(E, F, G, H, T):
    """
    Henry coefficient of a dilute gas in liquid water, relating the gas
    partial pressure to its liquid mole fraction.

    The guideline gives the vapor-liquid distribution constant K_D in mole
    fractions; it is multiplied by the vapor pressure of water to return the
    Henry coefficient.

    Parameters:
        E, F, G, H: gas specific coefficients of the guideline
        T: temperature in K

    Returns:
        Henry coefficient in Pa
    """
    tau = 1 - T / H2O.critical_temperature()

    f = 0.0
    for c, d in zip(_HENRY_C, _HENRY_D):
        f += c * tau ** d

    exponent = (_HENRY_Q * F + E / T * f
                + (F + G * tau ** (2 / 3) + H * tau) * np.exp((H2O.triple_temperature() - T) / 100))
    return np.exp(exponent) * H2O.vapor_pressure(T)


def fuller_method(M, SigmaNu, T, P):
    """
    Binary gas diffusion coefficient with the method of Fuller et al.

        D = 1e-4 * 143 * T^1.75 / (P * Mab^0.5 * (SigmaNu_a^(1/3) + SigmaNu_b^(1/3))^2)

    The 143 (= 0.00143 cm2/s with P in bar) and 1e-4 factors return m2/s
    with P in Pa.

    Parameters:
        M: molar masses of the two components in g/mol
        SigmaNu: atomic diffusion volumes of the two components
        T: temperature in K
        P: pressure in Pa

    Returns:
        diffusion coefficient in m2/s
    """
    Mab = harmonic_mean(M[0], M[1])
    tmp = SigmaNu[0] ** (1 / 3) + SigmaNu[1] ** (1 / 3)
    return 1e-4 * (143.0 * T ** 1.75) / (P * Mab ** 0.5 * tmp * tmp)
