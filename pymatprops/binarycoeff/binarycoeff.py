#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyMatProps - Material property correlations for porous media flow
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

import inspect
import logging

import numpy as np
import pandas as pd

from pymatprops.classes import binary_prop
from pymatprops.components import Component, H2O, N2
from pymatprops.constants import KG2G, TREF
from pymatprops.shared_fns import convert_to_numpy
from pymatprops.binarycoeff._lib_correlations import henry_iapws, fuller_method

logger = logging.getLogger(__name__)

_REGISTRY = {}


class BinaryCoeff:
    """ Binary coefficient contract for a pair of components

        Subclasses set `components` to the two Component classes of the pair and implement
        henry(T), gas_diff_coeff(T, p) and liquid_diff_coeff(T, p) as classmethods.
        Temperatures in K, pressures in Pa. No input range checks are made.
    """
    components = ()

    @classmethod
    def henry(cls, temperature):
        """ Henry coefficient (Pa) of the dissolved component in the liquid solvent """
        raise NotImplementedError(f"{cls.__name__} does not provide henry")

    @classmethod
    def gas_diff_coeff(cls, temperature, pressure):
        """ Binary diffusion coefficient in the gas phase (m2/s) """
        raise NotImplementedError(f"{cls.__name__} does not provide gas_diff_coeff")

    @classmethod
    def liquid_diff_coeff(cls, temperature, pressure):
        """ Diffusion coefficient of the dissolved component in the liquid phase (m2/s) """
        raise NotImplementedError(f"{cls.__name__} does not provide liquid_diff_coeff")


def _comp_name(comp) -> str:
    if inspect.isclass(comp) and issubclass(comp, Component):
        return comp.name()
    return str(comp)


def register(coeff):
    """ Class decorator adding a BinaryCoeff subclass to the pair registry """
    names = [_comp_name(c) for c in coeff.components]
    if len(names) != 2 or names[0] == names[1]:
        raise ValueError(f"{coeff.__name__} must name two different components, got {names}")
    key = frozenset(names)
    if key in _REGISTRY:
        raise ValueError(f"Pair {names[0]}-{names[1]} already registered to {_REGISTRY[key].__name__}")
    _REGISTRY[key] = coeff
    logger.debug("Registered binary coefficients %s for %s-%s", coeff.__name__, *names)
    return coeff


def binary_coeff(comp_a, comp_b):
    """ Returns the binary coefficient calculator for a pair of components, in either order
        comp_a, comp_b: Component classes or their names, e.g. H2O, 'N2'
    """
    names = (_comp_name(comp_a), _comp_name(comp_b))
    try:
        return _REGISTRY[frozenset(names)]
    except KeyError:
        raise ValueError(f"No binary coefficients for {names[0]}-{names[1]}. Registered pairs: {binary_pairs()}")


def binary_pairs() -> list:
    """ Returns list of registered component name pairs """
    return sorted(tuple(sorted(key)) for key in _REGISTRY)


@register
class H2O_N2(BinaryCoeff):
    """ Binary coefficients for water and molecular nitrogen """
    components = (H2O, N2)

    # IAPWS Henry guideline coefficients for N2
    E, F, G, H = 2388.8777, -14.9593, 42.0179, -29.4396
    # Atomic diffusion volumes [H2O, N2]
    SIGMA_NU = (13.1, 18.5)
    # Ferrell & Himmelblau (1967) liquid diffusion coefficient (m2/s) at TREF
    D_LIQ_REF = 2.01e-9

    @classmethod
    def henry(cls, temperature):
        """ Henry coefficient (Pa) of N2 in liquid water
            See: IAPWS: "Guideline on the Henry's Constant and Vapor-Liquid Distribution Constant
            for Gases in H2O and D2O at High Temperatures", http://www.iapws.org/relguide/HenGuide.pdf
        """
        return henry_iapws(cls.E, cls.F, cls.G, cls.H, temperature)

    @classmethod
    def gas_diff_coeff(cls, temperature, pressure):
        """ Binary diffusion coefficient (m2/s) of water and N2 in the gas phase, Fuller method """
        M = [H2O.molar_mass() * KG2G, N2.molar_mass() * KG2G]
        return fuller_method(M, cls.SIGMA_NU, temperature, pressure)

    @classmethod
    def liquid_diff_coeff(cls, temperature, pressure):
        """ Diffusion coefficient (m2/s) of N2 in liquid water

            The estimating equations for infinite dilution in Reid (1987) all depend linearly on
            temperature, so the measured value of Ferrell & Himmelblau is scaled by T / TREF.
            Pressure is not part of the correlation and is ignored.

            R. Reid et al.: "The Properties of Gases and Liquids", 4th edition, pp. 599, McGraw-Hill, 1987
            R. Ferrell, D. Himmelblau: "Diffusion Coefficients of Nitrogen and Oxygen in Water",
            J. Chem. Eng. Data, Vol. 12, No. 1, pp. 111-115, 1967
        """
        return cls.D_LIQ_REF * (temperature / TREF)


def binary_table(comp_a, comp_b, temperatures, pressure) -> pd.DataFrame:
    """ Returns DataFrame of binary coefficients versus temperature
        comp_a, comp_b: Component classes or names of the pair
        temperatures: Temperature(s) (K)
        pressure: Pressure (Pa), single value or one per temperature
    """
    coeff = binary_coeff(comp_a, comp_b)
    t, p = np.broadcast_arrays(convert_to_numpy(temperatures).astype(float), convert_to_numpy(pressure).astype(float))
    table = {'T': t, 'p': p}
    for prop in binary_prop:
        if prop == binary_prop.HENRY:
            vals = coeff.henry(t)
        else:
            vals = getattr(coeff, prop.name.lower())(t, p)
        table[prop.name.lower()] = vals
    return pd.DataFrame(table)
