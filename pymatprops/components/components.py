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

import numpy as np
import pandas as pd

from pymatprops.classes import comp_prop
from pymatprops.shared_fns import convert_to_numpy
from pymatprops.validate import validate_methods
from pymatprops.constants import R, KG2G, PA2MPA
from pymatprops.components._lib_iapws import rho_if97, psat_if97, visc_iapws08

class Component:
    """ Pure component property contract

        Every property is a classmethod and a pure function of temperature (K) and pressure (Pa).
        A component overrides the subset of properties it has data for; the remainder raise
        NotImplementedError. Use supports() to check before calling.
        No input range checks are made - out of range inputs return whatever the correlation gives.
    """

    @classmethod
    def name(cls) -> str:
        """ Human readable name of the component """
        return cls.__name__

    @classmethod
    def supports(cls, prop) -> bool:
        """ Returns True if the component provides the property
            prop: comp_prop member or its name, e.g. 'liquid_density'
        """
        prop = validate_methods(["compprop"], [prop])
        method = prop.name.lower()
        return getattr(cls, method).__func__ is not getattr(Component, method).__func__

    @classmethod
    def _not_implemented(cls, method):
        raise NotImplementedError(f"{cls.name()} does not provide {method}")

    @classmethod
    def molar_mass(cls):
        """ Molar mass (kg/mol) """
        cls._not_implemented("molar_mass")

    @classmethod
    def liquid_density(cls, temperature, pressure):
        """ Liquid density (kg/m3) """
        cls._not_implemented("liquid_density")

    @classmethod
    def liquid_viscosity(cls, temperature, pressure):
        """ Liquid dynamic viscosity (Pa.s) """
        cls._not_implemented("liquid_viscosity")

    @classmethod
    def gas_density(cls, temperature, pressure):
        """ Gas density (kg/m3) """
        cls._not_implemented("gas_density")

    @classmethod
    def gas_viscosity(cls, temperature, pressure):
        """ Gas dynamic viscosity (Pa.s) """
        cls._not_implemented("gas_viscosity")


def ideal_gas_density(molar_mass, temperature, pressure):
    """ Ideal gas density (kg/m3), p.M / (R.T) """
    return pressure * molar_mass / (R * temperature)


def chung_gas_viscosity(temperature, tc, vc, omega, mw, dipole=0.0):
    """ Returns low pressure gas viscosity (Pa.s) with the method of Chung et al.
        See: R. Reid, et al.: The Properties of Gases and Liquids, 4th edition, pp. 396, McGraw-Hill, 1987

        temperature: Temperature (K)
        tc: Critical temperature (K)
        vc: Critical molar volume (cm3/mol)
        omega: Acentric factor
        mw: Molar mass (g/mol)
        dipole: Dipole moment (debye)
    """
    mu_r4 = 131.3 * dipole / (vc * tc) ** 0.5
    mu_r4 = mu_r4 ** 4

    Fc = 1 - 0.2756 * omega + 0.059035 * mu_r4
    Tstar = 1.2593 * temperature / tc
    Omega_v = (1.16145 * Tstar ** -0.14874
               + 0.52487 * np.exp(-0.77320 * Tstar)
               + 2.16178 * np.exp(-2.43787 * Tstar))
    mu = 40.785 * Fc * (mw * temperature) ** 0.5 / (vc ** (2 / 3) * Omega_v)

    # micropoise -> Pa.s
    return mu * 1e-7


class H2O(Component):
    """ Pure water. Liquid from IAPWS-IF97 Region 1 and IAPWS 2008, vapor as ideal gas """

    @classmethod
    def name(cls) -> str:
        return "H2O"

    @classmethod
    def molar_mass(cls):
        return 18.01518e-3

    @classmethod
    def critical_temperature(cls):
        """ Critical temperature (K) """
        return 647.096

    @classmethod
    def critical_pressure(cls):
        """ Critical pressure (Pa) """
        return 22.064e6

    @classmethod
    def triple_temperature(cls):
        """ Triple point temperature (K) """
        return 273.16

    @classmethod
    def triple_pressure(cls):
        """ Triple point pressure (Pa) """
        return 611.657

    @classmethod
    def vapor_pressure(cls, temperature):
        """ Saturation vapor pressure (Pa), IAPWS-IF97 Region 4 """
        return psat_if97(temperature) / PA2MPA

    @classmethod
    def liquid_density(cls, temperature, pressure):
        return rho_if97(temperature, pressure * PA2MPA)

    @classmethod
    def liquid_viscosity(cls, temperature, pressure):
        return visc_iapws08(temperature, cls.liquid_density(temperature, pressure))

    @classmethod
    def gas_density(cls, temperature, pressure):
        return ideal_gas_density(cls.molar_mass(), temperature, pressure)


class N2(Component):
    """ Molecular nitrogen, ideal gas """

    @classmethod
    def name(cls) -> str:
        return "N2"

    @classmethod
    def molar_mass(cls):
        return 28.0134e-3

    @classmethod
    def critical_temperature(cls):
        """ Critical temperature (K) """
        return 126.192

    @classmethod
    def critical_pressure(cls):
        """ Critical pressure (Pa) """
        return 3.39858e6

    @classmethod
    def triple_temperature(cls):
        """ Triple point temperature (K) """
        return 63.151

    @classmethod
    def triple_pressure(cls):
        """ Triple point pressure (Pa) """
        return 12.523e3

    @classmethod
    def gas_density(cls, temperature, pressure):
        return ideal_gas_density(cls.molar_mass(), temperature, pressure)

    @classmethod
    def gas_viscosity(cls, temperature, pressure):
        # Vc = 90.1 cm3/mol, acentric factor 0.037, non polar
        return chung_gas_viscosity(temperature, cls.critical_temperature(), 90.1, 0.037, cls.molar_mass() * KG2G)


class Oil(Component):
    """ Rough estimate of some oil for testing purposes. Constant properties, arguments are ignored """

    @classmethod
    def name(cls) -> str:
        return "Oil"

    @classmethod
    def liquid_density(cls, temperature, pressure):
        return 890.0

    @classmethod
    def liquid_viscosity(cls, temperature, pressure):
        return 8e-3


def component_table(component, temperatures, pressure, props=None) -> pd.DataFrame:
    """ Returns DataFrame of component properties versus temperature
        component: Component class, e.g. H2O
        temperatures: Temperature(s) (K)
        pressure: Pressure (Pa), single value or one per temperature
        props: List of comp_prop members or names. Defaults to all properties the component supports
    """
    t, p = np.broadcast_arrays(convert_to_numpy(temperatures).astype(float), convert_to_numpy(pressure).astype(float))
    if props is None:
        props = [prop for prop in comp_prop if component.supports(prop)]
    else:
        props = [validate_methods(["compprop"], [prop]) for prop in props]

    table = {'T': t, 'p': p}
    for prop in props:
        if not component.supports(prop):
            raise ValueError(f"{component.name()} does not provide {prop.name.lower()}")
        if prop == comp_prop.MOLAR_MASS:
            vals = component.molar_mass()
        else:
            vals = getattr(component, prop.name.lower())(t, p)
        table[prop.name.lower()] = vals + np.zeros(t.shape)
    return pd.DataFrame(table)
