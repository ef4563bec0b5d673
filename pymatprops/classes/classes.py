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

from enum import Enum

class comp_prop(Enum):  # Pure component property
    LIQUID_DENSITY = 0
    LIQUID_VISCOSITY = 1
    GAS_DENSITY = 2
    GAS_VISCOSITY = 3
    MOLAR_MASS = 4

class binary_prop(Enum):  # Binary coefficient of a component pair
    HENRY = 0
    GAS_DIFF_COEFF = 1
    LIQUID_DIFF_COEFF = 2

class_dic = {
    "compprop": comp_prop,
    "binaryprop": binary_prop,
}
