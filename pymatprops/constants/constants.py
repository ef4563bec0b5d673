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


# Constants
R = 8.314472  # Universal gas constant, J/(mol.K)
TREF = 298.15  # Reference temperature (K), 25 deg C
KG2G = 1e3  # kg/mol -> g/mol, for correlations fitted in g/mol
PA2MPA = 1e-6  # Pa -> MPa, for the IAPWS-IF97 equations

# Saturation below which the Brooks-Corey capillary pressure curve is
# replaced by its smooth extension. The external curve evaluators were tuned
# against exactly this value (smaller values have produced negative pressures
# in sensitive problems), so it is shared by every regularized parameter set
# and must not be changed here. Use a subclass of
# RegularizedBrooksCoreyParams that overrides threshold_sw() instead.
THRESHOLD_SW = 1e-2
