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

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from pymatprops.constants import THRESHOLD_SW

@dataclass(frozen=True)
class BrooksCoreyParams:
    """ Parameters of the Brooks-Corey Sw-pc relation
        pe: Entry pressure (Pa)
        alpha: Shape exponent (pore size distribution index)
    """
    pe: float
    alpha: float


class RegularizedBrooksCoreyParams(BrooksCoreyParams):
    """ Parameters of the regularized Brooks-Corey Sw-pc relation """

    def threshold_sw(self) -> float:
        """ Effective water saturation below which the capillary pressure is regularized.

            Returns the shared THRESHOLD_SW (1%) regardless of pe and alpha. If a different
            threshold is required, override this method in a subclass.
        """
        return THRESHOLD_SW


def pc(params: BrooksCoreyParams, swe: npt.ArrayLike) -> np.ndarray:
    """ Returns capillary pressure (Pa), pe * Swe^(-1/alpha)
        params: BrooksCoreyParams
        swe: Effective water saturation
    """
    return params.pe * swe ** (-1 / params.alpha)

def sw(params: BrooksCoreyParams, pc: npt.ArrayLike) -> np.ndarray:
    """ Returns effective water saturation at a capillary pressure (Pa), (pc / pe)^(-alpha) """
    return (pc / params.pe) ** (-params.alpha)

def dpc_dsw(params: BrooksCoreyParams, swe: npt.ArrayLike) -> np.ndarray:
    """ Returns derivative of capillary pressure with respect to effective water saturation (Pa) """
    return -params.pe / params.alpha * swe ** (-1 / params.alpha - 1)

def dsw_dpc(params: BrooksCoreyParams, pc: npt.ArrayLike) -> np.ndarray:
    """ Returns derivative of effective water saturation with respect to capillary pressure (1/Pa) """
    return -params.alpha / params.pe * (pc / params.pe) ** (-params.alpha - 1)

def krw(params: BrooksCoreyParams, swe: npt.ArrayLike) -> np.ndarray:
    """ Returns wetting phase relative permeability, Burdine model: Swe^((2 + 3.alpha) / alpha) """
    return swe ** ((2 + 3 * params.alpha) / params.alpha)

def krn(params: BrooksCoreyParams, swe: npt.ArrayLike) -> np.ndarray:
    """ Returns non-wetting phase relative permeability, Burdine model: (1 - Swe)^2 . (1 - Swe^((2 + alpha) / alpha)) """
    exponent = (2 + params.alpha) / params.alpha
    return (1 - swe) ** 2 * (1 - swe ** exponent)
