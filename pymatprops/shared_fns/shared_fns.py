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

def convert_to_numpy(input_data):
    # Convert input data to a numpy array ensuring it is always sizeable
    # Lists, tuples, scalars and 0-d arrays all become arrays of at least one element
    return np.atleast_1d(np.asarray(input_data))

def harmonic_mean(x, y):
    """ Harmonic mean of two values, 2xy / (x + y) """
    return 2 * x * y / (x + y)
