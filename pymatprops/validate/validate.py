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

from pymatprops.classes import comp_prop, binary_prop, class_dic

def validate_methods(names, variables):
    """ Converts string selectors to their Enum members, e.g. 'liquid_density' -> comp_prop.LIQUID_DENSITY
        names: List of class_dic keys, one per variable
        variables: List of Enum members or their (case insensitive) names
        Raises ValueError if a name does not match a member
    """
    variables = list(variables)
    for m, method in enumerate(names):
        if type(variables[m]) == str:
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                choices = [x.name for x in class_dic[method]]
                raise ValueError(f"Unknown {method}: {variables[m]}. Choose from {choices}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
