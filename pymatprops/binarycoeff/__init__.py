from .binarycoeff import *
from ._lib_correlations import henry_iapws, fuller_method
