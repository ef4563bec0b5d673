from .fluidmatrix import *
