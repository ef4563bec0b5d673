from .components import *
