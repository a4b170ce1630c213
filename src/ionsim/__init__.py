# IonSim Lasers: laser-light configuration for trapped-ion simulations
#
# Holds the physical parameters of a single laser source and enforces the
# constraints they must satisfy before a Hamiltonian is built from them.
#
# Modules:
#   - constants: Physical constants (speed of light, Ca-40 qubit transition)
#   - lasers: The Laser configuration entity and time-function wrapping
#   - utils: 3-vector helpers (Vec3, norm, dot, unit vectors)
#
# Usage:
#   from ionsim import Laser
#   L = Laser(E=5, phase=0.25, pointing=[(0, 1.0), (1, 0.5)])
#   L.E(t), L.phase(t)   # always callables of time

__version__ = "0.1.0"

from .constants import C, CA40_QUBIT_TRANSITION_FREQUENCY, CA40_QUBIT_WAVELENGTH
from .lasers import ConstantField, Laser, as_time_function
from .utils.math_utils import Vec3, X_HAT, Y_HAT, Z_HAT, dot, norm, normalize

__all__ = [
    "C",
    "CA40_QUBIT_TRANSITION_FREQUENCY",
    "CA40_QUBIT_WAVELENGTH",
    "ConstantField",
    "Laser",
    "as_time_function",
    "Vec3",
    "X_HAT",
    "Y_HAT",
    "Z_HAT",
    "dot",
    "norm",
    "normalize",
]
