# Utility Functions
#
# Common utilities used across the laser model.
#
# Submodules:
#   - math_utils: 3-vectors as named tuples, norm, dot product, unit vectors

from .math_utils import Vec3, X_HAT, Y_HAT, Z_HAT, as_vec3, dot, norm, normalize

__all__ = ["Vec3", "X_HAT", "Y_HAT", "Z_HAT", "as_vec3", "dot", "norm", "normalize"]
