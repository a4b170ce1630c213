"""
Laser Configuration for Trapped-Ion Simulations
===============================================

This module defines ``Laser``, the set of physical parameters describing one
laser beam that illuminates an ion chain. Hamiltonian-construction code reads
these parameters; this module only guarantees that they are physically
consistent.

THE PARAMETERS
--------------

**E(t) - field amplitude [V/m]**
    Magnitude of the electric field at the ions. Together with the transition
    matrix element it sets the Rabi frequency, Ω ∝ E.

**Δ - detuning [Hz]**
    Static offset of the laser frequency from f = c/λ.

**ϵ̂ - polarization** and **k̂ - propagation direction**
    Unit vectors. For a transverse wave the field oscillates perpendicular to
    the direction of travel, so ϵ̂·k̂ = 0. For the 729 nm quadrupole transition
    both vectors enter the coupling strength.

**ϕ(t) - phase [rad]**
    Instantaneous laser phase. A time-dependent phase also models a
    time-dependent detuning, since Δ(t) = (1/2π) dϕ/dt.

**λ - wavelength [m]**
    Defaults to the Ca-40 S₁/₂ → D₅/₂ qubit transition.

**pointing - ion addressing table**
    List of ``(ion_index, scale)`` pairs. ``scale`` ∈ [0, 1] is the fraction of
    the field amplitude reaching that ion (beam profile, tight focusing, or
    crosstalk onto neighbours). An ion may appear at most once.

TIME-DEPENDENT FIELDS
---------------------

``E`` and ``phase`` are always stored as callables of time. Passing a number
wraps it in a ``ConstantField``, so downstream code calls ``laser.E(t)``
without checking what the user supplied. The time unit of user-supplied
functions is opaque here: they must match whatever timescale the Hamiltonian
builder uses.

VALIDATION
----------

At construction every invariant is enforced and a violation raises. After
construction each mutable field has an explicit setter (also reachable through
attribute assignment). Setting ϵ̂ or k̂ to a direction that is no longer
orthogonal to its partner only warns, so geometry can be rotated one vector at
a time. Anything else that violates an invariant raises and leaves the laser
unchanged.

Example
-------
>>> L = Laser(E=5, phase=0.25, pointing=[(0, 1.0), (1, 0.1)])
>>> L.E(0.0), L.E(1e-3)
(5, 5)
>>> L.polarization = Vec3(1, 0, 0)   # still ⟂ ẑ, no warning
>>> L.pointing = [(0, 1.2)]          # raises ValueError, table unchanged
"""

import copy
import warnings
from collections.abc import Sequence
from numbers import Integral, Real
from typing import Callable, List, Tuple, Union

import numpy as np

from .constants import C, CA40_QUBIT_TRANSITION_FREQUENCY
from .utils.math_utils import Vec3, Z_HAT, as_vec3, dot, norm

TimeFunction = Callable[[float], float]
FieldInput = Union[Real, TimeFunction]
PointingTable = List[Tuple[int, Real]]

# =============================================================================
# DEFAULTS AND TOLERANCES
# =============================================================================

DEFAULT_POLARIZATION = Vec3(1 / np.sqrt(2), 1 / np.sqrt(2), 0.0)  # (x̂ + ŷ)/√2
DEFAULT_PROPAGATION_DIRECTION = Z_HAT
DEFAULT_WAVELENGTH = C / CA40_QUBIT_TRANSITION_FREQUENCY  # [m]

# | |v| - 1 | <= UNIT_NORM_RTOL
UNIT_NORM_RTOL: float = 1e-6
# |ϵ̂·k̂| <= ORTHOGONALITY_ATOL
ORTHOGONALITY_ATOL: float = 1e-6


# =============================================================================
# TIME-FUNCTION WRAPPING
# =============================================================================

class ConstantField:
    """
    Callable returning the same value at every time.

    Keeps the wrapped scalar in ``value`` so that two constant fields compare
    by value rather than by function identity.
    """

    __slots__ = ("value",)

    def __init__(self, value: Real):
        self.value = value

    def __call__(self, t: float) -> Real:
        return self.value

    def __eq__(self, other):
        if not isinstance(other, ConstantField):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((ConstantField, self.value))

    def __repr__(self) -> str:
        return f"ConstantField({self.value!r})"


def as_time_function(value: FieldInput, name: str = "value") -> TimeFunction:
    """
    Normalize a scalar-or-function input into a function of time.

    Parameters
    ----------
    value : real number or callable
        A number is wrapped in a ConstantField. A callable is returned
        unchanged.
    name : str
        Field name used in the error message.

    Returns
    -------
    callable
        f(t) for any t.

    Raises
    ------
    TypeError
        If ``value`` is neither a real number nor callable.
    """
    if callable(value):
        return value
    if isinstance(value, Real):
        return ConstantField(value)
    raise TypeError(
        f"{name} must be a real number or a function of time, got {type(value).__name__}"
    )


# =============================================================================
# VALIDATION HELPERS
# =============================================================================

def _is_unit(v: Vec3) -> bool:
    return bool(np.isclose(norm(v), 1.0, rtol=UNIT_NORM_RTOL, atol=0.0))


def _is_orthogonal(a: Vec3, b: Vec3) -> bool:
    return abs(dot(a, b)) <= ORTHOGONALITY_ATOL


def _unit_vector(v, symbol: str) -> Vec3:
    vec = as_vec3(v)
    if not _is_unit(vec):
        raise ValueError(f"|{symbol}| must be 1 (rtol={UNIT_NORM_RTOL}), got {norm(vec)!r}")
    return vec


def _validate_pointing(pointing: Sequence) -> PointingTable:
    """Check shape, duplicate ions and scale range; return a fresh table."""
    if isinstance(pointing, (str, bytes)) or not isinstance(pointing, (Sequence, np.ndarray)):
        raise TypeError(
            f"pointing must be a sequence of (ion_index, scale) pairs, got {type(pointing).__name__}"
        )

    table = []
    for entry in pointing:
        if isinstance(entry, (str, bytes)) or not isinstance(entry, (Sequence, np.ndarray)) or len(entry) != 2:
            raise TypeError(f"pointing entries must be (ion_index, scale) pairs, got {entry!r}")
        ion, scale = entry
        if isinstance(ion, bool) or not isinstance(ion, Integral):
            raise TypeError(f"ion index must be an integer, got {ion!r}")
        if isinstance(scale, bool) or not isinstance(scale, Real):
            raise TypeError(f"pointing scale must be a real number, got {scale!r}")
        table.append((int(ion), scale))

    ions = [ion for ion, _ in table]
    if len(ions) != len(set(ions)):
        raise ValueError(f"pointing table addresses the same ion more than once: {table}")

    for ion, scale in table:
        if not 0 <= scale <= 1:
            raise ValueError(f"pointing scale for ion {ion} must lie in [0, 1], got {scale!r}")

    return table


# =============================================================================
# LASER
# =============================================================================

class Laser:
    """
    The physical parameters defining laser light.

    Parameters
    ----------
    E : float or callable, default 0
        Magnitude of the E-field in V/m, constant or a function of time.
    detuning : float, default 0
        Static detuning from f = c/λ in Hz.
    polarization : Vec3 or 3-sequence, default (x̂ + ŷ)/√2
        Polarization direction ϵ̂. Must have unit norm.
    propagation_direction : Vec3 or 3-sequence, default ẑ
        Propagation direction k̂. Must have unit norm and be orthogonal to ϵ̂.
    phase : float or callable, default 0
        Laser phase in radians, constant or a function of time. A function of
        time also models a time-dependent detuning.
    wavelength : float, default c / f(Ca-40 qubit)
        Wavelength in meters.
    pointing : sequence of (int, float), default ()
        ``(ion_index, scale)`` pairs, each ion at most once, 0 <= scale <= 1.

    Raises
    ------
    ValueError
        If ϵ̂ or k̂ is not a unit vector, ϵ̂ is not orthogonal to k̂, an ion
        appears twice in ``pointing``, or a scale lies outside [0, 1].
    TypeError
        If ``pointing`` is not a sequence of (int, real) pairs, or ``E`` or
        ``phase`` is neither a number nor callable.

    Example
    -------
    >>> from ionsim.utils.math_utils import X_HAT, Y_HAT
    >>> L = Laser(E=lambda t: 1e3 * np.sin(t), polarization=X_HAT,
    ...           propagation_direction=Y_HAT, pointing=[(0, 1.0)])
    """

    def __init__(
        self,
        E: FieldInput = 0,
        detuning: float = 0,
        polarization=DEFAULT_POLARIZATION,
        propagation_direction=DEFAULT_PROPAGATION_DIRECTION,
        phase: FieldInput = 0,
        wavelength: float = DEFAULT_WAVELENGTH,
        pointing: Sequence = (),
    ):
        eps = _unit_vector(polarization, "ϵ")
        k = _unit_vector(propagation_direction, "k")
        if not _is_orthogonal(eps, k):
            raise ValueError(
                f"polarization must be orthogonal to propagation direction, got ϵ·k = {dot(eps, k)!r}"
            )
        table = _validate_pointing(pointing)
        E_t = as_time_function(E, "E")
        phase_t = as_time_function(phase, "phase")

        self._E = E_t
        self.detuning = detuning
        self._polarization = eps
        self._propagation_direction = k
        self._phase = phase_t
        self.wavelength = wavelength
        self._pointing = table

    # --- Time-dependent fields -----------------------------------------------

    @property
    def E(self) -> TimeFunction:
        """Field amplitude E(t) in V/m."""
        return self._E

    @E.setter
    def E(self, value: FieldInput) -> None:
        self.set_field_amplitude(value)

    def set_field_amplitude(self, value: FieldInput) -> None:
        """Store a new field amplitude, wrapping a number as a constant function."""
        self._E = as_time_function(value, "E")

    @property
    def phase(self) -> TimeFunction:
        """Laser phase ϕ(t) in radians."""
        return self._phase

    @phase.setter
    def phase(self, value: FieldInput) -> None:
        self.set_phase(value)

    def set_phase(self, value: FieldInput) -> None:
        """Store a new phase, wrapping a number as a constant function."""
        self._phase = as_time_function(value, "phase")

    # --- Geometry ------------------------------------------------------------

    @property
    def polarization(self) -> Vec3:
        """Unit polarization vector ϵ̂."""
        return self._polarization

    @polarization.setter
    def polarization(self, value) -> None:
        self._store_polarization(value, stacklevel=4)

    def set_polarization(self, value) -> bool:
        """
        Set ϵ̂.

        A non-unit vector raises ValueError and leaves ϵ̂ unchanged. A unit
        vector not orthogonal to the current k̂ is stored anyway and a
        UserWarning is issued, so k̂ can be updated next.

        Returns
        -------
        bool
            True if the new ϵ̂ is orthogonal to k̂.
        """
        return self._store_polarization(value, stacklevel=4)

    def _store_polarization(self, value, stacklevel: int) -> bool:
        eps = _unit_vector(value, "ϵ")
        self._polarization = eps
        return self._check_orthogonal(stacklevel)

    @property
    def propagation_direction(self) -> Vec3:
        """Unit propagation direction k̂."""
        return self._propagation_direction

    @propagation_direction.setter
    def propagation_direction(self, value) -> None:
        self._store_propagation_direction(value, stacklevel=4)

    def set_propagation_direction(self, value) -> bool:
        """
        Set k̂. Mirror of :meth:`set_polarization`.

        Returns
        -------
        bool
            True if the new k̂ is orthogonal to ϵ̂.
        """
        return self._store_propagation_direction(value, stacklevel=4)

    def _store_propagation_direction(self, value, stacklevel: int) -> bool:
        k = _unit_vector(value, "k")
        self._propagation_direction = k
        return self._check_orthogonal(stacklevel)

    def _check_orthogonal(self, stacklevel: int) -> bool:
        # stacklevel counts frames from here up to the user call site
        if _is_orthogonal(self._polarization, self._propagation_direction):
            return True
        warnings.warn(
            f"polarization is not orthogonal to propagation direction: ϵ·k = "
            f"{dot(self._polarization, self._propagation_direction)!r}",
            UserWarning,
            stacklevel=stacklevel,
        )
        return False

    # --- Ion addressing ------------------------------------------------------

    @property
    def pointing(self) -> PointingTable:
        """Copy of the (ion_index, scale) table. Use set_pointing to change it."""
        return list(self._pointing)

    @pointing.setter
    def pointing(self, value: Sequence) -> None:
        self.set_pointing(value)

    def set_pointing(self, value: Sequence) -> None:
        """Replace the whole pointing table after validating it."""
        self._pointing = _validate_pointing(value)

    # --- Comparison, copying, output -----------------------------------------

    def _fields(self) -> tuple:
        return (
            self._E,
            self.detuning,
            self._polarization,
            self._propagation_direction,
            self._phase,
            self.wavelength,
            self._pointing,
        )

    def __eq__(self, other):
        if not isinstance(other, Laser):
            return NotImplemented
        return all(a == b for a, b in zip(self._fields(), other._fields()))

    __hash__ = None

    def copy(self) -> "Laser":
        """Return an independent Laser with the same parameters, without revalidating."""
        new = self.__class__.__new__(self.__class__)
        new.__dict__.update(self.__dict__)
        new._pointing = list(self._pointing)
        return new

    def __copy__(self) -> "Laser":
        return self.copy()

    def __deepcopy__(self, memo) -> "Laser":
        new = self.copy()
        memo[id(self)] = new
        new._E = copy.deepcopy(self._E, memo)
        new._phase = copy.deepcopy(self._phase, memo)
        return new

    def summary(self) -> str:
        """Return a human-readable summary with E and ϕ evaluated at t = 0."""
        eps = self._polarization
        k = self._propagation_direction
        lines = [
            f"λ: {self.wavelength} m",
            f"Δ: {self.detuning} Hz",
            f"ϵ̂: (x={eps.x}, y={eps.y}, z={eps.z})",
            f"k̂: (x={k.x}, y={k.y}, z={k.z})",
            f"E(t=0): {self._E(0.0)} V/m",
            f"ϕ(t=0): {self._phase(0.0)} ⋅ 2π",
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return (
            f"Laser(E={self._E!r}, detuning={self.detuning!r}, "
            f"polarization={tuple(self._polarization)!r}, "
            f"propagation_direction={tuple(self._propagation_direction)!r}, "
            f"phase={self._phase!r}, wavelength={self.wavelength!r}, "
            f"pointing={self._pointing!r})"
        )
