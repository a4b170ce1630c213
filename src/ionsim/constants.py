"""
Physical Constants for Trapped-Ion Laser Configuration
======================================================

This module defines the physical constants the laser model needs. All values
are in SI units.

WHY THESE CONSTANTS MATTER
--------------------------

**c (C) - Speed of light**
    Connects the frequency of a laser to its wavelength:
    - λ = c/f (vacuum wavelength of a laser tuned to frequency f)
    - k = 2π/λ (wavevector magnitude, sets the Lamb-Dicke parameter)

**f₀ (CA40_QUBIT_TRANSITION_FREQUENCY) - Ca-40 optical qubit**
    The ⁴⁰Ca⁺ S₁/₂ → D₅/₂ electric quadrupole transition at ~729 nm. A laser
    with zero detuning drives this transition resonantly, so its default
    wavelength is c/f₀.

References
----------
CODATA 2018 recommended values:
https://physics.nist.gov/cuu/Constants/

Chwalla et al., "Absolute frequency measurement of the ⁴⁰Ca⁺ 4s ²S₁/₂ − 3d ²D₅/₂
clock transition", Phys. Rev. Lett. 102, 023002 (2009)
"""

from scipy.constants import c

# =============================================================================
# FUNDAMENTAL CONSTANTS (CODATA 2018)
# =============================================================================

C = float(c)  # Speed of light [m/s] (exact by definition)
"""
The speed of light in vacuum.

**For laser configuration**: Used to convert between transition frequency and
wavelength, λ = c/f.

**Numerical value**: 299,792,458 m/s (exact)
"""

# =============================================================================
# ATOMIC TRANSITIONS
# =============================================================================

CA40_QUBIT_TRANSITION_FREQUENCY = 411_042_129_776_393.2  # [Hz]
"""
Frequency of the ⁴⁰Ca⁺ 4s ²S₁/₂ ↔ 3d ²D₅/₂ qubit transition.

**Physical meaning**: The optical qubit used in most Ca⁺ trapped-ion
experiments. The D₅/₂ state lives ~1.17 s, so the transition is narrow enough
to resolve motional sidebands.

**Numerical value**: 411.042 129 776 393 THz (Chwalla 2009)
"""

CA40_QUBIT_WAVELENGTH = C / CA40_QUBIT_TRANSITION_FREQUENCY  # [m] ~729.35 nm
"""Vacuum wavelength of the Ca-40 qubit transition, c/f₀."""
