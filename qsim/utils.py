"""
Utility functions for quantum computing.

This module provides helper functions for:
- Quantum state comparison (accounting for global phase), used by
  QuantumState.fidelity / QuantumState.equivalent and by the tests
- Classical number theory used by period-finding post-processing
"""

import numpy as np


# =============================================================================
# Quantum state utilities
# =============================================================================

def allclose_up_to_global_phase(v, w, atol: float = 1e-9) -> bool:
    """
    Check whether v equals e^{iφ}·w for some global phase φ.

    The phase is taken from the overlap ⟨w|v⟩, so no single amplitude has
    to be large. Vectors of different length are never equal.

    Args:
        v, w: Amplitude vectors or QuantumStates
        atol: Absolute tolerance per amplitude
    """
    v = _as_vector(v)
    w = _as_vector(w)
    if v.shape != w.shape:
        return False

    overlap = np.vdot(w, v)
    if abs(overlap) < atol:
        # Orthogonal, or both (near) zero
        return np.allclose(v, w, atol=atol)
    return np.allclose(v, overlap / abs(overlap) * w, atol=atol)


def state_fidelity(v, w) -> float:
    """|⟨v|w⟩|² for two pure states: 1 for the same ray, 0 for orthogonal ones."""
    return float(np.abs(np.vdot(_as_vector(v), _as_vector(w))) ** 2)


def _as_vector(x) -> np.ndarray:
    amplitudes = getattr(x, "amplitudes", x)
    return np.asarray(amplitudes).reshape(-1)


# =============================================================================
# Number theory utilities
# =============================================================================

def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor using Euclidean algorithm.

    Args:
        a, b: Integers

    Returns:
        GCD of a and b (non-negative)
    """
    while b:
        a, b = b, a % b
    return abs(a)
