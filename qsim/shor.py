"""
Simplified period finding in the style of Shor's algorithm.

This is a fixed illustrative pipeline, not a factoring routine: the modular
exponentiation is replaced by controlled phases of 2π/N between paired qubits
of the two half-registers, followed by the QFT and a measurement of the first
register. candidate_factors() performs the usual classical post-processing
on whatever period comes out.
"""

import numpy as np
from typing import Optional, Tuple

from .core import apply_controlled_phase, apply_hadamard, measure_qubit
from .logging_config import get_logger
from .qft import quantum_fourier_transform
from .state import QuantumState
from .utils import gcd

logger = get_logger("shor")


def shor_period_finding(state: QuantumState, number: int,
                        rng: Optional[np.random.Generator] = None) -> int:
    """
    Run the period-finding pipeline.

    Register layout: half = n // 2. Qubits 0 .. half-1 form the first
    register, qubits half .. 2·half-1 the second.

    Args:
        state: Register in |0...0⟩ (modified and partially measured)
        number: The N whose period is sought (sets the phase 2π/N)
        rng: Uniform random source for the measurements

    Returns:
        First-register measurement as an integer (LSB = qubit 0)
    """
    if rng is None:
        rng = np.random.default_rng()

    half = state.num_qubits // 2

    for i in range(half):
        apply_hadamard(state, i)

    # Stand-in for modular exponentiation
    for i in range(half):
        apply_controlled_phase(state, i, half + i, 2 * np.pi / number)

    quantum_fourier_transform(state)

    period = 0
    for i in range(half):
        period |= measure_qubit(state, i, rng) << i

    logger.debug("Period finding for N=%d measured %d", number, period)
    return period


def candidate_factors(number: int, period: int, base: int = 2) -> Optional[Tuple[int, int]]:
    """
    Classical post-processing of a period.

    For an even period r, gcd(base^(r/2) ± 1, N) are the factor candidates.

    Args:
        number: N
        period: Measured period r
        base: The a in a^x mod N

    Returns:
        (gcd(a^(r/2) + 1, N), gcd(a^(r/2) - 1, N)), or None if r is not a
        positive even number
    """
    if period <= 0 or period % 2:
        return None

    half_power = pow(base, period // 2, number)
    return gcd(half_power + 1, number), gcd(half_power - 1, number)
