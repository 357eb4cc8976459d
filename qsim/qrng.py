"""Quantum random number generation from Hadamard + measurement."""

import numpy as np
from typing import Optional

from .core import apply_hadamard, measure_qubit
from .logging_config import get_logger
from .state import QuantumState

logger = get_logger("qrng")


def quantum_random_number(state: QuantumState, num_bits: int,
                          rng: Optional[np.random.Generator] = None) -> int:
    """
    Generate a random integer one qubit at a time.

    For i in 0 .. num_bits-1: H on qubit i, measure it, and store the result
    as bit i (LSB first).

    Args:
        state: Register with at least num_bits qubits (modified in place)
        num_bits: Number of random bits
        rng: Uniform random source for the measurements

    Returns:
        Integer in [0, 2^num_bits)
    """
    if rng is None:
        rng = np.random.default_rng()

    result = 0
    for i in range(num_bits):
        apply_hadamard(state, i)
        result |= measure_qubit(state, i, rng) << i

    logger.debug("Generated %d random bits: %d", num_bits, result)
    return result
