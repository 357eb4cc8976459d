"""
Three-qubit bit-flip code.

Logical qubit k occupies physical qubits 3k, 3k+1, 3k+2 ("base", base+1,
base+2). Encoding copies the base qubit onto the other two with CNOTs; the
syndrome is read by measuring all three, so it is destructive; recovery flips
the qubit the syndrome points at.

    syndrome (s0, s1)   flipped qubit
    (0, 0)              none
    (1, 0)              base + 1
    (0, 1)              base + 2
    (1, 1)              base
"""

import numpy as np
from typing import Optional, Sequence, Tuple

from .core import apply_cnot, apply_pauli_x, measure_qubit
from .logging_config import get_logger
from .state import QuantumState

logger = get_logger("error_correction")


def encode_bit_flip(state: QuantumState, logical_qubit: int):
    """Encode logical qubit k: CNOT(base, base+1), CNOT(base, base+2)."""
    base = logical_qubit * 3
    apply_cnot(state, base, base + 1)
    apply_cnot(state, base, base + 2)


def measure_syndrome(state: QuantumState, logical_qubit: int,
                     rng: Optional[np.random.Generator] = None) -> Tuple[int, int]:
    """
    Measure the three physical qubits and compute the parity syndrome.

    Args:
        state: Encoded state (collapsed by the measurements)
        logical_qubit: Logical qubit index
        rng: Uniform random source

    Returns:
        (b0 XOR b1, b0 XOR b2) for the measured bits of base, base+1, base+2
    """
    if rng is None:
        rng = np.random.default_rng()

    base = logical_qubit * 3
    b0 = measure_qubit(state, base, rng)
    b1 = measure_qubit(state, base + 1, rng)
    b2 = measure_qubit(state, base + 2, rng)

    syndrome = (b0 ^ b1, b0 ^ b2)
    logger.debug("Syndrome for logical qubit %d: %s", logical_qubit, syndrome)
    return syndrome


def recover_bit_flip(state: QuantumState, logical_qubit: int, syndrome: Sequence[int]):
    """Flip the physical qubit identified by the syndrome (no-op for (0, 0))."""
    base = logical_qubit * 3
    s0, s1 = syndrome

    if s0 and not s1:
        apply_pauli_x(state, base + 1)
    elif s1 and not s0:
        apply_pauli_x(state, base + 2)
    elif s0 and s1:
        apply_pauli_x(state, base)


def correct_bit_flip(state: QuantumState, logical_qubit: int,
                     rng: Optional[np.random.Generator] = None) -> Tuple[int, int]:
    """Measure the syndrome, apply the recovery and return the syndrome."""
    syndrome = measure_syndrome(state, logical_qubit, rng)
    recover_bit_flip(state, logical_qubit, syndrome)
    return syndrome
