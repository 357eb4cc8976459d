"""
Quantum Fourier Transform (QFT) implementation.

The transform here is the simulator's fixed gate sequence: a Hadamard on each
qubit followed by phase rotations π/2^(j-i) on every later qubit j, then a
reversal of qubit order. The rotations are plain (uncontrolled) phase gates,
so on the |0...0⟩ input the result is the uniform superposition.
"""

import numpy as np

from .core import apply_hadamard, apply_phase, apply_swap
from .logging_config import get_logger
from .state import QuantumState

logger = get_logger("qft")


def quantum_fourier_transform(state: QuantumState):
    """
    Apply the QFT gate sequence to the whole register.

    For qubit i = 0 .. n-1: H(i), then P(π/2^(j-i)) on each qubit j > i.
    Finally swap qubit i with qubit n-1-i for i < n/2.

    Args:
        state: State to transform (modified in place)
    """
    n = state.num_qubits

    for i in range(n):
        apply_hadamard(state, i)

        for j in range(i + 1, n):
            # Rotation angle: π/2^(j-i)
            theta = np.pi / (2 ** (j - i))
            apply_phase(state, j, theta)

    # Swap qubits to reverse order
    for i in range(n // 2):
        apply_swap(state, i, n - 1 - i)

    logger.debug("QFT applied to %d qubits", n)


def inverse_quantum_fourier_transform(state: QuantumState):
    """
    Undo quantum_fourier_transform.

    The adjoint is obtained by reversing the gate order and negating the
    phase angles (H and SWAP are their own inverses).

    Args:
        state: State to transform (modified in place)
    """
    n = state.num_qubits

    for i in range(n // 2):
        apply_swap(state, i, n - 1 - i)

    for i in range(n - 1, -1, -1):
        for j in range(n - 1, i, -1):
            theta = -np.pi / (2 ** (j - i))  # Negative angle for inverse
            apply_phase(state, j, theta)

        apply_hadamard(state, i)

    logger.debug("Inverse QFT applied to %d qubits", n)
