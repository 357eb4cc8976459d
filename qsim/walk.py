"""
One-dimensional quantum walk.

Qubit 0 is the coin. Each step flips the coin with a Hadamard and then applies
a controlled phase of π/2 from the coin to every other qubit, a simplified
stand-in for the conditional shift.
"""

import numpy as np

from .core import apply_controlled_phase, apply_hadamard
from .logging_config import get_logger
from .state import QuantumState

logger = get_logger("walk")


def quantum_walk_1d(state: QuantumState, steps: int):
    """
    Run `steps` walk steps.

    Args:
        state: Register (modified in place)
        steps: Number of coin + shift steps
    """
    for _ in range(steps):
        apply_hadamard(state, 0)

        for q in range(1, state.num_qubits):
            apply_controlled_phase(state, 0, q, np.pi / 2)

    logger.debug("Quantum walk: %d steps on %d qubits", steps, state.num_qubits)
