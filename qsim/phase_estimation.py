"""
Quantum phase estimation.

The lower half of the register (n // 2 qubits) holds the precision qubits and
the last qubit is the eigenstate target. Precision qubit i controls a phase of
true_phase · 2^i on the target. The circuit then applies the forward
quantum_fourier_transform to the whole register, not an inverse transform on
the precision qubits alone.
"""

from .core import apply_controlled_phase, apply_hadamard
from .logging_config import get_logger
from .qft import quantum_fourier_transform
from .state import QuantumState

logger = get_logger("phase_estimation")


def quantum_phase_estimation(state: QuantumState, true_phase: float):
    """
    Run phase estimation for the phase gate P(true_phase).

    Args:
        state: Register; qubits 0 .. n//2 - 1 are precision qubits and qubit
               n - 1 is the target (modified in place)
        true_phase: Phase angle in radians (2π·φ for a fractional phase φ)
    """
    n = state.num_qubits
    precision_qubits = n // 2
    target = n - 1

    for i in range(precision_qubits):
        apply_hadamard(state, i)

    for i in range(precision_qubits):
        apply_controlled_phase(state, i, target, true_phase * 2 ** i)

    quantum_fourier_transform(state)

    logger.debug("Phase estimation: %d precision qubits, phase %.6f",
                 precision_qubits, true_phase)
