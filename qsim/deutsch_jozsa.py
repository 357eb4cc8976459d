"""
Deutsch-Jozsa algorithm.

Decides whether a black-box function is constant or balanced with a single
query. The balanced oracle used here is a fixed stand-in: a Pauli-Z on every
position 0 .. size/2 - 1 read as a qubit index. Positions past the last qubit
act on nothing, so in practice every qubit of the register gets a Z.

After the circuit, measuring all zeros means "constant", anything else means
"balanced".
"""

from .core import apply_hadamard, apply_pauli_z
from .logging_config import get_logger
from .state import QuantumState

logger = get_logger("deutsch_jozsa")


def deutsch_jozsa(state: QuantumState, is_constant: bool):
    """
    Run the Deutsch-Jozsa circuit.

    Args:
        state: Register, normally in |0...0⟩ (modified in place)
        is_constant: True for the constant oracle (identity), False for the
                     balanced stand-in
    """
    n = state.num_qubits

    for q in range(n):
        apply_hadamard(state, q)

    if not is_constant:
        # Only positions that name a qubit of the register have any effect
        for position in range(min(state.size // 2, n)):
            apply_pauli_z(state, position)

    for q in range(n):
        apply_hadamard(state, q)

    logger.debug("Deutsch-Jozsa on %d qubits (constant=%s)", n, is_constant)


def is_constant_outcome(outcome: int) -> bool:
    """Interpret a full-register measurement: 0 means constant, otherwise balanced."""
    return outcome == 0
