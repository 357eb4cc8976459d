"""
Quantum teleportation between two registers.

The protocol normally runs on one joint Hilbert space holding the message
qubit and both halves of a Bell pair. Here source and target are two
independently owned QuantumStates: the pair preparation runs locally on the
target, the Bell-basis measurement runs on the source, and the two classical
bits are passed across as plain integers. This is a local simulation of a
non-local protocol, so the target does not in general end up holding the
source's message state.
"""

import numpy as np
from typing import Optional, Tuple

from .core import apply_cnot, apply_hadamard, apply_pauli_x, apply_pauli_z, measure_qubit
from .logging_config import get_logger
from .state import QuantumState

logger = get_logger("teleportation")


def create_bell_pair(state: QuantumState, qubit1: int, qubit2: int):
    """Prepare (|00⟩ + |11⟩)/√2 on two qubits in |00⟩: H(qubit1), CNOT(qubit1, qubit2)."""
    apply_hadamard(state, qubit1)
    apply_cnot(state, qubit1, qubit2)


def quantum_teleportation(source: QuantumState, target: QuantumState,
                          source_qubit: int, target_qubit: int,
                          rng: Optional[np.random.Generator] = None) -> Tuple[int, int]:
    """
    Run the teleportation protocol across two registers.

    Both registers must have at least max(source_qubit, target_qubit) + 1
    qubits, since each index is used on both sides.

    Args:
        source: Register holding the message qubit (measured, modified)
        target: Register receiving the corrections (modified)
        source_qubit: Message qubit index
        target_qubit: Receiving qubit index
        rng: Uniform random source for the two measurements

    Returns:
        (m1, m2): the classical bits measured on source_qubit and target_qubit
    """
    if rng is None:
        rng = np.random.default_rng()

    # Pair preparation on the receiving side
    apply_hadamard(target, target_qubit)
    apply_cnot(target, target_qubit, source_qubit)

    # Bell-basis measurement on the sending side
    apply_cnot(source, source_qubit, target_qubit)
    apply_hadamard(source, source_qubit)

    m1 = measure_qubit(source, source_qubit, rng)
    m2 = measure_qubit(source, target_qubit, rng)

    # Corrections from the classical bits
    if m2:
        apply_pauli_x(target, target_qubit)
    if m1:
        apply_pauli_z(target, target_qubit)

    logger.debug("Teleportation bits m1=%d m2=%d", m1, m2)
    return m1, m2
