"""
Core quantum simulation functionality.

This module provides the gate application and measurement engine. Every gate
takes a QuantumState and 0-based qubit indices and updates the amplitude
vector so that it equals the action of the corresponding operator on the
joint state.

Bit-indexed pairing: for a single-target gate with mask m = 1 << target,
every index i0 with the target bit clear pairs with i1 = i0 | m, and the gate
mixes exactly those two amplitudes.

Qubit indices are not validated here. Out-of-range indices are undefined
behaviour; callers validate first (see QuantumState.check_qubits and
qsim.circuit.apply).
"""

import numpy as np
from typing import Optional, Sequence, Tuple

from .errors import DegenerateMeasurementError
from .gates import H_gate, Rx_gate, Ry_gate, phase_factor
from .logging_config import get_logger
from .state import QuantumState

logger = get_logger("core")


def _bit_set(size: int, qubit: int) -> np.ndarray:
    """Boolean mask over all indices: True where bit `qubit` is 1."""
    return (np.arange(size) & (1 << qubit)) != 0


def _pair_indices(size: int, target: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return (i0, i1): indices with the target bit 0 and their partners."""
    mask = 1 << target
    idx = np.arange(size)
    i0 = idx[(idx & mask) == 0]
    return i0, i0 | mask


# =============================================================================
# Single-qubit gates
# =============================================================================

def apply_single_qubit(state: QuantumState, matrix: np.ndarray, target: int):
    """
    Apply a 2x2 unitary to one qubit.

    Both outputs of a pair depend on both inputs, so the result is built in
    a fresh vector and swapped in once complete.

    Args:
        state: State to update
        matrix: 2x2 gate matrix acting on (|0⟩, |1⟩) of the target
        target: Target qubit index
    """
    i0, i1 = _pair_indices(state.size, target)
    old = state.amplitudes
    a0, a1 = old[i0], old[i1]

    new = np.empty_like(old)
    new[i0] = matrix[0, 0] * a0 + matrix[0, 1] * a1
    new[i1] = matrix[1, 0] * a0 + matrix[1, 1] * a1
    state.amplitudes = new


def apply_hadamard(state: QuantumState, target: int):
    """H: new[i0] = (a0 + a1)/√2, new[i1] = (a0 - a1)/√2."""
    apply_single_qubit(state, H_gate, target)


def apply_pauli_x(state: QuantumState, target: int):
    """X: swap the two amplitudes of every pair (in place, pairs are disjoint)."""
    i0, i1 = _pair_indices(state.size, target)
    amps = state.amplitudes
    amps[i0], amps[i1] = amps[i1], amps[i0]


def apply_pauli_y(state: QuantumState, target: int):
    """
    Y: new[i0] = i·old[i1], new[i1] = -i·old[i0].

    This is the textbook Y matrix times the global phase -1. Both old values
    are read before either is written.
    """
    i0, i1 = _pair_indices(state.size, target)
    amps = state.amplitudes
    a0 = amps[i0]
    a1 = amps[i1]
    amps[i0] = 1j * a1
    amps[i1] = -1j * a0


def apply_pauli_z(state: QuantumState, target: int):
    """Z: negate every amplitude whose target bit is 1."""
    state.amplitudes[_bit_set(state.size, target)] *= -1


def apply_phase(state: QuantumState, target: int, angle: float):
    """P(angle): multiply amplitudes with target bit 1 by cos(angle) + i·sin(angle)."""
    state.amplitudes[_bit_set(state.size, target)] *= phase_factor(angle)


def apply_rotation_x(state: QuantumState, target: int, angle: float):
    """Rx(angle) with half-angle coefficients and imaginary off-diagonal."""
    apply_single_qubit(state, Rx_gate(angle), target)


def apply_rotation_y(state: QuantumState, target: int, angle: float):
    """Ry(angle), a real rotation of each pair."""
    apply_single_qubit(state, Ry_gate(angle), target)


def apply_rotation_z(state: QuantumState, target: int, angle: float):
    """Rz(angle), identical to apply_phase."""
    apply_phase(state, target, angle)


# =============================================================================
# Multi-qubit gates
# =============================================================================

def apply_cnot(state: QuantumState, control: int, target: int):
    """CNOT: where the control bit is 1, swap with the target-flipped index."""
    i0, i1 = _pair_indices(state.size, target)
    sel = (i0 & (1 << control)) != 0
    i0, i1 = i0[sel], i1[sel]
    amps = state.amplitudes
    amps[i0], amps[i1] = amps[i1], amps[i0]


def apply_swap(state: QuantumState, qubit1: int, qubit2: int):
    """SWAP: exchange amplitudes of indices whose two bits differ."""
    if qubit1 == qubit2:
        return
    mask1, mask2 = 1 << qubit1, 1 << qubit2
    idx = np.arange(state.size)
    # Visit each differing pair once, from the side with bit1 = 1, bit2 = 0
    i = idx[((idx & mask1) != 0) & ((idx & mask2) == 0)]
    j = i ^ mask1 ^ mask2
    amps = state.amplitudes
    amps[i], amps[j] = amps[j], amps[i]


def apply_toffoli(state: QuantumState, control1: int, control2: int, target: int):
    """Toffoli (CCNOT): like CNOT but requires both control bits set."""
    i0, i1 = _pair_indices(state.size, target)
    controls = (1 << control1) | (1 << control2)
    sel = (i0 & controls) == controls
    i0, i1 = i0[sel], i1[sel]
    amps = state.amplitudes
    amps[i0], amps[i1] = amps[i1], amps[i0]


def apply_controlled_phase(state: QuantumState, control: int, target: int, angle: float):
    """CP(angle): phase factor only where both control and target bits are 1."""
    size = state.size
    both = _bit_set(size, control) & _bit_set(size, target)
    state.amplitudes[both] *= phase_factor(angle)


# =============================================================================
# Measurement
# =============================================================================

def probability_of_one(state: QuantumState, qubit: int) -> float:
    """
    Probability of measuring the qubit as 1, without collapsing.

    Args:
        state: State to inspect
        qubit: Qubit index

    Returns:
        P(|1⟩) for that qubit
    """
    ones = _bit_set(state.size, qubit)
    return float(np.sum(np.abs(state.amplitudes[ones]) ** 2))


def measure_qubit(state: QuantumState, qubit: int, rng: Optional[np.random.Generator] = None) -> int:
    """
    Measure one qubit and collapse the state.

    One uniform draw u in [0, 1) is compared against the probability of the
    zero outcome: the result is 1 iff u > P(0), or if P(0) is exactly zero
    (u may be 0.0). Amplitudes inconsistent with the result are zeroed and
    the survivors renormalized.

    Args:
        state: State to measure (modified in place)
        qubit: Qubit index
        rng: Uniform random source (a fresh default_rng() if None)

    Returns:
        0 or 1

    Raises:
        DegenerateMeasurementError: If the selected branch has zero norm,
            e.g. for an all-zero vector
    """
    if rng is None:
        rng = np.random.default_rng()

    ones = _bit_set(state.size, qubit)
    amps = state.amplitudes
    prob0 = float(np.sum(np.abs(amps[~ones]) ** 2))

    u = rng.random()
    result = 1 if u > prob0 or prob0 == 0.0 else 0

    collapsed = np.where(ones if result else ~ones, amps, 0)
    norm = np.linalg.norm(collapsed)
    if norm == 0.0:
        raise DegenerateMeasurementError(
            f"qubit {qubit} measured {result} but that outcome has zero probability"
        )
    state.amplitudes = collapsed / norm

    logger.debug("Measured qubit %d: %d (P(0)=%.6f, u=%.6f)", qubit, result, prob0, u)
    return result


def measure_register(state: QuantumState, qubits: Optional[Sequence[int]] = None,
                     rng: Optional[np.random.Generator] = None) -> int:
    """
    Measure several qubits and pack the bits into an integer.

    Args:
        state: State to measure (modified in place)
        qubits: Qubits to measure in order (default: all, 0 to n-1).
                qubits[k] supplies bit k of the result (LSB first).
        rng: Uniform random source shared by all draws

    Returns:
        Measured value as integer
    """
    if qubits is None:
        qubits = range(state.num_qubits)
    if rng is None:
        rng = np.random.default_rng()

    result = 0
    for k, q in enumerate(qubits):
        result |= measure_qubit(state, q, rng) << k
    return result
