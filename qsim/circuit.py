"""
Gates as values.

Each gate kind is a small frozen dataclass holding its qubit indices and
angle. apply() validates the indices against the state and dispatches to the
engine in qsim.core; run() applies a sequence.

    >>> state = QuantumState(2)
    >>> run(state, [Hadamard(0), CNOT(0, 1)])   # Bell pair
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from . import core
from .logging_config import get_logger
from .state import QuantumState

logger = get_logger("circuit")


@dataclass(frozen=True)
class Gate:
    """Base class for gate variants."""

    @property
    def qubits(self) -> Tuple[int, ...]:
        raise NotImplementedError

    def _apply(self, state: QuantumState):
        raise NotImplementedError


@dataclass(frozen=True)
class Hadamard(Gate):
    target: int

    @property
    def qubits(self):
        return (self.target,)

    def _apply(self, state):
        core.apply_hadamard(state, self.target)


@dataclass(frozen=True)
class PauliX(Gate):
    target: int

    @property
    def qubits(self):
        return (self.target,)

    def _apply(self, state):
        core.apply_pauli_x(state, self.target)


@dataclass(frozen=True)
class PauliY(Gate):
    target: int

    @property
    def qubits(self):
        return (self.target,)

    def _apply(self, state):
        core.apply_pauli_y(state, self.target)


@dataclass(frozen=True)
class PauliZ(Gate):
    target: int

    @property
    def qubits(self):
        return (self.target,)

    def _apply(self, state):
        core.apply_pauli_z(state, self.target)


@dataclass(frozen=True)
class Phase(Gate):
    target: int
    angle: float

    @property
    def qubits(self):
        return (self.target,)

    def _apply(self, state):
        core.apply_phase(state, self.target, self.angle)


@dataclass(frozen=True)
class RotationX(Gate):
    target: int
    angle: float

    @property
    def qubits(self):
        return (self.target,)

    def _apply(self, state):
        core.apply_rotation_x(state, self.target, self.angle)


@dataclass(frozen=True)
class RotationY(Gate):
    target: int
    angle: float

    @property
    def qubits(self):
        return (self.target,)

    def _apply(self, state):
        core.apply_rotation_y(state, self.target, self.angle)


@dataclass(frozen=True)
class RotationZ(Gate):
    target: int
    angle: float

    @property
    def qubits(self):
        return (self.target,)

    def _apply(self, state):
        core.apply_rotation_z(state, self.target, self.angle)


@dataclass(frozen=True)
class CNOT(Gate):
    control: int
    target: int

    @property
    def qubits(self):
        return (self.control, self.target)

    def _apply(self, state):
        core.apply_cnot(state, self.control, self.target)


@dataclass(frozen=True)
class Swap(Gate):
    qubit1: int
    qubit2: int

    @property
    def qubits(self):
        return (self.qubit1, self.qubit2)

    def _apply(self, state):
        core.apply_swap(state, self.qubit1, self.qubit2)


@dataclass(frozen=True)
class Toffoli(Gate):
    control1: int
    control2: int
    target: int

    @property
    def qubits(self):
        return (self.control1, self.control2, self.target)

    def _apply(self, state):
        core.apply_toffoli(state, self.control1, self.control2, self.target)


@dataclass(frozen=True)
class ControlledPhase(Gate):
    control: int
    target: int
    angle: float

    @property
    def qubits(self):
        return (self.control, self.target)

    def _apply(self, state):
        core.apply_controlled_phase(state, self.control, self.target, self.angle)


GATE_TYPES = (
    Hadamard, PauliX, PauliY, PauliZ, Phase,
    RotationX, RotationY, RotationZ,
    CNOT, Swap, Toffoli, ControlledPhase,
)


def apply(gate: Gate, state: QuantumState):
    """
    Apply one gate after validating its qubits.

    Args:
        gate: Gate variant
        state: State to update

    Raises:
        TypeError: If gate is not one of GATE_TYPES
        QubitIndexError: If a qubit index is out of range
        ValueError: If the same qubit occurs twice
    """
    if not isinstance(gate, GATE_TYPES):
        raise TypeError(f"not a gate: {gate!r}")

    qubits = gate.qubits
    state.check_qubits(*qubits)
    if len(qubits) != len(set(qubits)):
        raise ValueError("The same qubit cannot occur twice as an argument")

    gate._apply(state)


def run(state: QuantumState, gates: Iterable[Gate]) -> QuantumState:
    """
    Apply gates in order.

    Args:
        state: State to update
        gates: Gate variants, applied first to last

    Returns:
        The same state, for chaining
    """
    count = 0
    for gate in gates:
        apply(gate, state)
        count += 1
    logger.debug("Applied %d gates to %d-qubit state", count, state.num_qubits)
    return state
