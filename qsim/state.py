"""
Quantum state representation.

A QuantumState holds the dense amplitude vector of a small register. Bit k of
an index encodes the value of qubit k, so index 5 = 0b101 is the basis state
with qubits 0 and 2 set.

Each state owns its vector exclusively. Gates either mutate it in place or
build a replacement vector and swap it in.
"""

import numpy as np
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, SimulatorConfig
from .errors import (
    DegenerateMeasurementError,
    QubitCountError,
    QubitIndexError,
    StateReleasedError,
    TooManyQubitsError,
)
from .logging_config import get_logger
from .utils import allclose_up_to_global_phase, state_fidelity

logger = get_logger("state")


class QuantumState:
    """
    Amplitude vector of an n-qubit register.

    Attributes:
        num_qubits: Register width
        size: 2 ** num_qubits
        config: Simulator configuration the state was created with
    """

    def __init__(self, num_qubits: int, config: SimulatorConfig = DEFAULT_CONFIG):
        if num_qubits > config.max_qubits:
            raise TooManyQubitsError(num_qubits, config.max_qubits)
        if num_qubits < 1:
            raise QubitCountError(f"num_qubits must be >= 1, got {num_qubits}")

        self.num_qubits = num_qubits
        self.size = 1 << num_qubits
        self.config = config
        self._amplitudes: Optional[np.ndarray] = np.zeros(self.size, dtype=complex)
        self._amplitudes[0] = 1.0 + 0j

    @classmethod
    def from_amplitudes(cls, values: Sequence[complex],
                        config: SimulatorConfig = DEFAULT_CONFIG) -> "QuantumState":
        """
        Build a state from an explicit amplitude vector.

        Args:
            values: 2^n amplitudes, little-endian qubit order.
                    Will be automatically normalized.
            config: Simulator configuration

        Returns:
            New QuantumState holding a normalized copy of values
        """
        vector = np.array(values, dtype=complex).reshape(-1)
        size = vector.shape[0]
        if size < 2 or size & (size - 1):
            raise QubitCountError(f"amplitude count must be a power of two >= 2, got {size}")

        state = cls(size.bit_length() - 1, config)
        state.amplitudes = vector
        normalize_state(state)
        return state

    @property
    def amplitudes(self) -> np.ndarray:
        """The live amplitude vector (mutated by gates)."""
        if self._amplitudes is None:
            raise StateReleasedError("state has been destroyed")
        return self._amplitudes

    @amplitudes.setter
    def amplitudes(self, vector: np.ndarray):
        if self._amplitudes is None:
            raise StateReleasedError("state has been destroyed")
        vector = np.asarray(vector, dtype=complex)
        if vector.shape != (self.size,):
            raise ValueError(f"expected {self.size} amplitudes, got shape {vector.shape}")
        self._amplitudes = vector

    @property
    def released(self) -> bool:
        return self._amplitudes is None

    def release(self):
        """Drop the amplitude vector. Further access raises StateReleasedError."""
        self._amplitudes = None

    def amplitude(self, index: int) -> complex:
        """Return the amplitude of basis state |index⟩."""
        return complex(self.amplitudes[index])

    def probabilities(self) -> np.ndarray:
        """Return |amplitude|² for every basis state."""
        return np.abs(self.amplitudes) ** 2

    def norm(self) -> float:
        return float(np.linalg.norm(self.amplitudes))

    def is_normalized(self, atol: Optional[float] = None) -> bool:
        """Check the unit-norm invariant within tolerance."""
        if atol is None:
            atol = self.config.normalization_atol
        return abs(float(self.probabilities().sum()) - 1.0) <= atol

    def nonzero_terms(self, threshold: Optional[float] = None) -> List[Tuple[int, complex]]:
        """
        List the basis terms a display would show.

        Args:
            threshold: Minimum magnitude (default: config.display_threshold)

        Returns:
            List of (index, amplitude) pairs in index order
        """
        if threshold is None:
            threshold = self.config.display_threshold
        amps = self.amplitudes
        indices = np.flatnonzero(np.abs(amps) > threshold)
        return [(int(i), complex(amps[i])) for i in indices]

    def check_qubits(self, *qubits: int):
        """
        Validate qubit indices against the register width.

        The gate engine itself does not validate; drivers call this first.

        Raises:
            QubitIndexError: If any index is outside [0, num_qubits)
        """
        for q in qubits:
            if not (0 <= q < self.num_qubits):
                raise QubitIndexError(
                    f"qubit index {q} out of range for {self.num_qubits}-qubit state"
                )

    def copy(self) -> "QuantumState":
        """Return an independent copy of this state."""
        clone = QuantumState(self.num_qubits, self.config)
        clone.amplitudes = self.amplitudes.copy()
        return clone

    def fidelity(self, other) -> float:
        """|⟨self|other⟩|² against another state or amplitude vector."""
        return state_fidelity(self, other)

    def equivalent(self, other, atol: Optional[float] = None) -> bool:
        """True if other is this state up to a global phase."""
        if atol is None:
            atol = self.config.normalization_atol
        return allclose_up_to_global_phase(self, other, atol=atol)

    def __repr__(self):
        if self.released:
            return f"QuantumState(num_qubits={self.num_qubits}, released)"
        return f"QuantumState(num_qubits={self.num_qubits}, terms={len(self.nonzero_terms())})"


def create_state(num_qubits: int,
                 config: SimulatorConfig = DEFAULT_CONFIG) -> Optional[QuantumState]:
    """
    Allocate a register in the |0...0⟩ state.

    Args:
        num_qubits: Register width (1 to config.max_qubits)
        config: Simulator configuration

    Returns:
        New QuantumState, or None if the width is not supported
    """
    try:
        state = QuantumState(num_qubits, config)
    except QubitCountError as e:
        logger.error("Error: %s", e)
        return None

    logger.debug("Created %d-qubit state (%d amplitudes)", num_qubits, state.size)
    return state


def destroy_state(state: QuantumState):
    """Release the amplitude vector of a state."""
    state.release()


def normalize_state(state: QuantumState):
    """
    Rescale the amplitudes to unit norm.

    Raises:
        DegenerateMeasurementError: If every amplitude is zero
    """
    norm = np.linalg.norm(state.amplitudes)
    if norm == 0.0:
        raise DegenerateMeasurementError("cannot normalize a zero vector")
    state.amplitudes /= norm
