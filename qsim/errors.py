"""Exception types raised by the simulator."""


class QSimError(Exception):
    """Base class for simulator errors."""


class ConfigurationError(QSimError, ValueError):
    """Invalid simulator configuration."""


class QubitCountError(ConfigurationError):
    """Requested register width is outside the supported range."""


class TooManyQubitsError(QubitCountError):
    """Requested register width exceeds the configured maximum."""

    def __init__(self, num_qubits: int, max_qubits: int):
        super().__init__(
            f"Too many qubits requested: {num_qubits} (maximum is {max_qubits})"
        )
        self.num_qubits = num_qubits
        self.max_qubits = max_qubits


class QubitIndexError(QSimError, IndexError):
    """Qubit index outside [0, num_qubits)."""


class DegenerateMeasurementError(QSimError, ArithmeticError):
    """Measurement left a branch with zero norm; the state cannot be renormalized."""


class StateReleasedError(QSimError, RuntimeError):
    """A state was used after destroy_state released its amplitudes."""
