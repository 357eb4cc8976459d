"""
qsim - A state-vector simulator for small quantum circuits.

This package represents the joint state of up to 16 qubits as a dense
complex amplitude vector (bit k of an index is qubit k) and provides gates,
measurement and a set of textbook algorithms built from them.

Modules:
    state             - QuantumState, create_state, destroy_state
    core              - Gate application and measurement engine
    gates             - Single-qubit gate matrices
    circuit           - Gates as values (Hadamard(0), CNOT(0, 1), ...), apply, run
    qft               - Quantum Fourier Transform and its inverse
    grover            - Grover's search
    deutsch_jozsa     - Deutsch-Jozsa algorithm
    teleportation     - Bell pairs and teleportation between two registers
    error_correction  - Three-qubit bit-flip code
    qrng              - Quantum random numbers
    walk              - One-dimensional quantum walk
    phase_estimation  - Quantum phase estimation
    shor              - Simplified period finding
    config            - SimulatorConfig, make_rng
    logging_config    - setup_logging, get_logger

Quick Start:
    >>> from qsim import *
    >>> rng = make_rng(seed=7)
    >>> state = create_state(3)
    >>> grover_search(state, 5)
    2
    >>> result = measure_register(state, rng=rng)  # 5 with probability ~0.95
"""

# Configuration, logging, errors
from .config import MAX_QUBITS, DEFAULT_CONFIG, SimulatorConfig, make_rng
from .logging_config import setup_logging, get_logger
from .errors import (
    QSimError,
    ConfigurationError,
    QubitCountError,
    TooManyQubitsError,
    QubitIndexError,
    DegenerateMeasurementError,
    StateReleasedError,
)

# State
from .state import (
    QuantumState,
    create_state,
    destroy_state,
    normalize_state,
)

# Core functionality
from .core import (
    # Single-qubit gates
    apply_single_qubit,
    apply_hadamard,
    apply_pauli_x,
    apply_pauli_y,
    apply_pauli_z,
    apply_phase,
    apply_rotation_x,
    apply_rotation_y,
    apply_rotation_z,
    # Multi-qubit gates
    apply_cnot,
    apply_swap,
    apply_toffoli,
    apply_controlled_phase,
    # Measurement
    probability_of_one,
    measure_qubit,
    measure_register,
)

# Gates
from .gates import (
    X_gate,
    Y_gate,
    Z_gate,
    H_gate,
    P_gate,
    Rx_gate,
    Ry_gate,
)

# Gate values
from .circuit import (
    Gate,
    Hadamard,
    PauliX,
    PauliY,
    PauliZ,
    Phase,
    RotationX,
    RotationY,
    RotationZ,
    CNOT,
    Swap,
    Toffoli,
    ControlledPhase,
    GATE_TYPES,
    apply,
    run,
)

# QFT
from .qft import (
    quantum_fourier_transform,
    inverse_quantum_fourier_transform,
)

# Utilities
from .utils import (
    allclose_up_to_global_phase,
    state_fidelity,
    gcd,
)

# Algorithms
from .grover import (
    grover_search,
    grover_iterations,
    grover_oracle,
    grover_diffusion,
)

from .deutsch_jozsa import deutsch_jozsa, is_constant_outcome

from .teleportation import create_bell_pair, quantum_teleportation

from .error_correction import (
    encode_bit_flip,
    measure_syndrome,
    recover_bit_flip,
    correct_bit_flip,
)

from .qrng import quantum_random_number

from .walk import quantum_walk_1d

from .phase_estimation import quantum_phase_estimation

from .shor import shor_period_finding, candidate_factors

__version__ = "0.1.0"
__all__ = [
    # Config / logging / errors
    "MAX_QUBITS",
    "DEFAULT_CONFIG",
    "SimulatorConfig",
    "make_rng",
    "setup_logging",
    "get_logger",
    "QSimError",
    "ConfigurationError",
    "QubitCountError",
    "TooManyQubitsError",
    "QubitIndexError",
    "DegenerateMeasurementError",
    "StateReleasedError",
    # State
    "QuantumState",
    "create_state",
    "destroy_state",
    "normalize_state",
    # Core
    "apply_single_qubit",
    "apply_hadamard",
    "apply_pauli_x",
    "apply_pauli_y",
    "apply_pauli_z",
    "apply_phase",
    "apply_rotation_x",
    "apply_rotation_y",
    "apply_rotation_z",
    "apply_cnot",
    "apply_swap",
    "apply_toffoli",
    "apply_controlled_phase",
    "probability_of_one",
    "measure_qubit",
    "measure_register",
    # Gates
    "X_gate",
    "Y_gate",
    "Z_gate",
    "H_gate",
    "P_gate",
    "Rx_gate",
    "Ry_gate",
    # Gate values
    "Gate",
    "Hadamard",
    "PauliX",
    "PauliY",
    "PauliZ",
    "Phase",
    "RotationX",
    "RotationY",
    "RotationZ",
    "CNOT",
    "Swap",
    "Toffoli",
    "ControlledPhase",
    "GATE_TYPES",
    "apply",
    "run",
    # QFT
    "quantum_fourier_transform",
    "inverse_quantum_fourier_transform",
    # Utils
    "allclose_up_to_global_phase",
    "state_fidelity",
    "gcd",
    # Algorithms
    "grover_search",
    "grover_iterations",
    "grover_oracle",
    "grover_diffusion",
    "deutsch_jozsa",
    "is_constant_outcome",
    "create_bell_pair",
    "quantum_teleportation",
    "encode_bit_flip",
    "measure_syndrome",
    "recover_bit_flip",
    "correct_bit_flip",
    "quantum_random_number",
    "quantum_walk_1d",
    "quantum_phase_estimation",
    "shor_period_finding",
    "candidate_factors",
]
