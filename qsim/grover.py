"""
Grover's search algorithm implementation.

Grover's algorithm provides quadratic speedup for unstructured search problems.
Given a marked basis index x*, about π/4·√N rounds of oracle + diffusion
concentrate the amplitude on x*.

The oracle and the zero-state reflection act directly on single amplitudes of
the state vector rather than through multi-controlled gates.
"""

import numpy as np
from typing import Optional

from .core import apply_hadamard
from .logging_config import get_logger
from .state import QuantumState

logger = get_logger("grover")


def grover_iterations(size: int) -> int:
    """
    Number of Grover rounds for a search space of `size` items.

    Truncates π/4·√size toward zero, e.g. 2 for size 8, 3 for size 16.
    """
    return int(np.pi / 4 * np.sqrt(size))


def grover_oracle(state: QuantumState, marked_index: int):
    """Phase oracle: flip the sign of the marked basis state."""
    state.amplitudes[marked_index] *= -1


def grover_diffusion(state: QuantumState):
    """
    Grover diffusion operator (inversion about average).

    Implemented as H⊗n · (phase flip on |0...0⟩) · H⊗n.
    """
    for q in range(state.num_qubits):
        apply_hadamard(state, q)

    state.amplitudes[0] *= -1

    for q in range(state.num_qubits):
        apply_hadamard(state, q)


def grover_search(state: QuantumState, marked_index: int,
                  num_iterations: Optional[int] = None) -> int:
    """
    Run Grover's search on a register in |0...0⟩.

    The state is left unmeasured; read it out with measure_register().

    Args:
        state: Register to search over (modified in place)
        marked_index: Basis index to amplify (0 to size - 1)
        num_iterations: Number of Grover rounds (default: grover_iterations(size))

    Returns:
        Number of rounds applied
    """
    if num_iterations is None:
        num_iterations = grover_iterations(state.size)

    logger.debug("Grover search for |%d⟩ on %d qubits, %d iterations",
                 marked_index, state.num_qubits, num_iterations)

    # Uniform superposition
    for q in range(state.num_qubits):
        apply_hadamard(state, q)

    for _ in range(num_iterations):
        grover_oracle(state, marked_index)
        grover_diffusion(state)

    return num_iterations
