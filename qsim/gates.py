"""
Single-qubit gate matrices.

Matrices act on the amplitude pair (|…0…⟩, |…1…⟩) of the target qubit.
Multi-qubit gates are permutations or diagonal phases and are applied
directly by index in qsim.core rather than through matrices.
"""

import numpy as np

# =============================================================================
# Fixed gates
# =============================================================================

X_gate = np.array([[0, 1],      # Pauli X gate (NOT gate)
                   [1, 0]], dtype=complex)

Y_gate = np.array([[ 0, -1j],   # Pauli Y gate (textbook sign; see core.apply_pauli_y)
                   [1j,   0]])

Z_gate = np.array([[1,  0],     # Pauli Z gate = P(π)
                   [0, -1]], dtype=complex)

H_gate = np.array([[1,  1],     # Hadamard gate
                   [1, -1]], dtype=complex) * np.sqrt(1/2)


# =============================================================================
# Parametrized gates
# =============================================================================

def phase_factor(angle):
    """cos(angle) + i·sin(angle)"""
    return complex(np.cos(angle), np.sin(angle))


def P_gate(phi):
    """Phase shift gate P(φ) = diag(1, e^{iφ})"""
    return np.array([[1,                0],
                     [0, phase_factor(phi)]])


def Rx_gate(theta):
    """X rotation gate Rx(θ)"""
    c, s = np.cos(theta / 2), np.sin(theta / 2)
    return np.array([[c,    -1j * s],
                     [-1j * s,    c]])


def Ry_gate(theta):
    """Y rotation gate Ry(θ)"""
    c, s = np.cos(theta / 2), np.sin(theta / 2)
    return np.array([[c, -s],
                     [s,  c]], dtype=complex)

