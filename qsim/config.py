"""
Simulator configuration.

The register width is small and fixed by configuration. A config object is
passed explicitly to state creation; nothing here is mutated at runtime.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np

from .errors import ConfigurationError

# Hard upper bound on register width (2^16 amplitudes)
MAX_QUBITS = 16


@dataclass
class SimulatorConfig:
    """Configuration for the state-vector simulator."""

    # Largest register create_state will allocate
    max_qubits: int = MAX_QUBITS

    # Tolerance for the unit-norm invariant
    normalization_atol: float = 1e-9

    # Terms below this magnitude are omitted by QuantumState.nonzero_terms
    display_threshold: float = 1e-3

    # Seed for make_rng (None = fresh entropy)
    seed: Optional[int] = None

    def __post_init__(self):
        if not (1 <= self.max_qubits <= MAX_QUBITS):
            raise ConfigurationError(
                f"max_qubits must be in [1, {MAX_QUBITS}], got {self.max_qubits}"
            )

    @classmethod
    def from_env(cls, prefix: str = "QSIM_",
                 environ: Optional[Mapping[str, str]] = None) -> "SimulatorConfig":
        """
        Build a config from environment variables.

        Recognised variables (with the default prefix):
            QSIM_MAX_QUBITS - register width limit (integer, <= 16)
            QSIM_SEED       - seed for make_rng (integer)

        Args:
            prefix: Variable name prefix
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            SimulatorConfig with defaults for unset variables

        Raises:
            ConfigurationError: If a variable is not an integer or out of range
        """
        if environ is None:
            environ = os.environ

        kwargs = {}
        for field_name in ("max_qubits", "seed"):
            raw = environ.get(prefix + field_name.upper())
            if raw is None or raw == "":
                continue
            try:
                kwargs[field_name] = int(raw)
            except ValueError:
                raise ConfigurationError(
                    f"{prefix}{field_name.upper()} must be an integer, got {raw!r}"
                ) from None
        return cls(**kwargs)

    def make_rng(self) -> np.random.Generator:
        """Return a generator seeded from this config."""
        return make_rng(self.seed)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the uniform random source used by measurement.

    Args:
        seed: Optional seed for reproducible draws

    Returns:
        A numpy Generator
    """
    return np.random.default_rng(seed)


# Default configuration instance
DEFAULT_CONFIG = SimulatorConfig()
