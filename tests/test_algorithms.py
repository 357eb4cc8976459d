"""Tests for the composed algorithms."""

import numpy as np
import pytest

from qsim import (
    QuantumState, create_state, make_rng,
    apply_pauli_x, apply_hadamard, measure_register,
    deutsch_jozsa, is_constant_outcome,
    create_bell_pair, quantum_teleportation,
    encode_bit_flip, measure_syndrome, recover_bit_flip, correct_bit_flip,
    quantum_random_number,
    quantum_walk_1d,
    quantum_phase_estimation,
    shor_period_finding, candidate_factors, gcd,
)


class TestDeutschJozsa:
    """Tests for Deutsch-Jozsa."""

    def test_constant_gives_zero(self, rng):
        """Constant oracle: the register returns to |000⟩."""
        state = create_state(3)
        deutsch_jozsa(state, True)
        assert np.allclose(state.amplitudes, np.eye(8)[0])
        assert is_constant_outcome(measure_register(state, rng=rng))

    def test_balanced_gives_nonzero(self, rng):
        """Balanced stand-in: HZH = X on every qubit, so the result is all ones."""
        state = create_state(3)
        deutsch_jozsa(state, False)
        assert np.allclose(state.amplitudes, np.eye(8)[7])
        assert not is_constant_outcome(measure_register(state, rng=rng))

    def test_single_qubit_register(self):
        """With one qubit the Z acts on position 0 only."""
        state = create_state(1)
        deutsch_jozsa(state, False)
        assert np.allclose(state.amplitudes, [0, 1])

    def test_constant_one_variant(self):
        """A register starting in |001⟩ stays put under the constant oracle."""
        state = create_state(3)
        apply_pauli_x(state, 0)
        deutsch_jozsa(state, True)
        assert np.allclose(state.amplitudes, np.eye(8)[1])


class TestTeleportation:
    """Tests for Bell pairs and teleportation."""

    def test_bell_pair(self):
        """create_bell_pair gives (|00⟩ + |11⟩)/√2."""
        state = create_state(2)
        create_bell_pair(state, 0, 1)
        expected = np.array([1, 0, 0, 1]) / np.sqrt(2)
        assert np.allclose(state.amplitudes, expected)

    def test_teleportation_with_fixed_draws(self, draws):
        """Source |00⟩, qubits (0, 1): m1 = 1 triggers the Z correction."""
        source = create_state(2)
        target = create_state(2)

        m1, m2 = quantum_teleportation(source, target, 0, 1, draws(0.9, 0.5))

        assert (m1, m2) == (1, 0)
        # Target pair (|00⟩ + |11⟩)/√2 with Z on qubit 1
        expected = np.array([1, 0, 0, -1]) / np.sqrt(2)
        assert np.allclose(target.amplitudes, expected)
        # Source collapsed to qubit 0 = 1
        assert np.allclose(source.amplitudes, np.eye(4)[1])

    def test_teleportation_without_correction(self, draws):
        """m1 = m2 = 0: no correction is applied to the target."""
        source = create_state(2)
        target = create_state(2)
        assert quantum_teleportation(source, target, 0, 1, draws(0.1, 0.5)) == (0, 0)
        expected = np.array([1, 0, 0, 1]) / np.sqrt(2)
        assert np.allclose(target.amplitudes, expected)

    def test_states_stay_independent(self, rng):
        """Both registers remain normalized and keep their own storage."""
        source = create_state(2)
        target = create_state(2)
        apply_hadamard(source, 0)
        quantum_teleportation(source, target, 0, 1, rng)
        assert source.is_normalized()
        assert target.is_normalized()
        assert not np.shares_memory(source.amplitudes, target.amplitudes)

    def test_same_index_on_both_sides(self, rng):
        """Qubit (0, 0) as used by a simple driver runs without error."""
        source = create_state(2)
        target = create_state(2)
        apply_pauli_x(source, 0)
        m1, m2 = quantum_teleportation(source, target, 0, 0, rng)
        assert m1 == m2
        assert target.is_normalized()


class TestBitFlipCode:
    """Tests for the three-qubit bit-flip code."""

    def test_encoding_copies_basis(self):
        """|1⟩ encodes to |111⟩."""
        state = create_state(3)
        apply_pauli_x(state, 0)
        encode_bit_flip(state, 0)
        assert np.allclose(state.amplitudes, np.eye(8)[7])

    def test_encoding_superposition(self):
        """|+⟩ encodes to (|000⟩ + |111⟩)/√2."""
        state = create_state(3)
        apply_hadamard(state, 0)
        encode_bit_flip(state, 0)
        expected = np.zeros(8)
        expected[[0, 7]] = 1 / np.sqrt(2)
        assert np.allclose(state.amplitudes, expected)

    @pytest.mark.parametrize("flipped, syndrome", [
        (0, (1, 1)),
        (1, (1, 0)),
        (2, (0, 1)),
    ])
    def test_single_flip_corrected_for_zero(self, rng, flipped, syndrome):
        """Encode |0⟩, flip one qubit, recover: the register reads 0 again."""
        state = create_state(3)
        encode_bit_flip(state, 0)
        apply_pauli_x(state, flipped)

        measured = measure_syndrome(state, 0, rng)
        assert measured == syndrome
        recover_bit_flip(state, 0, measured)

        assert np.allclose(state.amplitudes, np.eye(8)[0])
        assert measure_register(state, rng=rng) == 0

    @pytest.mark.parametrize("flipped", [0, 1, 2])
    def test_single_flip_corrected_for_one(self, rng, flipped):
        """Encode |1⟩, flip one qubit, recover: all three qubits read 1."""
        state = create_state(3)
        apply_pauli_x(state, 0)
        encode_bit_flip(state, 0)
        apply_pauli_x(state, flipped)

        correct_bit_flip(state, 0, rng)

        assert measure_register(state, rng=rng) == 0b111

    def test_no_error_no_recovery(self, rng):
        """Without an error the syndrome is (0, 0) and nothing changes."""
        state = create_state(3)
        encode_bit_flip(state, 0)
        assert correct_bit_flip(state, 0, rng) == (0, 0)
        assert np.allclose(state.amplitudes, np.eye(8)[0])

    def test_second_logical_qubit(self, rng):
        """Logical qubit 1 uses physical qubits 3, 4, 5."""
        state = create_state(6)
        apply_pauli_x(state, 3)
        encode_bit_flip(state, 1)
        apply_pauli_x(state, 5)
        assert correct_bit_flip(state, 1, rng) == (0, 1)
        assert measure_register(state, [3, 4, 5], rng) == 0b111
        assert measure_register(state, [0, 1, 2], rng) == 0


class TestQuantumRandomNumber:
    """Tests for the quantum random number generator."""

    def test_golden_value(self, draws):
        """Fixed draws 0.9, 0.1, 0.7, 0.3 give bits 1, 0, 1, 0 → 5."""
        state = create_state(4)
        assert quantum_random_number(state, 4, draws(0.9, 0.1, 0.7, 0.3)) == 5

    def test_seeded_reproducible(self):
        """The same seed reproduces the same number."""
        a = quantum_random_number(create_state(4), 4, make_rng(11))
        b = quantum_random_number(create_state(4), 4, make_rng(11))
        assert a == b
        assert 0 <= a < 16

    def test_seeded_golden_value(self):
        """Seed 11 draws 0.129, 0.499, 0.601, 0.029 → bits 0, 0, 1, 0 → 4."""
        assert quantum_random_number(create_state(4), 4, make_rng(11)) == 4

    def test_register_collapsed_to_result(self, draws):
        """The register is left in the basis state of the result."""
        state = create_state(3)
        value = quantum_random_number(state, 3, draws(0.2, 0.8, 0.8))
        assert value == 0b110
        assert np.allclose(state.amplitudes, np.eye(8)[value])

    def test_fewer_bits_than_qubits(self, draws):
        """Only the first num_bits qubits are used."""
        state = create_state(4)
        assert quantum_random_number(state, 2, draws(0.9, 0.9)) == 3
        assert state.probabilities()[3] == pytest.approx(1.0)

    def test_distribution_covers_range(self, rng):
        """Every 2-bit value shows up over many runs."""
        seen = {quantum_random_number(create_state(2), 2, rng) for _ in range(200)}
        assert seen == {0, 1, 2, 3}


class TestQuantumWalk:
    """Tests for the 1-D walk."""

    def test_single_step(self):
        """One step from |000⟩: the coin is in |+⟩, no phases apply."""
        state = create_state(3)
        quantum_walk_1d(state, 1)
        expected = np.zeros(8)
        expected[[0, 1]] = 1 / np.sqrt(2)
        assert np.allclose(state.amplitudes, expected)

    def test_two_steps_return_to_origin(self):
        """From |000⟩ the coin toss undoes itself after two steps."""
        state = create_state(3)
        quantum_walk_1d(state, 2)
        assert np.allclose(state.amplitudes, np.eye(8)[0])

    def test_phases_applied_when_position_set(self):
        """With qubit 1 set, the coin's |1⟩ branch picks up a phase i."""
        state = create_state(2)
        apply_pauli_x(state, 1)
        quantum_walk_1d(state, 1)
        expected = np.array([0, 0, 1, 1j]) / np.sqrt(2)
        assert np.allclose(state.amplitudes, expected)

    def test_norm_preserved(self):
        """Many steps keep the state normalized."""
        state = create_state(5)
        apply_hadamard(state, 3)
        quantum_walk_1d(state, 10)
        assert state.is_normalized()

    def test_zero_steps(self):
        """No steps, no change."""
        state = create_state(2)
        quantum_walk_1d(state, 0)
        assert np.allclose(state.amplitudes, np.eye(4)[0])


class TestPhaseEstimation:
    """Tests for phase estimation."""

    def test_two_qubits_phase_zero(self):
        """Target |1⟩, φ = 0: result i(|00⟩ - |01⟩)/√2."""
        state = create_state(2)
        apply_pauli_x(state, 1)
        quantum_phase_estimation(state, 0.0)
        expected = np.array([1j, -1j, 0, 0]) / np.sqrt(2)
        assert np.allclose(state.amplitudes, expected)

    def test_two_qubits_phase_pi(self):
        """Target |1⟩, φ = π: result i(|10⟩ - |11⟩)/√2."""
        state = create_state(2)
        apply_pauli_x(state, 1)
        quantum_phase_estimation(state, np.pi)
        expected = np.array([0, 0, 1j, -1j]) / np.sqrt(2)
        assert np.allclose(state.amplitudes, expected)

    def test_target_zero_ignores_phase(self):
        """With the target in |0⟩ the controlled phases never fire."""
        a = create_state(5)
        b = create_state(5)
        quantum_phase_estimation(a, 2 * np.pi * 0.25)
        quantum_phase_estimation(b, 2 * np.pi * 0.75)
        assert np.allclose(a.amplitudes, b.amplitudes)

    def test_norm_preserved(self):
        """Five-qubit run stays normalized."""
        state = create_state(5)
        apply_pauli_x(state, 4)
        quantum_phase_estimation(state, 2 * np.pi * 0.3)
        assert state.is_normalized()


class TestPeriodFinding:
    """Tests for the simplified period finding."""

    def test_result_in_first_register_range(self, rng):
        """The measured value fits in the first half-register."""
        for _ in range(20):
            state = create_state(8)
            period = shor_period_finding(state, 15, rng)
            assert 0 <= period < 16
            assert state.is_normalized()

    def test_seeded_reproducible(self):
        """Same seed, same period."""
        a = shor_period_finding(create_state(8), 15, make_rng(3))
        b = shor_period_finding(create_state(8), 15, make_rng(3))
        assert a == b

    def test_first_register_collapsed(self, rng):
        """Measured qubits end in a definite state matching the result."""
        state = create_state(4)
        period = shor_period_finding(state, 7, rng)
        for q in range(2):
            bit = (period >> q) & 1
            ones = (np.arange(16) >> q) & 1
            assert np.sum(state.probabilities()[ones != bit]) == pytest.approx(0.0)

    def test_candidate_factors(self):
        """r = 4 for N = 15 gives gcd(5, 15) and gcd(3, 15)."""
        assert candidate_factors(15, 4) == (5, 3)
        assert candidate_factors(15, 4, base=7) == (gcd(50, 15), gcd(48, 15))

    def test_candidate_factors_rejects_odd_or_zero(self):
        """Odd and non-positive periods carry no factor information."""
        assert candidate_factors(15, 3) is None
        assert candidate_factors(15, 0) is None


class TestGcd:
    """Tests for gcd."""

    def test_gcd_basic(self):
        """GCD should return greatest common divisor."""
        assert gcd(15, 7) == 1
        assert gcd(15, 5) == 5
        assert gcd(12, 8) == 4
        assert gcd(0, 9) == 9
        assert gcd(-1, 15) == 1
