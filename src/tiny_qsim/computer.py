"""
Dense state-vector simulator of an n-qubit register.

The register state is a complex128 vector of 2^n amplitudes indexed by
:class:`~tiny_qsim.basis.Basis` values. Gates are applied by reading the
current vector and accumulating into a scratch vector of the same size;
once a gate is complete the two vectors are swapped by reference and the
scratch vector is cleared. Every read during a gate therefore sees the
pre-gate state.

Memory: 2 * 16 bytes * 2^n (current + scratch vector).
    10 qubits = 32 KB, 16 qubits = 2 MB, 20 qubits = 32 MB.

Example
-------
>>> from tiny_qsim import QuantumComputer, make_gate
>>> qc = QuantumComputer(2)
>>> qc.apply_gate(make_gate("h", 0))
>>> qc.apply_gate(make_gate("cx", target=1, control=0))
>>> print(qc)
(0.707107 +0.000000 i) |00>
(0.707107 +0.000000 i) |11>
"""

from __future__ import annotations

import logging
import operator
from typing import Iterable, Union

import numpy as np
from numpy import ndarray

from tiny_qsim.basis import Basis
from tiny_qsim.circuit import QuantumCircuit
from tiny_qsim.exceptions import GateError, QubitIndexError, StateSizeError
from tiny_qsim.gates import TWO_QUBITS_BASIS, QuantumGate

logger = logging.getLogger(__name__)

DEFAULT_PRINT_THRESHOLD = 1.0e-6
"""Smallest amplitude magnitude listed by :meth:`QuantumComputer.str`."""

ONE_QUBIT_ALGORITHMS = ("insertion", "dense")
"""
Single-qubit gate routines.

``"insertion"`` visits the 2^(n-1) configurations of the other qubits;
``"dense"`` scans all 2^n basis states and filters on the target bit.
Both give the same amplitudes.
"""

BasisLike = Union[Basis, int]


class QuantumComputer:
    """
    State-vector simulator of an n-qubit register.

    Parameters
    ----------
    n_qubits : int
        Number of qubits. The register starts in |0...0>.
    print_threshold : float
        Amplitudes with magnitude below this are left out of :meth:`str`.
    one_qubit_algorithm : str
        Routine used for single-qubit gates, one of
        :data:`ONE_QUBIT_ALGORITHMS`.
    """

    def __init__(
        self,
        n_qubits: int,
        print_threshold: float = DEFAULT_PRINT_THRESHOLD,
        one_qubit_algorithm: str = "insertion",
    ) -> None:
        if n_qubits < 1:
            raise ValueError(f"Need at least 1 qubit, got {n_qubits}")
        self.n_qubits = n_qubits
        self.nbasis = 2**n_qubits
        self.basis: tuple[Basis, ...] = tuple(Basis(i) for i in range(self.nbasis))
        self._coeff = np.zeros(self.nbasis, dtype=np.complex128)
        self._new_coeff = np.zeros(self.nbasis, dtype=np.complex128)
        self._coeff[0] = 1.0
        self.print_threshold = print_threshold
        self.one_qubit_algorithm = one_qubit_algorithm

    # -- Configuration ------------------------------------------------------

    @property
    def one_qubit_algorithm(self) -> str:
        return self._one_qubit_algorithm

    @one_qubit_algorithm.setter
    def one_qubit_algorithm(self, name: str) -> None:
        if name not in ONE_QUBIT_ALGORITHMS:
            raise ValueError(
                f"Unknown single-qubit algorithm '{name}'. "
                f"Supported: {ONE_QUBIT_ALGORITHMS}"
            )
        self._one_qubit_algorithm = name

    # -- State access -------------------------------------------------------

    def _index(self, basis: BasisLike) -> int:
        index = operator.index(basis)
        if not 0 <= index < self.nbasis:
            raise StateSizeError(
                f"Basis index {index} out of range for "
                f"{self.n_qubits}-qubit register ({self.nbasis} states)"
            )
        return index

    def coeff(self, basis: BasisLike) -> complex:
        """Amplitude of a basis state."""
        return complex(self._coeff[self._index(basis)])

    def set_state(self, assignments: Iterable[tuple[BasisLike, complex]]) -> None:
        """
        Replace the state with the given amplitudes.

        All other amplitudes become zero. When a basis state appears more
        than once the last amplitude wins. The result is not normalized.

        Parameters
        ----------
        assignments : iterable of (Basis, complex)
            Basis states and their new amplitudes.
        """
        resolved = [(self._index(basis), complex(c)) for basis, c in assignments]
        self._coeff.fill(0)
        for index, c in resolved:
            self._coeff[index] = c

    def get_coeff_vec(self) -> ndarray:
        """Copy of the amplitude vector, indexed by basis state."""
        return self._coeff.copy()

    def set_coeff_vec(self, vec) -> None:
        """Overwrite the amplitude vector. The result is not normalized."""
        vec = np.asarray(vec, dtype=np.complex128)
        if vec.shape != (self.nbasis,):
            raise StateSizeError(
                f"State shape {vec.shape} != expected ({self.nbasis},)"
            )
        self._coeff[:] = vec

    def reset(self) -> None:
        """Return to |0...0>."""
        self._coeff.fill(0)
        self._coeff[0] = 1.0

    def probabilities(self) -> ndarray:
        return np.abs(self._coeff) ** 2

    def norm(self) -> float:
        return float(np.linalg.norm(self._coeff))

    # -- Gate application ---------------------------------------------------

    def apply_circuit(self, circuit: QuantumCircuit) -> None:
        """
        Apply every gate of a circuit in order.

        There is no rollback: if a gate is rejected, the gates before it
        stay applied.
        """
        logger.debug(
            "Applying circuit of %d gates to %d-qubit register",
            len(circuit), self.n_qubits,
        )
        for gate in circuit.gates:
            self.apply_gate(gate)

    def apply_gate(self, gate: QuantumGate) -> None:
        """
        Apply a single- or two-qubit gate to the register.

        Raises
        ------
        QubitIndexError
            If the gate refers to a qubit outside the register.
        GateError
            If the arity is not 1 or 2, the matrix shape does not match
            the arity, or control and target coincide.
        """
        self._validate_gate(gate)
        try:
            if gate.nqubits == 1:
                if self._one_qubit_algorithm == "dense":
                    self.apply_1qubit_gate_dense(gate)
                else:
                    self.apply_1qubit_gate_insertion(gate)
            else:
                self.apply_2qubit_gate(gate)
        except Exception:
            self._new_coeff.fill(0)
            raise
        self._coeff, self._new_coeff = self._new_coeff, self._coeff
        self._new_coeff.fill(0)
        logger.debug("Applied %s", gate)

    def _validate_gate(self, gate: QuantumGate) -> None:
        arity = gate.nqubits
        if arity not in (1, 2):
            raise GateError(f"Unsupported gate arity {arity}, expected 1 or 2")
        qubits = (gate.target,) if arity == 1 else (gate.control, gate.target)
        for q in qubits:
            if not 0 <= q < self.n_qubits:
                raise QubitIndexError(q, self.n_qubits)
        if arity == 2 and gate.control == gate.target:
            raise GateError(f"Control and target are both qubit {gate.target}")
        dim = 2**arity
        if np.shape(gate.matrix) != (dim, dim):
            raise GateError(
                f"{arity}-qubit gate needs a {dim}x{dim} matrix, "
                f"got shape {np.shape(gate.matrix)}"
            )

    def apply_1qubit_gate_dense(self, gate: QuantumGate) -> None:
        """
        Accumulate a single-qubit gate into the scratch vector.

        Scans all 2^n basis states and keeps those whose target bit matches
        the matrix column. Only the scratch vector is written; the current
        state is unchanged until :meth:`apply_gate` swaps the buffers. The
        gate is not validated here.
        """
        target = gate.target
        op = gate.matrix
        for i in range(2):
            for j in range(2):
                op_ij = op[i, j]
                for basis_J in self.basis:
                    if basis_J.get_bit(target) == j:
                        basis_I = basis_J.set_bit(target, i)
                        self._new_coeff[basis_I.add()] += op_ij * self._coeff[basis_J.add()]

    def apply_1qubit_gate_insertion(self, gate: QuantumGate) -> None:
        """
        Same result as :meth:`apply_1qubit_gate_dense`, visiting only the
        2^(n-1) configurations of the other qubits. Writes the scratch
        vector only.
        """
        target = gate.target
        op = gate.matrix
        n_spectator = self.nbasis // 2
        for i in range(2):
            for j in range(2):
                op_ij = op[i, j]
                for K in range(n_spectator):
                    basis_K = Basis(K).insert(target)
                    basis_I = basis_K.set_bit(target, i)
                    basis_J = basis_K.set_bit(target, j)
                    self._new_coeff[basis_I.add()] += op_ij * self._coeff[basis_J.add()]

    def apply_2qubit_gate(self, gate: QuantumGate) -> None:
        """
        Accumulate a control/target gate into the scratch vector.

        Rows and columns of the 4x4 matrix follow ``TWO_QUBITS_BASIS``.
        Writes the scratch vector only.
        """
        target = gate.target
        control = gate.control
        op = gate.matrix
        for i, (i_c, i_t) in enumerate(TWO_QUBITS_BASIS):
            for j, (j_c, j_t) in enumerate(TWO_QUBITS_BASIS):
                op_ij = op[i, j]
                for basis_J in self.basis:
                    if basis_J.get_bit(control) == j_c and basis_J.get_bit(target) == j_t:
                        basis_I = basis_J.set_bit(control, i_c).set_bit(target, i_t)
                        self._new_coeff[basis_I.add()] += op_ij * self._coeff[basis_J.add()]

    # -- Display ------------------------------------------------------------

    def str(self) -> list[str]:
        """
        Non-negligible terms of the state, one per line.

        Each line reads ``(<real> <+imag> i) |bits>``. Terms are listed in
        ascending basis order and only when the amplitude magnitude is at
        least :attr:`print_threshold`.
        """
        terms = []
        for basis, c in zip(self.basis, self._coeff):
            if abs(c) >= self.print_threshold:
                terms.append(f"({c.real:f} {c.imag:+f} i) {basis.str(self.n_qubits)}")
        return terms

    def __str__(self) -> str:
        return "\n".join(self.str())

    def __repr__(self) -> str:
        return f"QuantumComputer(n_qubits={self.n_qubits}, nbasis={self.nbasis})"
