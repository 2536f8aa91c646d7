"""
Ordered gate sequences.

A :class:`QuantumCircuit` is a plain container: gates run in the order they
were added, and nothing is checked against a register size until the
circuit is applied to a :class:`~tiny_qsim.computer.QuantumComputer`.

Example
-------
>>> from tiny_qsim import QuantumCircuit, make_gate
>>> qc = QuantumCircuit()
>>> qc = qc.add_gate(make_gate("h", 0)).add_gate(make_gate("cx", 1, control=0))
>>> print(qc)
H     target: 0
CX    target: 1  control: 0
"""

from __future__ import annotations

import copy
from typing import Iterable, Iterator, Optional

from tiny_qsim.gates import QuantumGate


class QuantumCircuit:
    """
    Sequence of :class:`QuantumGate` objects.

    Parameters
    ----------
    gates : iterable of QuantumGate, optional
        Initial gates, in execution order.
    """

    def __init__(self, gates: Optional[Iterable[QuantumGate]] = None) -> None:
        self._gates: list[QuantumGate] = list(gates) if gates is not None else []

    # -- Properties ---------------------------------------------------------

    @property
    def gates(self) -> list[QuantumGate]:
        """Gates in execution order."""
        return list(self._gates)

    def size(self) -> int:
        return len(self._gates)

    # -- Building -----------------------------------------------------------

    def add_gate(self, gate: QuantumGate) -> QuantumCircuit:
        """Append a gate and return self for chaining."""
        if not isinstance(gate, QuantumGate):
            raise TypeError(f"Expected QuantumGate, got {type(gate).__name__}")
        self._gates.append(gate)
        return self

    def add_circuit(self, other: QuantumCircuit) -> QuantumCircuit:
        """Append every gate of ``other`` and return self."""
        self._gates.extend(other._gates)
        return self

    def adjoint(self) -> QuantumCircuit:
        """Circuit undoing this one: reversed order, each gate adjointed."""
        return QuantumCircuit(gate.adjoint() for gate in reversed(self._gates))

    def copy(self) -> QuantumCircuit:
        return copy.deepcopy(self)

    # -- Display ------------------------------------------------------------

    def str(self) -> list[str]:
        """One line per gate, in circuit order."""
        return [gate.str() for gate in self._gates]

    def __str__(self) -> str:
        return "\n".join(self.str())

    def __repr__(self) -> str:
        return f"QuantumCircuit(gates={len(self._gates)})"

    # -- Container protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._gates)

    def __iter__(self) -> Iterator[QuantumGate]:
        return iter(self._gates)

    def __getitem__(self, index: int) -> QuantumGate:
        return self._gates[index]
