"""
tiny-qsim: a small dense state-vector simulator of a qubit register.

Features:
- Bit-packed basis states (``Basis``) as the indexing scheme
- 1- and 2-qubit gate application with double-buffered amplitude updates
- Ordered gate containers (``QuantumCircuit``)
- Readable dump of the non-negligible amplitudes

Quick Start:
    >>> from tiny_qsim import QuantumComputer, QuantumCircuit, make_gate
    >>> circ = QuantumCircuit()
    >>> circ = circ.add_gate(make_gate("h", 0)).add_gate(make_gate("cx", 1, control=0))
    >>> qc = QuantumComputer(2)
    >>> qc.apply_circuit(circ)
    >>> qc.coeff(0b11)
    (0.7071067811865475+0j)
"""
__version__ = "0.1.0"

from tiny_qsim.basis import Basis
from tiny_qsim.circuit import QuantumCircuit
from tiny_qsim.computer import (
    DEFAULT_PRINT_THRESHOLD,
    ONE_QUBIT_ALGORITHMS,
    QuantumComputer,
)
from tiny_qsim.exceptions import (
    GateError,
    QubitIndexError,
    SimulatorError,
    StateSizeError,
)
from tiny_qsim.gates import TWO_QUBITS_BASIS, QuantumGate, make_gate
from tiny_qsim import gates

__all__ = [
    # Core
    "Basis",
    "QuantumCircuit",
    "QuantumComputer",
    "QuantumGate",
    "make_gate",
    "gates",
    # Settings
    "DEFAULT_PRINT_THRESHOLD",
    "ONE_QUBIT_ALGORITHMS",
    "TWO_QUBITS_BASIS",
    # Errors
    "SimulatorError",
    "QubitIndexError",
    "StateSizeError",
    "GateError",
]
