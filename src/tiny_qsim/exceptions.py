"""Errors raised by the register simulator."""


class SimulatorError(Exception):
    """Base class for all tiny-qsim errors."""


class QubitIndexError(SimulatorError, IndexError):
    """A gate refers to a qubit outside the register."""

    def __init__(self, qubit: int, n_qubits: int) -> None:
        super().__init__(
            f"Qubit {qubit} out of range for {n_qubits}-qubit register"
        )
        self.qubit = qubit
        self.n_qubits = n_qubits


class StateSizeError(SimulatorError, ValueError):
    """A basis index or amplitude vector does not fit the register."""


class GateError(SimulatorError, ValueError):
    """A gate's arity, qubits or matrix cannot be applied."""
