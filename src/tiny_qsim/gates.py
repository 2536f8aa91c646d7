"""
Quantum gates consumed by the register simulator.

A :class:`QuantumGate` bundles a unitary matrix with the qubits it acts on.
Single-qubit gates carry a 2x2 matrix and a target; two-qubit gates carry a
4x4 matrix, a control and a target. Two-qubit matrices are written in the
basis ordering given by :data:`TWO_QUBITS_BASIS` (control is the
high-order bit), so ``CNOT`` flips the target when the control is 1.

Example
-------
>>> from tiny_qsim.gates import make_gate
>>> h = make_gate("h", 0)
>>> cx = make_gate("cx", target=1, control=0)
>>> rz = make_gate("rz", 2, params=(0.25,))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy import ndarray

Matrix = ndarray

TWO_QUBITS_BASIS: tuple[tuple[int, int], ...] = ((0, 0), (0, 1), (1, 0), (1, 1))
"""(control bit, target bit) for each row/column of a 4x4 gate matrix."""

_SQRT2_INV = 1.0 / np.sqrt(2.0)


# ---------------------------------------------------------------------------
# Gate container
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class QuantumGate:
    """
    A gate matrix bound to specific qubits.

    Parameters
    ----------
    label : str
        Name used in circuit listings.
    target : int
        Qubit the gate acts on.
    matrix : ndarray
        2x2 matrix for single-qubit gates, 4x4 for two-qubit gates.
    control : int, optional
        Control qubit. ``None`` declares a single-qubit gate.
    """

    label: str
    target: int
    matrix: Matrix
    control: Optional[int] = None

    def __post_init__(self) -> None:
        matrix = np.array(self.matrix, dtype=np.complex128)
        matrix.setflags(write=False)
        object.__setattr__(self, "matrix", matrix)

    @property
    def nqubits(self) -> int:
        """Declared arity: 1 without a control qubit, 2 with one."""
        return 1 if self.control is None else 2

    @property
    def qubits(self) -> tuple[int, ...]:
        if self.control is None:
            return (self.target,)
        return (self.control, self.target)

    @staticmethod
    def two_qubits_basis() -> tuple[tuple[int, int], ...]:
        return TWO_QUBITS_BASIS

    def adjoint(self) -> QuantumGate:
        """Gate with the conjugate-transposed matrix on the same qubits."""
        label = self.label[:-1] if self.label.endswith("†") else self.label + "†"
        return QuantumGate(
            label=label,
            target=self.target,
            matrix=self.matrix.conj().T,
            control=self.control,
        )

    def str(self) -> str:
        if self.control is None:
            return f"{self.label:<6}target: {self.target}"
        return f"{self.label:<6}target: {self.target}  control: {self.control}"

    def __str__(self) -> str:
        return self.str()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuantumGate):
            return NotImplemented
        return (
            self.label == other.label
            and self.target == other.target
            and self.control == other.control
            and np.array_equal(self.matrix, other.matrix)
        )

    def __hash__(self) -> int:
        # + 0.0 turns -0.0 into 0.0 so equal matrices hash alike
        data = (self.matrix + 0.0).tobytes()
        return hash((self.label, self.target, self.control, data))


# ---------------------------------------------------------------------------
# Single-qubit matrices
# ---------------------------------------------------------------------------

I = np.eye(2, dtype=np.complex128)
X = np.array([[0, 1], [1, 0]], dtype=np.complex128)
Y = np.array([[0, -1j], [1j, 0]], dtype=np.complex128)
Z = np.array([[1, 0], [0, -1]], dtype=np.complex128)
H = np.array([[1, 1], [1, -1]], dtype=np.complex128) * _SQRT2_INV
S = np.diag([1, 1j]).astype(np.complex128)
T = np.diag([1, np.exp(1j * np.pi / 4)]).astype(np.complex128)
SX = np.array([[1 + 1j, 1 - 1j], [1 - 1j, 1 + 1j]], dtype=np.complex128) * 0.5
"""sqrt(X)."""


def Rx(theta: float) -> Matrix:
    """exp(-i theta X / 2)"""
    c, s = np.cos(theta / 2), np.sin(theta / 2)
    return np.array([[c, -1j * s], [-1j * s, c]], dtype=np.complex128)


def Ry(theta: float) -> Matrix:
    """exp(-i theta Y / 2)"""
    c, s = np.cos(theta / 2), np.sin(theta / 2)
    return np.array([[c, -s], [s, c]], dtype=np.complex128)


def Rz(theta: float) -> Matrix:
    """exp(-i theta Z / 2)"""
    return np.diag([np.exp(-0.5j * theta), np.exp(0.5j * theta)]).astype(
        np.complex128
    )


def P(lam: float) -> Matrix:
    """Phase shift of the |1> component."""
    return np.diag([1, np.exp(1j * lam)]).astype(np.complex128)


# ---------------------------------------------------------------------------
# Two-qubit matrices (control is the high-order bit)
# ---------------------------------------------------------------------------

def _controlled(u: Matrix) -> Matrix:
    """Embed a 2x2 matrix as the control=1 block of a 4x4 matrix."""
    m = np.eye(4, dtype=np.complex128)
    m[2:, 2:] = u
    return m


CNOT = _controlled(X)
CY = _controlled(Y)
CZ = _controlled(Z)
SWAP = np.eye(4, dtype=np.complex128)[[0, 2, 1, 3]]
iSWAP = np.array(
    [[1, 0, 0, 0], [0, 0, 1j, 0], [0, 1j, 0, 0], [0, 0, 0, 1]],
    dtype=np.complex128,
)


def CP(lam: float) -> Matrix:
    return _controlled(P(lam))


def CRx(theta: float) -> Matrix:
    return _controlled(Rx(theta))


def CRy(theta: float) -> Matrix:
    return _controlled(Ry(theta))


def CRz(theta: float) -> Matrix:
    return _controlled(Rz(theta))


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

GATE_REGISTRY: dict[str, dict] = {
    "i": {"matrix": I, "n_qubits": 1, "n_params": 0},
    "x": {"matrix": X, "n_qubits": 1, "n_params": 0},
    "y": {"matrix": Y, "n_qubits": 1, "n_params": 0},
    "z": {"matrix": Z, "n_qubits": 1, "n_params": 0},
    "h": {"matrix": H, "n_qubits": 1, "n_params": 0},
    "s": {"matrix": S, "n_qubits": 1, "n_params": 0},
    "t": {"matrix": T, "n_qubits": 1, "n_params": 0},
    "sx": {"matrix": SX, "n_qubits": 1, "n_params": 0},
    "rx": {"factory": Rx, "n_qubits": 1, "n_params": 1},
    "ry": {"factory": Ry, "n_qubits": 1, "n_params": 1},
    "rz": {"factory": Rz, "n_qubits": 1, "n_params": 1},
    "p": {"factory": P, "n_qubits": 1, "n_params": 1},
    "cx": {"matrix": CNOT, "n_qubits": 2, "n_params": 0},
    "cnot": {"matrix": CNOT, "n_qubits": 2, "n_params": 0},
    "cy": {"matrix": CY, "n_qubits": 2, "n_params": 0},
    "cz": {"matrix": CZ, "n_qubits": 2, "n_params": 0},
    "swap": {"matrix": SWAP, "n_qubits": 2, "n_params": 0},
    "iswap": {"matrix": iSWAP, "n_qubits": 2, "n_params": 0},
    "cp": {"factory": CP, "n_qubits": 2, "n_params": 1},
    "crx": {"factory": CRx, "n_qubits": 2, "n_params": 1},
    "cry": {"factory": CRy, "n_qubits": 2, "n_params": 1},
    "crz": {"factory": CRz, "n_qubits": 2, "n_params": 1},
}


def get_matrix(name: str, params: tuple[float, ...] = ()) -> Matrix:
    """
    Look up a gate matrix by name.

    Raises
    ------
    KeyError
        If the gate name is not registered.
    ValueError
        If the number of parameters does not match the gate.
    """
    key = name.lower()
    if key not in GATE_REGISTRY:
        raise KeyError(f"Unknown gate: '{name}'. Available: {sorted(GATE_REGISTRY)}")
    info = GATE_REGISTRY[key]
    if len(params) != info["n_params"]:
        raise ValueError(
            f"Gate '{name}' takes {info['n_params']} parameter(s), got {len(params)}"
        )
    if info["n_params"] == 0:
        return info["matrix"].copy()
    return info["factory"](*params)


def make_gate(
    name: str,
    target: int,
    control: Optional[int] = None,
    params: tuple[float, ...] = (),
) -> QuantumGate:
    """
    Build a :class:`QuantumGate` from a registered gate name.

    Two-qubit gates need ``control``; single-qubit gates must not have one.
    """
    matrix = get_matrix(name, tuple(params))
    n_qubits = GATE_REGISTRY[name.lower()]["n_qubits"]
    if n_qubits == 2 and control is None:
        raise ValueError(f"Gate '{name}' needs a control qubit")
    if n_qubits == 1 and control is not None:
        raise ValueError(f"Gate '{name}' is a single-qubit gate, got control={control}")
    label = name.upper()
    if params:
        label += "(" + ",".join(f"{p:.4g}" for p in params) + ")"
    return QuantumGate(label=label, target=target, matrix=matrix, control=control)


def is_unitary(m: Matrix, tol: float = 1e-9) -> bool:
    return np.allclose(m @ m.conj().T, np.eye(len(m)), atol=tol)
