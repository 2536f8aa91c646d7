"""Tests for gate matrices and the QuantumGate container."""

import numpy as np
import pytest

from tiny_qsim import QuantumGate, TWO_QUBITS_BASIS, make_gate
from tiny_qsim import gates as g


# ---------------------------------------------------------------------------
# Unitarity
# ---------------------------------------------------------------------------

FIXED_GATES = [
    ("I", g.I), ("X", g.X), ("Y", g.Y), ("Z", g.Z), ("H", g.H),
    ("S", g.S), ("T", g.T), ("SX", g.SX),
    ("CNOT", g.CNOT), ("CY", g.CY), ("CZ", g.CZ), ("SWAP", g.SWAP),
    ("iSWAP", g.iSWAP),
]


@pytest.mark.parametrize("name,matrix", FIXED_GATES)
def test_fixed_gate_unitary(name, matrix):
    assert g.is_unitary(matrix), f"{name} is not unitary"


@pytest.mark.parametrize("factory", [g.Rx, g.Ry, g.Rz, g.P, g.CP, g.CRx, g.CRy, g.CRz])
@pytest.mark.parametrize("theta", [0, 0.5, np.pi, -1.3])
def test_param_gate_unitary(factory, theta):
    assert g.is_unitary(factory(theta))


def test_sx_squared_is_x():
    np.testing.assert_allclose(g.SX @ g.SX, g.X, atol=1e-12)


def test_cnot_flips_target_when_control_set():
    # rows/columns ordered as TWO_QUBITS_BASIS: (control, target)
    assert TWO_QUBITS_BASIS == ((0, 0), (0, 1), (1, 0), (1, 1))
    np.testing.assert_allclose(g.CNOT @ [0, 0, 1, 0], [0, 0, 0, 1])
    np.testing.assert_allclose(g.CNOT @ [0, 1, 0, 0], [0, 1, 0, 0])


def test_swap_exchanges_middle_states():
    np.testing.assert_allclose(g.SWAP @ [0, 1, 0, 0], [0, 0, 1, 0])


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def test_get_matrix_case_insensitive():
    np.testing.assert_allclose(g.get_matrix("H"), g.H)


def test_get_matrix_returns_copy():
    m = g.get_matrix("x")
    m[0, 0] = 5
    assert g.X[0, 0] == 0


def test_get_matrix_unknown():
    with pytest.raises(KeyError):
        g.get_matrix("nope")


def test_get_matrix_param_count():
    with pytest.raises(ValueError):
        g.get_matrix("rx")
    with pytest.raises(ValueError):
        g.get_matrix("h", (0.1,))


# ---------------------------------------------------------------------------
# QuantumGate
# ---------------------------------------------------------------------------

def test_make_single_qubit_gate():
    gate = make_gate("x", 3)
    assert gate.nqubits == 1
    assert gate.target == 3
    assert gate.control is None
    assert gate.qubits == (3,)
    assert gate.matrix.dtype == np.complex128


def test_make_two_qubit_gate():
    gate = make_gate("cz", target=0, control=2)
    assert gate.nqubits == 2
    assert gate.qubits == (2, 0)
    assert gate.matrix.shape == (4, 4)


def test_make_gate_control_checks():
    with pytest.raises(ValueError):
        make_gate("cx", 1)
    with pytest.raises(ValueError):
        make_gate("h", 0, control=1)


def test_parameterized_label():
    assert make_gate("rz", 0, params=(0.5,)).label == "RZ(0.5)"


def test_gate_str():
    assert make_gate("h", 2).str() == "H     target: 2"
    assert str(make_gate("cx", 1, control=0)) == "CX    target: 1  control: 0"


def test_two_qubits_basis_accessor():
    assert QuantumGate.two_qubits_basis() is TWO_QUBITS_BASIS


def test_adjoint():
    gate = make_gate("s", 0)
    adj = gate.adjoint()
    assert adj.label == "S†"
    np.testing.assert_allclose(adj.matrix, np.diag([1, -1j]))
    assert adj.adjoint() == gate


def test_equality_compares_matrices():
    a = QuantumGate("U", 0, np.eye(2))
    b = QuantumGate("U", 0, np.eye(2))
    c = QuantumGate("U", 0, g.X)
    assert a == b
    assert a != c


def test_gate_owns_its_matrix():
    m = g.X.copy()
    gate = QuantumGate("X", 0, m)
    m[:] = np.eye(2)
    np.testing.assert_allclose(gate.matrix, g.X)


def test_gate_matrix_read_only():
    gate = make_gate("h", 0)
    with pytest.raises(ValueError):
        gate.matrix[0, 0] = 0


def test_gates_hashable():
    a = make_gate("cx", 1, control=0)
    b = make_gate("cx", 1, control=0)
    assert hash(a) == hash(b)
    assert len({a, b, make_gate("cx", 0, control=1)}) == 2
    assert hash(QuantumGate("Z", 0, [[1, 0], [0, -0.0]])) == hash(QuantumGate("Z", 0, [[1, 0], [0, 0.0]]))
