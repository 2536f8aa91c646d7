"""Tests for QuantumCircuit."""

import numpy as np
import pytest

from tiny_qsim import QuantumCircuit, make_gate


@pytest.fixture
def bell():
    qc = QuantumCircuit()
    qc.add_gate(make_gate("h", 0)).add_gate(make_gate("cx", 1, control=0))
    return qc


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def test_empty_circuit():
    qc = QuantumCircuit()
    assert qc.size() == 0
    assert len(qc) == 0
    assert qc.gates == []
    assert qc.str() == []


def test_add_gate_chaining(bell):
    assert bell.size() == 2
    assert [gate.label for gate in bell] == ["H", "CX"]


def test_add_gate_rejects_non_gate():
    with pytest.raises(TypeError):
        QuantumCircuit().add_gate(np.eye(2))


def test_gates_property_is_copy(bell):
    gates = bell.gates
    gates.clear()
    assert bell.size() == 2


def test_init_from_iterable():
    qc = QuantumCircuit(make_gate("x", q) for q in range(3))
    assert [gate.target for gate in qc] == [0, 1, 2]
    assert qc[1].target == 1


def test_no_register_validation():
    # qubit indices are only checked when the circuit is applied
    qc = QuantumCircuit().add_gate(make_gate("x", 40))
    assert qc.size() == 1


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------

def test_add_circuit(bell):
    qc = QuantumCircuit().add_gate(make_gate("z", 1))
    qc.add_circuit(bell)
    assert [gate.label for gate in qc] == ["Z", "H", "CX"]
    assert bell.size() == 2


def test_adjoint_reverses_and_conjugates():
    qc = QuantumCircuit().add_gate(make_gate("s", 0)).add_gate(make_gate("t", 1))
    adj = qc.adjoint()
    assert [gate.label for gate in adj] == ["T†", "S†"]
    np.testing.assert_allclose(adj[1].matrix, qc[0].matrix.conj().T)


def test_copy_is_independent(bell):
    dup = bell.copy()
    dup.add_gate(make_gate("x", 0))
    assert bell.size() == 2
    assert dup.size() == 3


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def test_str_one_line_per_gate(bell):
    assert bell.str() == ["H     target: 0", "CX    target: 1  control: 0"]
    assert str(bell) == "H     target: 0\nCX    target: 1  control: 0"


def test_repr(bell):
    assert repr(bell) == "QuantumCircuit(gates=2)"
