"""Example: prepare a Bell state on tiny-qsim."""
import sys
sys.path.insert(0, 'src')

from tiny_qsim import QuantumCircuit, QuantumComputer, make_gate

print("=" * 50)
print("tiny-qsim: Bell State Example")
print("=" * 50)

circ = QuantumCircuit()
circ.add_gate(make_gate("h", 0))
circ.add_gate(make_gate("cx", target=1, control=0))

print("\nCircuit:")
print(circ)

qc = QuantumComputer(2)
qc.apply_circuit(circ)

print("\nState:")
print(qc)

print("\nExpected: equal amplitudes on |00> and |11> (entangled!)")
