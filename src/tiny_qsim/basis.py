"""
Computational-basis states as bit-packed integers.

Bit ``i`` of :attr:`Basis.state` holds the value of qubit ``i``, so the
integer itself is the position of the basis state in the amplitude vector.

Example
-------
>>> b = Basis(0b101)
>>> b.get_bit(1)
0
>>> b.set_bit(1, 1).add()
7
>>> Basis(0b11).insert(1).str(3)
'|101>'
"""

from __future__ import annotations


class Basis:
    """
    Immutable computational-basis state of a qubit register.

    Parameters
    ----------
    state : int
        Non-negative integer whose bit ``i`` is the value of qubit ``i``.
    """

    __slots__ = ("state",)

    def __init__(self, state: int = 0) -> None:
        state = int(state)
        if state < 0:
            raise ValueError(f"Basis index must be non-negative, got {state}")
        object.__setattr__(self, "state", state)

    def __setattr__(self, name, value):
        raise AttributeError("Basis is immutable")

    # -- Bit access ---------------------------------------------------------

    def get_bit(self, pos: int) -> int:
        """Value (0 or 1) of qubit ``pos``."""
        return (self.state >> pos) & 1

    def set_bit(self, pos: int, value: int) -> Basis:
        """Return a copy with qubit ``pos`` set to ``value``."""
        if value:
            return Basis(self.state | (1 << pos))
        return Basis(self.state & ~(1 << pos))

    def add(self) -> int:
        """Index of this basis state in an amplitude vector."""
        return self.state

    def insert(self, pos: int) -> Basis:
        """
        Open an empty qubit slot at ``pos``.

        Bits at or above ``pos`` move up by one, bits below ``pos`` stay
        put, and the new bit at ``pos`` is 0. Inserting into every value
        of an (n-1)-qubit register enumerates all n-qubit states that have
        qubit ``pos`` cleared.
        """
        shifted = self.state << 1
        mask = (1 << pos) - 1
        # low bits come back from the unshifted value; bit pos still holds bit pos-1
        restored = shifted ^ ((shifted ^ self.state) & mask)
        return Basis(restored & ~(1 << pos))

    # -- Display ------------------------------------------------------------

    def str(self, n_qubits: int) -> str:
        """Ket string ``|b_{n-1}...b_0>`` with the highest qubit first."""
        bits = "".join(str(self.get_bit(i)) for i in reversed(range(n_qubits)))
        return f"|{bits}>"

    def __repr__(self) -> str:
        return f"Basis({self.state})"

    # -- Value semantics ----------------------------------------------------

    def __int__(self) -> int:
        return self.state

    def __index__(self) -> int:
        return self.state

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Basis):
            return self.state == other.state
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.state)

    def __reduce__(self):
        return (Basis, (self.state,))
