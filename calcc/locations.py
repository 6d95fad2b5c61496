"""Storage locations, the symbol table and the per-statement register pool."""
from collections import namedtuple

from calcc.errors import DoubleFreeError, OutOfRegistersError

NUM_REGISTERS = 5
WORD_SIZE = 8


class Variant:
    """Mixin for namedtuple variants: equal only to the same variant."""
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self))


class Register(Variant, namedtuple('Register', ['index'])):
    __slots__ = ()


class StackSlot(Variant, namedtuple('StackSlot', ['index'])):
    __slots__ = ()


class Constant(Variant, namedtuple('Constant', ['value'])):
    __slots__ = ()


class SymbolTable:
    """Maps identifier names to the location holding their value.

    Entries are never removed. Reassigning a variable updates the value in
    its existing slot through a ``Move``; the entry itself stays put.
    """

    def __init__(self):
        self.symbols = {}

    def lookup(self, name):
        return self.symbols.get(name)

    def save(self, name, data):
        self.symbols[name] = data


class LocationManager:
    """Register allocator for a single statement.

    A new manager is created for every statement, so no register stays
    live across statement boundaries.
    """

    def __init__(self, size=NUM_REGISTERS):
        self.used = [False] * size

    def request(self):
        for index, used in enumerate(self.used):
            if not used:
                self.used[index] = True
                return Register(index)
        raise OutOfRegistersError(f'All {len(self.used)} registers are in use')

    def free(self, register):
        if not self.used[register.index]:
            raise DoubleFreeError(register)
        self.used[register.index] = False
