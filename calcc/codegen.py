from collections import namedtuple

from calcc.errors import (InternalCompilerError, UnknownIdentifierError,
                          UnsupportedOperationError)
from calcc.locations import (Constant, LocationManager, Register, StackSlot,
                              SymbolTable, Variant)
from calcc.parser import Assign, BinOp, Num, Var


class Add(Variant, namedtuple('Add', ['source', 'dest'])):
    __slots__ = ()


class Mul(Variant, namedtuple('Mul', ['factor1', 'factor2'])):
    __slots__ = ()


class Move(Variant, namedtuple('Move', ['source', 'dest'])):
    __slots__ = ()


class Push(Variant, namedtuple('Push', ['source'])):
    __slots__ = ()

# imulq leaves its product in the first register
MUL_RESULT = Register(0)


class AsmCodeGen:
    def __init__(self):
        self.symbols = SymbolTable()
        self.next_slot = 0
        self.instructions = []

    def lower(self, node, locations):
        """Lower an expression to ``(operand, instructions)``.

        Literals and variables produce no code and are used in place. A
        binary operation takes one fresh register from ``locations`` for
        its result and releases any registers its operands held.
        """
        if isinstance(node, Num):
            return Constant(node.value), []
        elif isinstance(node, Var):
            data = self.symbols.lookup(node.name)
            if data is None:
                raise UnknownIdentifierError(node.name)
            return data, []
        elif isinstance(node, BinOp):
            if node.op not in ('+', '*'):
                raise UnsupportedOperationError(node.op)
            left, code = self.lower(node.left, locations)
            right, right_code = self.lower(node.right, locations)
            code = code + right_code
            result = locations.request()
            code.append(Move(right, result))
            if node.op == '+':
                code.append(Add(left, result))
            else:
                code.append(Mul(left, right))
            for operand in (left, right):
                if isinstance(operand, Register):
                    locations.free(operand)
            if node.op == '*':
                code.append(Move(MUL_RESULT, result))
            return result, code
        raise InternalCompilerError(f'Cannot lower {node!r}')

    def generate_code(self, node):
        if not isinstance(node, Assign):
            raise InternalCompilerError(f'Expected a statement, got {node!r}')
        existing = self.symbols.lookup(node.name)
        value, code = self.lower(node.value, LocationManager())
        self.instructions.extend(code)
        if existing is None:
            self.symbols.save(node.name, StackSlot(self.next_slot))
            self.next_slot += 1
            self.instructions.append(Push(value))
        elif isinstance(existing, StackSlot):
            self.instructions.append(Move(value, existing))
        else:
            raise InternalCompilerError(
                f'{node.name} is bound to {existing!r} instead of a stack slot')

    def generate(self, statements):
        print("Generating assembly")
        for statement in statements:
            self.generate_code(statement)
        return self.instructions
