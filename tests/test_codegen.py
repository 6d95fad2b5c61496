import pytest

from calcc.codegen import Add, AsmCodeGen, Move, Mul, Push
from calcc.errors import (OutOfRegistersError, UnknownIdentifierError,
                          UnsupportedOperationError)
from calcc.lexer import tokenize
from calcc.locations import Constant, LocationManager, Register, StackSlot
from calcc.parser import BinOp, Num, Parser, Var


def generate(code):
    codegen = AsmCodeGen()
    instructions = codegen.generate(Parser(tokenize(code)).parse())
    return codegen, instructions


def test_constant_needs_no_code():
    assert AsmCodeGen().lower(Num(7), LocationManager()) == (Constant(7), [])


def test_add_lowering():
    locations = LocationManager()
    value, code = AsmCodeGen().lower(BinOp(Num(1), '+', Num(2)), locations)
    assert value == Register(0)
    assert code == [Move(Constant(2), Register(0)), Add(Constant(1), Register(0))]
    assert locations.used == [True, False, False, False, False]


def test_mul_lowering_copies_fixed_result():
    value, code = AsmCodeGen().lower(BinOp(Num(2), '*', Num(3)), LocationManager())
    assert value == Register(0)
    assert code == [
        Move(Constant(3), Register(0)),
        Mul(Constant(2), Constant(3)),
        Move(Register(0), Register(0)),
    ]


def test_nested_operand_registers_are_freed():
    locations = LocationManager()
    value, code = AsmCodeGen().lower(
        BinOp(Num(1), '+', BinOp(Num(2), '*', Num(3))), locations)
    assert value == Register(1)
    assert code[-2:] == [Move(Register(0), Register(1)), Add(Constant(1), Register(1))]
    assert locations.used == [False, True, False, False, False]


def test_variables_are_used_in_place():
    codegen, instructions = generate("a = 5; b = a + a;")
    assert instructions == [
        Push(Constant(5)),
        Move(StackSlot(0), Register(0)),
        Add(StackSlot(0), Register(0)),
        Push(Register(0)),
    ]


def test_stack_slots_follow_first_assignment_order():
    codegen, _ = generate("c = 1; a = 2; b = 3; a = 4; d = c;")
    assert [codegen.symbols.lookup(n) for n in ('c', 'a', 'b', 'd')] == [
        StackSlot(0), StackSlot(1), StackSlot(2), StackSlot(3)]


def test_reassignment_moves_into_existing_slot():
    _, instructions = generate("x = 1; y = 2; x = 3;")
    assert instructions == [
        Push(Constant(1)),
        Push(Constant(2)),
        Move(Constant(3), StackSlot(0)),
    ]


def test_one_store_per_statement():
    source = "a = 1 + 2; b = a * 3; a = (a + b) * 2; c = a; b = c + 1;"
    _, instructions = generate(source)
    stores = [i for i in instructions
              if isinstance(i, Push) or (isinstance(i, Move) and isinstance(i.dest, StackSlot))]
    assert len(stores) == 5
    assert [type(i) for i in stores] == [Push, Push, Move, Push, Move]


def test_registers_do_not_leak_between_statements():
    _, instructions = generate("a = 1 * 2; b = 3 * 4;")
    assert instructions[0] == Move(Constant(2), Register(0))
    assert instructions[4] == Move(Constant(4), Register(0))


def test_unknown_identifier():
    with pytest.raises(UnknownIdentifierError) as exc:
        generate("x = y + 1;")
    assert exc.value.name == 'y'


def test_self_reference_before_assignment():
    with pytest.raises(UnknownIdentifierError):
        generate("x = x;")


def test_division_is_unsupported():
    with pytest.raises(UnsupportedOperationError) as exc:
        generate("x = 6 / 2;")
    assert exc.value.op == '/'


def test_register_pressure():
    generate("x = (1+1)+((1+1)+((1+1)+(1+1)));")
    with pytest.raises(OutOfRegistersError):
        generate("x = (1+1)+((1+1)+((1+1)+((1+1)+(1+1))));")


def test_subtraction_node_is_unsupported():
    with pytest.raises(UnsupportedOperationError):
        AsmCodeGen().lower(BinOp(Var('a'), '-', Num(1)), LocationManager())


def test_instruction_kinds_are_distinct():
    a, b = Constant(1), Register(0)
    assert Move(a, b) != Add(a, b)
    assert Move(a, b) == Move(a, b)
    assert len({Move(a, b), Add(a, b)}) == 2
