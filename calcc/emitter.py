from calcc.codegen import Add, Move, Mul, Push
from calcc.errors import InternalCompilerError
from calcc.locations import WORD_SIZE, Constant, Register, StackSlot

REGISTER_NAMES = ['%rax', '%rbx', '%rcx', '%rdx', '%rsi', '%rdi']

PROLOGUE = ['.global _start', '.text', '_start:']


def operand(data):
    if isinstance(data, Register):
        return REGISTER_NAMES[data.index]
    elif isinstance(data, StackSlot):
        return f'{data.index * WORD_SIZE}(%rsp)'
    elif isinstance(data, Constant):
        return f'${data.value}'
    raise InternalCompilerError(f'Cannot render operand {data!r}')


def instruction(inst):
    if isinstance(inst, Add):
        return f'addq {operand(inst.source)},{operand(inst.dest)}'
    elif isinstance(inst, Mul):
        return f'imulq {operand(inst.factor1)},{operand(inst.factor2)}'
    elif isinstance(inst, Move):
        return f'movq {operand(inst.source)},{operand(inst.dest)}'
    elif isinstance(inst, Push):
        return f'pushq {operand(inst.source)}'
    raise InternalCompilerError(f'Cannot render instruction {inst!r}')


def emit(instructions):
    lines = PROLOGUE + [instruction(inst) for inst in instructions] + ['ret']
    return '\n'.join(lines) + '\n'
