class CompileError(RuntimeError):
    pass


class SourceReadError(CompileError):
    pass


class InvalidCharacterError(CompileError):
    def __init__(self, char, line, column):
        super().__init__(f'Unexpected character {char!r} at line {line}, column {column}')
        self.char = char
        self.line = line
        self.column = column


class IntegerOverflowError(CompileError):
    def __init__(self, literal):
        super().__init__(f'Integer literal out of 32-bit range: {literal}')
        self.literal = literal


class UnexpectedTokenError(CompileError):
    def __init__(self, expected, found):
        super().__init__(f'Expected {expected}, found {found}')
        self.expected = expected
        self.found = found


class UnknownIdentifierError(CompileError):
    def __init__(self, name):
        super().__init__(f'Unknown identifier: {name}')
        self.name = name


class UnsupportedOperationError(CompileError):
    def __init__(self, op):
        super().__init__(f'Unsupported operation: {op}')
        self.op = op


class OutOfRegistersError(CompileError):
    pass


class DoubleFreeError(CompileError):
    def __init__(self, register):
        super().__init__(f'Register {register.index} freed while not in use')
        self.register = register


class InternalCompilerError(CompileError):
    pass


class OutputWriteError(CompileError):
    pass
