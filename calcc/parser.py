from calcc.errors import UnexpectedTokenError
from calcc.lexer import Token

EOF = Token('EOF', None)


class ASTNode:
    fields = ()

    def __eq__(self, other):
        return type(self) is type(other) and all(
            getattr(self, f) == getattr(other, f) for f in self.fields)

    def __repr__(self):
        args = ', '.join(repr(getattr(self, f)) for f in self.fields)
        return f'{type(self).__name__}({args})'


class BinOp(ASTNode):
    fields = ('left', 'op', 'right')

    def __init__(self, left, op, right):
        self.left = left
        self.op = op
        self.right = right


class Num(ASTNode):
    fields = ('value',)

    def __init__(self, value):
        self.value = value


class Var(ASTNode):
    fields = ('name',)

    def __init__(self, name):
        self.name = name


class Assign(ASTNode):
    fields = ('name', 'value')

    def __init__(self, name, value):
        self.name = name
        self.value = value


def describe(token):
    if token.kind == 'EOF':
        return 'end of input'
    if token.kind in ('NUMBER', 'ID'):
        return f'{token.kind} {token.value!r}'
    return repr(token.value)


class Parser:
    """Recursive-descent parser over a token list.

    Walks the tokens front to back with a single token of lookahead.
    Produces one ``Assign`` per ``name = expr ;`` statement.

    ``expr`` only continues on ``+``. A ``-`` between terms is never
    consumed and surfaces as an ``UnexpectedTokenError``.
    """

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def consume(self):
        self.pos += 1

    def current_token(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return EOF

    def expect(self, kind, expected=None):
        token = self.current_token()
        if token.kind != kind:
            raise UnexpectedTokenError(expected or kind, describe(token))
        self.consume()
        return token

    def parse(self):
        print("Parsing")
        statements = [self.assignment()]
        while self.current_token() is not EOF:
            statements.append(self.assignment())
        return statements

    def assignment(self):
        name = self.expect('ID', 'identifier').value
        self.expect('ASSIGN', "'='")
        value = self.expr()
        self.expect('SEMI', "';'")
        return Assign(name, value)

    def expr(self):
        node = self.term()
        while self.current_token().kind == 'PLUS':
            op = self.current_token().value
            self.consume()
            node = BinOp(node, op, self.term())
        return node

    def term(self):
        node = self.factor()
        while self.current_token().kind in ('MUL', 'DIV'):
            op = self.current_token().value
            self.consume()
            node = BinOp(node, op, self.factor())
        return node

    def factor(self):
        token = self.current_token()
        if token.kind == 'NUMBER':
            self.consume()
            return Num(token.value)
        elif token.kind == 'ID':
            self.consume()
            return Var(token.value)
        elif token.kind == 'LPAREN':
            self.consume()
            node = self.expr()
            self.expect('RPAREN', "')'")
            return node
        raise UnexpectedTokenError('number, identifier or \'(\'', describe(token))
