import sys

from calcc.codegen import AsmCodeGen
from calcc.emitter import emit
from calcc.errors import CompileError
from calcc.finisher import make_output
from calcc.lexer import tokenize
from calcc.parser import Parser
from calcc.reader import fetch_code


def compile_source(code):
    statements = Parser(tokenize(code)).parse()

    # lower every statement, sharing one symbol table
    instructions = AsmCodeGen().generate(statements)

    return emit(instructions)


def main(argv=None):
    if argv is None:
        argv = sys.argv
    try:
        assembly = compile_source(fetch_code(argv))
        # only written once every stage has succeeded
        make_output(assembly)
    except CompileError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
