from calcc.errors import SourceReadError


def fetch_code(argv):
    # exactly one positional argument: the source file
    if len(argv) != 2:
        raise SourceReadError('Cannot compile\nUsage: calcc <source file>')

    filename = argv[1]
    print(f"Reading code from: {filename}")
    try:
        with open(filename, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise SourceReadError(f'Cannot read {filename}: {e.strerror}') from e
    except UnicodeDecodeError as e:
        raise SourceReadError(f'Cannot read {filename}: not valid UTF-8 ({e.reason})') from e
