from calcc.errors import OutputWriteError

OUTPUT_PATH = "out.s"


def make_output(assembly, path=OUTPUT_PATH):
    print(f"Saving assembly to {path}")
    try:
        with open(path, "w") as f:
            f.write(assembly)
    except OSError as e:
        raise OutputWriteError(f'Cannot write {path}: {e.strerror}') from e
