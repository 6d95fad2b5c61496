from calcc.main import compile_source

__all__ = ["compile_source"]
