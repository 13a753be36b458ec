"""Build C programs from Python: commands, processes, files, compilers and self-rebuilding build programs."""

__version__ = "0.1.0"