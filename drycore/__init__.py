"""Value types, config tables and the normalizer port for a structural duplication detector."""

__version__ = "0.1.0"