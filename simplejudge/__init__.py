"""A small terminal judge with accounts, problems and submission checking."""

__version__ = "1.0.0"