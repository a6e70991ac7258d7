"""Extract example test cases from problem pages and judge solutions against them."""

__version__ = "0.1.0"

__all__ = ["__version__"]