"""Multi-key rotating XOR cipher, display helpers and benchmark commands."""

__version__ = "0.1.0"
__all__ = ["benchmark", "dea", "display", "parallel"]