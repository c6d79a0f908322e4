"""Kernel types."""
from rotating_jwt.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
