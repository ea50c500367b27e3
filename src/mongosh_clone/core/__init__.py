"""Core parsing module for mongosh-clone."""

from .parser import OperationParser, parse
from .types import ParsedCall

__all__ = ["OperationParser", "ParsedCall", "parse"]
