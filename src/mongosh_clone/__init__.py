"""mongosh-clone - collection operations from the command line."""

from loguru import logger

from .core import OperationParser, ParsedCall, parse
from .errors import MongoshCloneError, OperationParseError
from .executor import OperationExecutor, OperationResult

__version__ = "0.1.0"

# Library use stays silent until configure_logging() opts in.
logger.disable("mongosh_clone")

__all__ = [
    "MongoshCloneError",
    "OperationExecutor",
    "OperationParseError",
    "OperationParser",
    "OperationResult",
    "ParsedCall",
    "parse",
]
