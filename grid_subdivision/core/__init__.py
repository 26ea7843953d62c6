"""Core data structures for the grid."""

from .hashing import IndexHash, DEFAULT_HASH_BASE
from .types import CellIndex, Bounds
from .result import OperationResult, OperationStatus, ErrorCode

__all__ = [
    "IndexHash",
    "DEFAULT_HASH_BASE",
    "CellIndex",
    "Bounds",
    "OperationResult",
    "OperationStatus",
    "ErrorCode",
]
