"""
Core module - error types shared across the provisioner.
"""
from taskdb.core.exceptions import (
    ReconcileError,
    IndexConflictError,
)

__all__ = [
    "ReconcileError",
    "IndexConflictError",
]
