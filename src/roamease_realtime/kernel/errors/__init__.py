"""Kernel errors – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError       (application.py)
    │   ├── RateLimitError
    │   ├── TimeoutError
    │   └── ConfigError        (config/validation)
    └── InfrastructureError    (infrastructure.py)
        └── RateLimitStoreError
"""

from roamease_realtime.kernel.errors.application import (
    ApplicationError,
    RateLimitError,
    TimeoutError,
)
from roamease_realtime.kernel.errors.base import BaseError
from roamease_realtime.kernel.errors.infrastructure import InfrastructureError, RateLimitStoreError

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "RateLimitError",
    "RateLimitStoreError",
    "TimeoutError",
]
