from .base import (
    AppError,
    BadRequestError,
    ConflictError,
    DomainError,
    HashingError,
    InfrastructureError,
    UnauthorizedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "BadRequestError",
    "ConflictError",
    "DomainError",
    "HashingError",
    "InfrastructureError",
    "UnauthorizedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
