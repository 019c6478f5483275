from blog_api.errors.base import BASE_EXCEPTION, BaseAppError, create_exception_handler
from blog_api.errors.database import (
    DatabaseConfigurationError,
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
    store_unavailable_handler,
)
from blog_api.errors.validation import (
    FieldError,
    ValidationFailedError,
    validation_exception_handler,
    validation_failed_handler,
)

__all__ = [
    "BASE_EXCEPTION",
    "BaseAppError",
    "create_exception_handler",
    "DatabaseConfigurationError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "RecordNotFoundError",
    "database_exception_handler",
    "store_unavailable_handler",
    "FieldError",
    "ValidationFailedError",
    "validation_exception_handler",
    "validation_failed_handler",
]
