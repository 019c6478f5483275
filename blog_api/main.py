# blog_api/main.py

"""Blog Posts API - CRUD, search and unique slugs for a blog frontend."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError

from blog_api.configs import settings
from blog_api.errors import (
    BASE_EXCEPTION,
    DatabaseError,
    ValidationFailedError,
    database_exception_handler,
    store_unavailable_handler,
    validation_exception_handler,
    validation_failed_handler,
)
from blog_api.middleware import LoggingMiddleware, configure_cors, lifespan
from blog_api.routes import blog_router

app = FastAPI(
    title=settings.APP_NAME,
    description="REST API for creating, searching and publishing blog posts",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)

routes = [
    blog_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (ValidationFailedError, validation_failed_handler),
    (RequestValidationError, validation_exception_handler),
    (DatabaseError, database_exception_handler),
    (SQLAlchemyError, store_unavailable_handler),
    *[(exc_type, store_unavailable_handler) for exc_type in BASE_EXCEPTION],
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]
