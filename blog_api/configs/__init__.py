from blog_api.configs.settings import (
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_SLUG_LENGTH,
    MAX_TITLE_LENGTH,
    NOT_FOUND_MESSAGE,
    Settings,
    file_logger,
    settings,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "MAX_SLUG_LENGTH",
    "MAX_TITLE_LENGTH",
    "NOT_FOUND_MESSAGE",
    "Settings",
    "file_logger",
    "settings",
]
