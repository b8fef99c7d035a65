"""
Domain Exceptions

Errors raised by the service layer. Services know nothing about HTTP;
routers catch these and translate them into status codes.

Hierarchy:
    LibraryError
    ├── PublisherNameError  (invalid publisher name on creation)
    └── NotFoundError       (referenced record does not exist)
"""


class LibraryError(Exception):
    """Base exception for all Library API domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PublisherNameError(LibraryError):
    """
    Raised when a publisher name breaks the naming rule.

    Carries the rejected name so the response can echo it back:
        "Name starts with number, Publisher name: 123 Books"
    """

    def __init__(self, message: str, publisher_name: str):
        super().__init__(message)
        self.publisher_name = publisher_name

    def __str__(self) -> str:
        return f"{self.message}, Publisher name: {self.publisher_name}"


class NotFoundError(LibraryError):
    """Raised when an operation targets a record that does not exist."""

    def __init__(self, resource: str, resource_id: int):
        super().__init__(f"The {resource} with id: {resource_id} does not exist")
        self.resource = resource
        self.resource_id = resource_id
