class CatalogError(Exception):
    """Base class for errors that end a request with an HTTP status."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidInput(CatalogError):
    status_code = 400
    default_message = "Invalid input"


class InvalidYear(InvalidInput):
    default_message = "Year should be a valid number between 1500 and 2024"


class InvalidParameter(InvalidInput):
    default_message = "Query parameter must be a whole number"


class MissingField(InvalidInput):
    default_message = "Title and author are required"


class NotFound(CatalogError):
    status_code = 404
    default_message = "Book not found"


class StoreError(CatalogError):
    default_message = "Error accessing the database"
