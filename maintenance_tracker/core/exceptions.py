"""
Error taxonomy for the maintenance request service.

Every error maps to exactly one HTTP status code and carries a
human-readable message that is returned to the client as
``{"error": message}``.
"""


class MaintenanceRequestError(Exception):
    """Base class for errors raised while serving a maintenance request call."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MaintenanceRequestError):
    """A required field is missing or empty."""

    status_code = 400


class ParseError(MaintenanceRequestError):
    """The request body or the path ID could not be decoded."""

    status_code = 400


class NotFoundError(MaintenanceRequestError):
    """No maintenance request exists with the given ID."""

    status_code = 404

    def __init__(self, request_id: int):
        super().__init__("Request not found")
        self.request_id = request_id


class MethodNotAllowedError(MaintenanceRequestError):
    """The HTTP method is not supported on the endpoint."""

    status_code = 405


INVALID_ID_MESSAGE = "Invalid request ID"
INVALID_BODY_MESSAGE = "Invalid request body"
