from fastapi import status


class ReviewServiceError(Exception):
    """Base class for errors raised by the review service."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ReviewServiceError):
    """Candidate review is missing a required field or has a bad rating."""

    status_code = status.HTTP_400_BAD_REQUEST


class StoreUnavailableError(ReviewServiceError):
    """The document store could not be reached or rejected the operation."""


class NotFoundError(ReviewServiceError):
    status_code = status.HTTP_404_NOT_FOUND
