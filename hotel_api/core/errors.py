import logging

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base for every failure the API reports to a client.

    `message` is safe to show to the caller, `code` lets clients branch
    without matching on message text.
    """

    code = "error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    code = "validation_error"
    status_code = 400


class NotFoundError(ServiceError):
    code = "not_found"
    status_code = 404


class ConflictError(ServiceError):
    code = "conflict"
    status_code = 409


class StoreError(ServiceError):
    code = "store_error"
    status_code = 500


def handle_db_error(exc: Exception, message: str):
    """Log a database failure and re-raise it with a contextual message.

    Unique constraint violations surface as ConflictError, everything else as StoreError.
    The driver's own text stays in the log.
    """
    logger.exception("Database error: %s", message)
    if isinstance(exc, IntegrityError):
        raise ConflictError(message) from exc
    raise StoreError(message) from exc
