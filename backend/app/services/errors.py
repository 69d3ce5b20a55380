"""서비스 레이어에서 발생하는 도메인 예외 계층입니다."""


class KadoError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(KadoError):
    """A required field is missing or invalid; raised before any write."""

    status_code = 400


class NotFoundError(KadoError):
    """A referenced record or revision does not exist."""

    status_code = 404


class StorageError(KadoError):
    """The underlying database rejected or failed a write."""

    status_code = 500


class ConflictError(StorageError):
    """A write violated a uniqueness constraint."""

    status_code = 409
