from fastapi import status


class StoreError(Exception):
    """Base for every error the services raise on purpose.

    ``status_code`` is what the HTTP layer answers with and ``body_key`` is
    the field the message goes under (``errors`` for rejections the client
    caused, ``error`` for server faults).
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    body_key = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    body_key = "errors"


class DuplicateEmail(ValidationError):
    def __init__(self, message: str = "existing user found with same email address"):
        super().__init__(message)


class InvalidCredentials(ValidationError):
    pass


class Unauthorized(StoreError):
    status_code = status.HTTP_401_UNAUTHORIZED
    body_key = "errors"


class InvalidToken(Unauthorized):
    pass


class UserNotFound(StoreError):
    # A verified token pointing at a missing record is a consistency fault
    def __init__(self, user_id: str):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class PersistenceFault(StoreError):
    pass
