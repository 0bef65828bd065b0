from typing import Dict, Optional

from fastapi import status

from shared_kernel.result import NOT_FOUND, VALIDATION_FAILED, Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error, status_by_code: Optional[Dict[str, int]] = None):
    """
    Translate a use case error into the matching HTTP exception.

    NOT_FOUND maps to 404 and VALIDATION_FAILED to 400; other codes are looked
    up in status_by_code. Unknown codes are server errors.
    """
    if error.code == NOT_FOUND:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code == VALIDATION_FAILED:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if status_by_code and error.code in status_by_code:
        raise ClientError(error, status_code=status_by_code[error.code])
    raise ServerError(error)
