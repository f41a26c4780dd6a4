from fastapi import status
from codevault.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """
    Server-side failure.

    The message is replaced with a generic one unless expose_message is set,
    which is reserved for errors whose message is safe and actionable
    (e.g. a retryable 503).
    """

    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        expose_message: bool = False,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.expose_message = expose_message
        super().__init__(base_error.message)
