"""
Domain exceptions

Raised by adapters for conditions the application layer must translate
into Result errors.
"""


class DuplicateAccountError(Exception):
    """Username or email already taken (store-level unique constraint)"""

    def __init__(self, message: str = "Account already exists"):
        self.message = message
        super().__init__(message)
