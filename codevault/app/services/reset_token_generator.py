"""
Password reset token generation.

The plaintext token goes out once in an email link; only its SHA-256 digest
is stored. SHA-256 is enough here because the token itself carries 256 bits
of entropy.
"""

import hashlib
import secrets
from typing import NamedTuple


class ResetTokenPair(NamedTuple):
    plaintext: str
    digest: str


class ResetTokenGenerator:
    TOKEN_BYTES = 32

    def generate(self) -> ResetTokenPair:
        plaintext = secrets.token_hex(self.TOKEN_BYTES)
        return ResetTokenPair(plaintext=plaintext, digest=self.digest(plaintext))

    def digest(self, plaintext: str) -> str:
        """Recompute the stored digest for a candidate token"""
        return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()
