"""Password hashing using bcrypt."""

import bcrypt


class PasswordHasher:
    """
    One-way password hashing and verification.

    bcrypt salts every hash and compares in constant time. The work factor
    is passed in from configuration.
    """

    def __init__(self, rounds: int = 12):
        self._rounds = rounds
        # Computed up front so the first unknown-account login costs one bcrypt check
        self._dummy_hash = self.hash("codevault-dummy-password")

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            # Malformed hash or password over the bcrypt input limit
            return False

    def verify_dummy(self, password: str) -> bool:
        """
        Spend the same time as verify() when there is no hash to check.

        Used when the account does not exist so that response timing does not
        reveal whether an identity is registered. Always returns False.
        """
        self.verify(password, self._dummy_hash)
        return False
