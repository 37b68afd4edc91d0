"""bcrypt implementation of PasswordHasher."""

from logging import getLogger

import bcrypt

from domain.model.errors import HashingError

logger = getLogger(__name__)

DEFAULT_ROUNDS = 10
MIN_ROUNDS = 4
MAX_ROUNDS = 31


class BcryptPasswordHasher:
    """Salted bcrypt hashing with a fixed work factor.

    The work factor is log2 of the iteration count, so every +1 doubles the
    cost of both hashing and brute forcing.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise ValueError(f"bcrypt rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}, got {rounds}")
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(plaintext.encode('utf-8'), salt).decode('utf-8')
        except (ValueError, TypeError) as e:
            logger.error("Password hashing failed", extra={"error": type(e).__name__})
            raise HashingError("Error hashing password") from e

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(plaintext.encode('utf-8'), hashed.encode('utf-8'))
        except (ValueError, TypeError) as e:
            # Malformed stored hash, not a wrong password
            logger.error("Password verification failed", extra={"error": type(e).__name__})
            raise HashingError("Error comparing password") from e
