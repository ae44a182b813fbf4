"""
Password hashing with bcrypt.
"""

import bcrypt

# bcrypt only reads the first 72 bytes of its input and refuses longer ones
MAX_PASSWORD_BYTES = 72

# Fixed plaintext used to burn a real bcrypt check on paths that have no
# stored hash (unknown user, inactive user)
_DUMMY_PASSWORD = b"trendradar-dummy-password"


def password_fits(plaintext: str) -> bool:
    """True if bcrypt accepts the password as input"""
    return len(plaintext.encode("utf-8")) <= MAX_PASSWORD_BYTES


class PasswordHasher:
    """
    One-way salted password hashing.

    Business Rules:
    - Cost factor is fixed per process (bcrypt rounds)
    - Passwords longer than MAX_PASSWORD_BYTES are rejected by hash();
      callers validate length before hashing
    - verify() and verify_dummy() never raise on malformed input, so the
      known-user and unknown-user login paths fail the same way
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._dummy_hash = None

    def hash(self, plaintext: str) -> str:
        """
        Raises:
            ValueError: password longer than MAX_PASSWORD_BYTES
        """
        if not password_fits(plaintext):
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(self.rounds)).decode(
            "utf-8"
        )

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), hashed.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            return False

    def verify_dummy(self, plaintext: str) -> None:
        """Spend the same CPU time as a real verification, discard the result"""
        if self._dummy_hash is None:
            self._dummy_hash = bcrypt.hashpw(_DUMMY_PASSWORD, bcrypt.gensalt(self.rounds))
        try:
            bcrypt.checkpw(plaintext.encode("utf-8"), self._dummy_hash)
        except (ValueError, TypeError, AttributeError):
            pass
