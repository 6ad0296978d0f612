# src/resumehub/services/password_service.py
import bcrypt


class PasswordHasher:
    """One-way bcrypt hashing; every call draws a fresh salt."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        hashed = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode('utf-8')

    def verify(self, password: str, hashed) -> bool:
        if not isinstance(password, str) or not password or not hashed:
            return False
        if isinstance(hashed, str):
            hashed = hashed.encode('utf-8')
        return bcrypt.checkpw(password.encode('utf-8'), hashed)
