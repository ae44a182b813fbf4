import os

# Must be set before `config` is imported anywhere
os.environ.setdefault("JWT_SECRET", "test-signing-secret")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("DB_URI", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("SESSION_SWEEP_INTERVAL_SECONDS", "0")
