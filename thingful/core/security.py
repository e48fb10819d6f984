"""
Security: password hashing.
Challenge: No plain-text passwords, no blocking the event loop on bcrypt.
"""

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext

# Cost factor 12: ~250ms per hash on commodity hardware.
BCRYPT_ROUNDS = 12

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


async def hash_password(password: str) -> str:
    """Salted one-way hash for storage. Runs in the threadpool."""
    return await run_in_threadpool(pwd_context.hash, password)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time comparison against a stored hash."""
    return pwd_context.verify(plain, hashed)
