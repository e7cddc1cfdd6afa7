import os


# ── Factorization ──────────────────────────────────
MAX_CYCLE_SIZE = int(os.getenv("RSABREAK_MAX_CYCLE_SIZE", str(2**24)))
FACTOR_RETRIES = int(os.getenv("RSABREAK_FACTOR_RETRIES", "0"))

# ── Logging ────────────────────────────────────────
LOG_LEVEL = os.getenv("RSABREAK_LOG_LEVEL", "INFO").upper()

# ── HTTP ───────────────────────────────────────────
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("RSABREAK_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]
HOST = os.getenv("RSABREAK_HOST", "127.0.0.1")
PORT = int(os.getenv("RSABREAK_PORT", "8000"))
