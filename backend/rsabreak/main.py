import logging

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from rsabreak import __version__, config
from rsabreak.crypto.pollard import factorize
from rsabreak.crypto.rsa import PublicKey, break_key, decrypt, encrypt
from rsabreak.errors import FactorizationFailedError, InvalidInputError, NoInverseError, RsaBreakError

logger = logging.getLogger(__name__)

# Big integers travel as decimal strings
INT_PATTERN = "^[0-9]+$"
INT_MAX_DIGITS = 4096


app = FastAPI(
    title="RSA Break API",
    version=__version__,
)

# ── Security: CORS ───────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    allow_credentials=False,
)


# ── Security: HTTP headers ───────────────────────────────────
@app.middleware("http")
async def security_headers(request: Request, call_next):
    response: Response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["Cache-Control"] = "no-store"
    return response


class EncryptRequest(BaseModel):
    message: str = Field(pattern=INT_PATTERN, max_length=INT_MAX_DIGITS)
    e: str = Field(pattern=INT_PATTERN, max_length=INT_MAX_DIGITS)
    n: str = Field(pattern=INT_PATTERN, max_length=INT_MAX_DIGITS)


class DecryptRequest(BaseModel):
    ciphertext: str = Field(pattern=INT_PATTERN, max_length=INT_MAX_DIGITS)
    n: str = Field(pattern=INT_PATTERN, max_length=INT_MAX_DIGITS)
    e: str = Field(pattern=INT_PATTERN, max_length=INT_MAX_DIGITS)


class FactorRequest(BaseModel):
    n: str = Field(pattern=INT_PATTERN, max_length=INT_MAX_DIGITS)


class BreakRequest(BaseModel):
    n: str = Field(pattern=INT_PATTERN, max_length=INT_MAX_DIGITS)
    e: str = Field(pattern=INT_PATTERN, max_length=INT_MAX_DIGITS)


def to_http_error(exc: RsaBreakError) -> HTTPException:
    """Map a core error onto the HTTP status the API reports for it."""
    if isinstance(exc, InvalidInputError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, (FactorizationFailedError, NoInverseError)):
        return HTTPException(status_code=422, detail=str(exc))
    return HTTPException(status_code=500, detail="internal error")


@app.get("/health")
async def health() -> dict:
    """Liveness probe; also reports the active factorization bound."""
    return {"status": "ok", "max_cycle_size": config.MAX_CYCLE_SIZE}


# Factorization is CPU bound: plain `def` endpoints run in the thread pool.

@app.post("/rsa/encrypt")
def encrypt_message(payload: EncryptRequest):
    """Encrypt a raw integer message with the public key (n, e)."""
    n, e = int(payload.n), int(payload.e)
    try:
        cipher = encrypt(int(payload.message), e, n)
    except RsaBreakError as exc:
        raise to_http_error(exc) from exc
    return {"n": str(n), "e": str(e), "ciphertext": str(cipher)}


@app.post("/rsa/decrypt")
def decrypt_cipher(payload: DecryptRequest):
    """Decrypt a ciphertext knowing only the public key, by factoring n."""
    n, e = int(payload.n), int(payload.e)
    try:
        message = decrypt(int(payload.ciphertext), n, e)
    except RsaBreakError as exc:
        logger.info("decrypt rejected for n=%d: %s", n, exc)
        raise to_http_error(exc) from exc
    return {"n": str(n), "e": str(e), "plaintext": str(message)}


@app.post("/rsa/factor")
def factor_modulus(payload: FactorRequest):
    """Split n into its two prime factors with Pollard's rho."""
    n = int(payload.n)
    try:
        pair = factorize(n)
    except RsaBreakError as exc:
        logger.info("factor rejected for n=%d: %s", n, exc)
        raise to_http_error(exc) from exc
    return {"n": str(n), "p": str(pair.p), "q": str(pair.q)}


@app.post("/rsa/break")
def break_public_key(payload: BreakRequest):
    """Recover the private exponent d of the public key (n, e)."""
    n, e = int(payload.n), int(payload.e)
    try:
        broken = break_key(PublicKey(n=n, e=e))
    except RsaBreakError as exc:
        logger.info("break rejected for n=%d: %s", n, exc)
        raise to_http_error(exc) from exc
    return {
        "n": str(n),
        "e": str(e),
        "p": str(broken.factors.p),
        "q": str(broken.factors.q),
        "d": str(broken.private.d),
    }
