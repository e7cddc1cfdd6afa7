"""Command line front end: encrypt, decrypt, factor or break a weak RSA key."""

import argparse
import json
import logging
import sys

from rsabreak import config
from rsabreak.crypto.pollard import factorize
from rsabreak.crypto.rsa import PublicKey, break_key, decrypt, encrypt
from rsabreak.errors import RsaBreakError

logger = logging.getLogger(__name__)


def run_encrypt(args) -> dict:
    cipher = encrypt(args.message, args.e, args.n)
    return {"n": args.n, "e": args.e, "message": args.message, "ciphertext": cipher}


def run_decrypt(args) -> dict:
    message = decrypt(args.ciphertext, args.n, args.e, max_cycle_size=args.max_cycle_size, retries=args.retries)
    return {"n": args.n, "e": args.e, "ciphertext": args.ciphertext, "plaintext": message}


def run_factor(args) -> dict:
    pair = factorize(args.n, max_cycle_size=args.max_cycle_size, retries=args.retries)
    return {"n": args.n, "p": pair.p, "q": pair.q}


def run_break(args) -> dict:
    broken = break_key(PublicKey(n=args.n, e=args.e), max_cycle_size=args.max_cycle_size, retries=args.retries)
    return {"n": args.n, "e": args.e, "p": broken.factors.p, "q": broken.factors.q, "d": broken.private.d}


def run_serve(args) -> dict:
    import uvicorn

    uvicorn.run("rsabreak.main:app", host=args.host, port=args.port, log_level=config.LOG_LEVEL.lower())
    return {}


def _add_factor_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--max-cycle-size", type=int, default=config.MAX_CYCLE_SIZE,
                        help=f"Pollard rho cycle size bound (default: {config.MAX_CYCLE_SIZE})")
    parser.add_argument("--retries", type=int, default=config.FACTOR_RETRIES,
                        help="Extra attempts from random seeds when rho fails (default: %(default)s)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rsabreak", description="Break weak RSA keys with Pollard's rho.")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("encrypt", help="Encrypt a raw integer message")
    p.add_argument("-n", "--n", type=int, required=True, help="RSA modulus")
    p.add_argument("-e", "--e", type=int, required=True, help="Public exponent")
    p.add_argument("message", type=int)
    p.set_defaults(func=run_encrypt)

    p = sub.add_parser("decrypt", help="Decrypt a ciphertext by factoring n")
    p.add_argument("-n", "--n", type=int, required=True, help="RSA modulus")
    p.add_argument("-e", "--e", type=int, required=True, help="Public exponent")
    p.add_argument("ciphertext", type=int)
    _add_factor_options(p)
    p.set_defaults(func=run_decrypt)

    p = sub.add_parser("factor", help="Factor n into p and q")
    p.add_argument("n", type=int)
    _add_factor_options(p)
    p.set_defaults(func=run_factor)

    p = sub.add_parser("break", help="Recover the private exponent d")
    p.add_argument("-n", "--n", type=int, required=True, help="RSA modulus")
    p.add_argument("-e", "--e", type=int, required=True, help="Public exponent")
    _add_factor_options(p)
    p.set_defaults(func=run_break)

    p = sub.add_parser("serve", help="Run the HTTP API")
    p.add_argument("--host", default=config.HOST)
    p.add_argument("--port", type=int, default=config.PORT)
    p.set_defaults(func=run_serve)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        result = args.func(args)
    except RsaBreakError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({k: str(v) for k, v in result.items()}))
    else:
        for key, value in result.items():
            print(f"{key} = {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
