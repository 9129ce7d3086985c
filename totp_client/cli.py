#!/usr/bin/env python3
"""
cli.py — command-line wrapper around totp_client.

Subcommands:
- secret    : generate a new secret, print it grouped and (optionally) its URI
- code      : print the TOTP code for a secret (``--watch`` refreshes live)
- uri       : print the otpauth:// URI for a secret
- remaining : seconds left in the current period
- verify    : check a code locally (exit 0 = valid, 1 = invalid)

Nothing is written to disk; pass the secret on the command line or use
'-' to read it from stdin.

eg..:
    totp-client secret --issuer KinCode --account alice
    totp-client code JBSWY3DPEHPK3PXP --digits 8 --period 60
    totp-client code - --watch < secret.txt
    totp-client verify JBSWY3DPEHPK3PXP 123456 --window 1
"""

import argparse
import logging
import sys
import time

from totp_client import (
    build_uri,
    format_secret,
    generate_code,
    generate_secret,
    get_remaining_seconds,
    verify_code,
)
from totp_client.config import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_PERIOD, SECRET_BYTES
from totp_client.exceptions import TOTPError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_CODE = 1
EXIT_USAGE = 2


def _read_secret(value: str) -> str:
    if value == "-":
        return sys.stdin.readline().strip()
    return value


# --- CLI command handlers ---
def cmd_secret(args) -> int:
    secret = generate_secret(args.length)
    logger.debug("Generated %d-bit secret", args.length * 8)
    print(f"[*] Secret:    {secret}")
    print(f"[*] Formatted: {format_secret(secret)}")
    if args.account:
        uri = build_uri(
            secret=secret, issuer=args.issuer, account=args.account,
            digits=args.digits, period=args.period,
        )
        print(f"[*] URI:       {uri}")
    return EXIT_OK


def cmd_code(args) -> int:
    secret = _read_secret(args.secret)
    if not args.watch:
        code = generate_code(secret, args.timestamp_ms, args.period, args.digits)
        if args.timestamp_ms is None:
            remaining = get_remaining_seconds(args.period)
            print(f"TOTP ({args.digits}d): {code}  (valid ~{remaining:2d}s)")
        else:
            print(f"TOTP ({args.digits}d): {code}")
        return EXIT_OK

    print(f"Press Ctrl+C to quit. Generating {args.digits}-digit TOTP every {args.period}s...\n")
    last_code = None
    try:
        while True:
            code = generate_code(secret, period=args.period, digits=args.digits)
            remaining = get_remaining_seconds(args.period)
            if code != last_code:
                print(f"TOTP ({args.digits}d): {code}  (valid ~{remaining:2d}s)")
                last_code = code
            else:
                print(f".. {remaining:2d}s left", end='\r', flush=True)
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nBye.")
    return EXIT_OK


def cmd_uri(args) -> int:
    secret = _read_secret(args.secret)
    print(build_uri(
        secret=secret, issuer=args.issuer, account=args.account,
        digits=args.digits, period=args.period, algorithm=args.algorithm,
    ))
    return EXIT_OK


def cmd_remaining(args) -> int:
    print(get_remaining_seconds(args.period))
    return EXIT_OK


def cmd_verify(args) -> int:
    secret = _read_secret(args.secret)
    ok = verify_code(
        secret, args.code,
        period=args.period, digits=args.digits, window=args.window,
    )
    if ok:
        print("[+] TOTP code is VALID")
        return EXIT_OK
    print("[-] TOTP code is INVALID")
    return EXIT_INVALID_CODE


def cmd_help(args) -> int:
    print("'totp-client -h' for help.")
    return EXIT_USAGE


# --- Argparse builder ---
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="totp-client", description="Client-side TOTP (RFC 6238) toolkit")
    p.add_argument("--verbose", action="store_true", help="Verbose (DEBUG) logging")
    sub = p.add_subparsers(dest="cmd")
    p.set_defaults(func=cmd_help)

    # secret
    ps = sub.add_parser("secret", help="Generate a new Base32 secret")
    ps.add_argument("--length", type=int, default=SECRET_BYTES, help="Secret size in bytes")
    ps.add_argument("--account", help="Account label; prints the otpauth URI when given")
    ps.add_argument("--issuer", default="", help="Issuer label for the otpauth URI")
    ps.add_argument("--digits", type=int, default=DEFAULT_DIGITS, help="Number of OTP digits")
    ps.add_argument("--period", type=int, default=DEFAULT_PERIOD, help="TOTP time step (seconds)")
    ps.set_defaults(func=cmd_secret)

    # code
    pc = sub.add_parser("code", help="Print the TOTP code for a secret")
    pc.add_argument("secret", help="Base32 secret, or '-' to read it from stdin")
    pc.add_argument("--timestamp-ms", type=int, help="Unix time in milliseconds (default: now)")
    pc.add_argument("--digits", type=int, default=DEFAULT_DIGITS)
    pc.add_argument("--period", type=int, default=DEFAULT_PERIOD)
    pc.add_argument("--watch", action="store_true", help="Refresh every second until Ctrl+C")
    pc.set_defaults(func=cmd_code)

    # uri
    pu = sub.add_parser("uri", help="Print the otpauth URI for a secret")
    pu.add_argument("secret", help="Base32 secret, or '-' to read it from stdin")
    pu.add_argument("--account", required=True)
    pu.add_argument("--issuer", default="")
    pu.add_argument("--digits", type=int, default=DEFAULT_DIGITS)
    pu.add_argument("--period", type=int, default=DEFAULT_PERIOD)
    pu.add_argument("--algorithm", default=DEFAULT_ALGORITHM)
    pu.set_defaults(func=cmd_uri)

    # remaining
    pr = sub.add_parser("remaining", help="Seconds left in the current period")
    pr.add_argument("--period", type=int, default=DEFAULT_PERIOD)
    pr.set_defaults(func=cmd_remaining)

    # verify
    pv = sub.add_parser("verify", help="Verify a TOTP code locally")
    pv.add_argument("secret", help="Base32 secret, or '-' to read it from stdin")
    pv.add_argument("code", help="OTP code to verify")
    pv.add_argument("--digits", type=int, default=DEFAULT_DIGITS)
    pv.add_argument("--period", type=int, default=DEFAULT_PERIOD)
    pv.add_argument("--window", type=int, default=1, help="Allowed +/- step window")
    pv.set_defaults(func=cmd_verify)

    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    try:
        return args.func(args)
    except TOTPError as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"[!] {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
