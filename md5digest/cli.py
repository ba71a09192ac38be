from __future__ import annotations

import argparse
import hashlib
import hmac
import sys
from pathlib import Path
from typing import List

from .api import MD5Hasher
from .config import HashConfig
from .errors import MD5DigestError
from .hmac_md5 import hmac_md5_bytes
from .md5 import md5_hex, self_test
from .text import TEXT_ENCODERS


def cmd_verify_core(_: argparse.Namespace) -> int:
    vectors = [
        b"",
        b"a",
        b"abc",
        b"message digest",
        b"abcdefghijklmnopqrstuvwxyz",
        b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
        b"1234567890" * 8,
    ]
    keys = [b"key", b"\x0b" * 16, b"\xaa" * 80]
    ok_all = True
    for m in vectors:
        ours = md5_hex(m)
        ref = hashlib.md5(m).hexdigest()
        status = "OK" if ours == ref else "FAIL"
        print(f"MD5('{m[:20] + (b'...' if len(m) > 20 else b'')}') -> {status}")
        if ours != ref:
            print(f"  ours={ours}\n  ref ={ref}")
            ok_all = False
        for k in keys:
            ours = hmac_md5_bytes(k, m).hex()
            ref = hmac.new(k, m, hashlib.md5).hexdigest()
            if ours != ref:
                print(f"HMAC-MD5(key={k[:8]!r}, '{m[:20]}') -> FAIL")
                print(f"  ours={ours}\n  ref ={ref}")
                ok_all = False
    print("verify-core:", "PASS" if ok_all else "FAIL")
    return 0 if ok_all else 1


def cmd_self_test(_: argparse.Namespace) -> int:
    ok = self_test()
    print("self-test:", "PASS" if ok else "FAIL")
    return 0 if ok else 1


def _read_text(ns: argparse.Namespace) -> str:
    if ns.file is not None:
        return Path(ns.file).read_text(encoding="utf-8")
    if ns.text is None:
        return sys.stdin.read()
    return ns.text


def cmd_digest(ns: argparse.Namespace) -> int:
    hasher = MD5Hasher(ns.config)
    text = _read_text(ns)
    if ns.cmd == "hex":
        print(hasher.hex(text))
    elif ns.cmd == "b64":
        print(hasher.b64(text))
    else:
        print(hasher.any(text, ns.alphabet))
    return 0


def cmd_hmac(ns: argparse.Namespace) -> int:
    hasher = MD5Hasher(ns.config)
    data = _read_text(ns)
    if ns.output == "hex":
        print(hasher.hmac_hex(ns.key, data))
    elif ns.output == "b64":
        print(hasher.hmac_b64(ns.key, data))
    else:
        if ns.alphabet is None:
            print("hmac: --alphabet is required with --output any")
            return 2
        print(hasher.hmac(ns.key, data, ns.alphabet))
    return 0


def cmd_salt_hash(ns: argparse.Namespace) -> int:
    print(MD5Hasher(ns.config).salt_hash(ns.plaintext, ns.salt))
    return 0


def cmd_full_hash(ns: argparse.Namespace) -> int:
    print(MD5Hasher(ns.config).full_hash(ns.plaintext, ns.salt, ns.challenge))
    return 0


def _add_input_args(sp: argparse.ArgumentParser) -> None:
    sp.add_argument("text", nargs="?", default=None, help="text to hash (stdin when omitted)")
    sp.add_argument("--file", "-f", type=str, default=None, help="read the text from a UTF-8 file")


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="md5digest")
    p.add_argument("--upper", action="store_true", help="uppercase hex output")
    p.add_argument("--pad", type=str, default=None, help="base64 pad character (default: none)")
    p.add_argument("--text-encoding", choices=sorted(TEXT_ENCODERS), default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    s1 = sub.add_parser("verify-core", help="compare MD5 and HMAC-MD5 against hashlib/hmac")
    s1.set_defaults(func=cmd_verify_core)

    s2 = sub.add_parser("self-test", help="check MD5('abc') against the known digest")
    s2.set_defaults(func=cmd_self_test)

    s3 = sub.add_parser("hex", help="MD5 as hex")
    _add_input_args(s3)
    s3.set_defaults(func=cmd_digest)

    s4 = sub.add_parser("b64", help="MD5 as base64")
    _add_input_args(s4)
    s4.set_defaults(func=cmd_digest)

    s5 = sub.add_parser("any", help="MD5 in a custom alphabet")
    s5.add_argument("--alphabet", "-a", type=str, required=True)
    _add_input_args(s5)
    s5.set_defaults(func=cmd_digest)

    s6 = sub.add_parser("hmac", help="HMAC-MD5 of the text under --key")
    s6.add_argument("--key", "-k", type=str, required=True)
    s6.add_argument("--output", choices=["hex", "b64", "any"], default="hex")
    s6.add_argument("--alphabet", "-a", type=str, default=None)
    _add_input_args(s6)
    s6.set_defaults(func=cmd_hmac)

    s7 = sub.add_parser("salt-hash", help="hmac_hex(plaintext, salt)")
    s7.add_argument("plaintext")
    s7.add_argument("salt")
    s7.set_defaults(func=cmd_salt_hash)

    s8 = sub.add_parser("full-hash", help="hmac_hex(hmac_hex(plaintext, salt), challenge)")
    s8.add_argument("plaintext")
    s8.add_argument("salt")
    s8.add_argument("challenge")
    s8.set_defaults(func=cmd_full_hash)

    args = p.parse_args(argv)
    try:
        config = HashConfig.from_env()
        overrides = {}
        if args.upper:
            overrides["hex_uppercase"] = True
        if args.pad is not None:
            overrides["b64_pad"] = args.pad
        if args.text_encoding is not None:
            overrides["text_encoding"] = args.text_encoding
        args.config = config.with_overrides(**overrides)
        return int(args.func(args))
    except MD5DigestError as e:
        print(f"{args.cmd}: {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
