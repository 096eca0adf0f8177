from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from contentid import CidError, HashAlgorithm, cid
from contentid.jsonutil import try_parse_json


def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog="contentid", description="Compute an IPFS-compatible CIDv1 (raw)")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("value", nargs="?", help="Literal input, or '-' for stdin")
    src.add_argument("--file", help="Read input bytes from a file")
    p.add_argument("--json", action="store_true", help="Parse the input as a JSON object (structured record)")
    p.add_argument(
        "--hash",
        default=HashAlgorithm.SHA2_256.value,
        choices=[a.value for a in HashAlgorithm],
        help="Hash algorithm (default sha2-256)",
    )
    p.add_argument("--base", help="Multibase: base32 or base58 (default: $CONTENTID_BASE or base32)")

    args = p.parse_args(argv)

    if args.file:
        data = Path(args.file).read_bytes()
    elif args.value == "-":
        data = sys.stdin.buffer.read()
    else:
        data = args.value.encode("utf-8")

    value = data
    if args.json:
        value, err = try_parse_json(data)
        if err is not None:
            print(f"invalid JSON input: {err}", file=sys.stderr)
            return 2

    try:
        out = cid(value, HashAlgorithm(args.hash), base=args.base)
    except CidError as e:
        print(json.dumps(e.to_dict()), flush=True)
        return 1
    print(json.dumps({"cid": out}), flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
