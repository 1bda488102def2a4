from __future__ import annotations

import argparse
import sys
from dataclasses import asdict
from typing import Optional

from ifsc import IFSCDirectory, IFSCError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate and resolve IFSC codes against a local dataset directory.")
    parser.add_argument(
        "--data-dir",
        required=True,
        help="Directory holding IFSC.json, banknames.json, banks.json, sublet.json and custom-sublets.json.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("validate", help="Check that an IFSC exists.")
    p.add_argument("code")

    p = sub.add_parser("name", help="Resolve a bank code or IFSC to a bank name.")
    p.add_argument("code")

    p = sub.add_parser("codes", help="List bank codes registered under a bank name.")
    p.add_argument("bank_name")

    p = sub.add_parser("ifscs", help="List representative IFSCs for a bank name.")
    p.add_argument("bank_name")

    p = sub.add_parser("check", help="Check that an IFSC belongs to a bank name.")
    p.add_argument("bank_name")
    p.add_argument("ifsc")

    p = sub.add_parser("details", help="Show bank details for a bank code.")
    p.add_argument("bank_code")

    return parser


def run(directory: IFSCDirectory, args: argparse.Namespace) -> int:
    if args.command == "validate":
        ok = directory.validate(args.code)
        print(f"{args.code}: {'valid' if ok else 'invalid'}")
        return 0 if ok else 1

    if args.command == "name":
        print(directory.get_bank_name(args.code))
        return 0

    if args.command == "codes":
        for code in directory.get_bank_codes(args.bank_name):
            print(code)
        return 0

    if args.command == "ifscs":
        for ifsc in directory.get_ifscs_by_bank_name(args.bank_name):
            print(ifsc)
        return 0

    if args.command == "check":
        ok = directory.validate_ifsc_for_bank(args.bank_name, args.ifsc)
        print(f"{args.ifsc} {'belongs' if ok else 'does not belong'} to {args.bank_name}")
        return 0 if ok else 1

    if args.command == "details":
        details = directory.get_bank_details(args.bank_code)
        if details is None:
            print(f"[ifsc_lookup] No bank details for {args.bank_code}")
            return 1
        for key, value in asdict(details).items():
            print(f"{key}: {value}")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        directory = IFSCDirectory.from_directory(args.data_dir)
        return run(directory, args)
    except IFSCError as e:
        print(f"[ifsc_lookup] ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
