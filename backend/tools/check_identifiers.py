from __future__ import annotations

import argparse
import csv
import os
import sys
from typing import Iterable, List, Optional, Sequence

from mabank.parsers.identifiers import normalize_iban
from mabank.services.resolver import resolve_bank, resolve_swift
from mabank.validations import validate_iban, validate_rib

HEADER = ["value", "kind", "valid", "bank_code", "swift"]


def detect_kind(value: str) -> str:
    return "iban" if normalize_iban(value).startswith("MA") else "rib"


def check_one(value: str, kind: str = "auto") -> List[str]:
    k = detect_kind(value) if kind == "auto" else kind
    ok = validate_iban(value) if k == "iban" else validate_rib(value)
    bank = resolve_bank(value) if ok else None
    swift = resolve_swift(value) if bank else None
    return [value, k, "true" if ok else "false", bank.code if bank else "", swift or ""]


def _read_values(path: str) -> Iterable[str]:
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            s = line.strip()
            if s and not s.startswith("#"):
                yield s


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Validate Moroccan IBAN/RIB identifiers and resolve their SWIFT code")
    ap.add_argument("values", nargs="*", help="Identifiers to check")
    ap.add_argument("--file", help="Text file with one identifier per line")
    ap.add_argument("--kind", choices=["auto", "iban", "rib"], default="auto")
    ap.add_argument("--out", help="CSV output path (default: stdout)")
    args = ap.parse_args(argv)

    values: List[str] = list(args.values)
    if args.file:
        values.extend(_read_values(args.file))
    if not values:
        ap.error("no identifiers given")

    rows = [check_one(v, args.kind) for v in values]
    if args.out:
        os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
        with open(args.out, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(HEADER)
            w.writerows(rows)
    else:
        w = csv.writer(sys.stdout)
        w.writerow(HEADER)
        w.writerows(rows)
    # Non-zero exit when anything failed validation
    return 0 if all(r[2] == "true" for r in rows) else 1


if __name__ == "__main__":
    raise SystemExit(main())
