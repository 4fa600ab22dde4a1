from __future__ import annotations

import argparse
import json
import logging

from .api import load_table, token_offsets
from .spans import Position


def _position(s: str) -> Position:
    line, sep, column = s.partition(":")
    try:
        if not sep:
            raise ValueError(s)
        return Position(line=int(line), column=int(column))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LINE:COLUMN, got {s!r}") from None


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="srcoffsets", description="Resolve line:column positions to UTF-8 byte offsets"
    )
    ap.add_argument("file", help="Source file")
    ap.add_argument(
        "positions",
        nargs="*",
        type=_position,
        metavar="LINE:COLUMN",
        help="Position with 1-based line and 0-based code point column",
    )
    ap.add_argument("--tokens", action="store_true", help="Lex the file and print token byte ranges")
    ap.add_argument("--json", action="store_true", help="Print results as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    table = load_table(args.file)
    offsets = [(p, table.offset(p)) for p in args.positions]
    toks = []
    if args.tokens:
        toks = token_offsets(table.text.decode("utf-8"), file=args.file, table=table)

    if args.json:
        payload: dict[str, object] = {
            "file": args.file,
            "lines": table.line_count,
            "bytes": len(table.text),
            "positions": [
                {"line": p.line, "column": p.column, "offset": off} for p, off in offsets
            ],
        }
        if args.tokens:
            payload["tokens"] = [
                {"kind": tok.kind.name, "lexeme": tok.lexeme, "start": start, "end": end}
                for tok, start, end in toks
            ]
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        for p, off in offsets:
            print(f"{p.format()}\t{off}")
        for tok, start, end in toks:
            print(f"{tok.span.start.format()}\t{start}-{end}\t{tok.kind.name}\t{tok.lexeme!r}")
    return 0
