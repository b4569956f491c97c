from __future__ import annotations

import argparse
import functools
import json
import logging
import sys

from .arith import CoderOptions
from .codec import pack, unpack
from .errors import MalformedStreamError
from .examples import run_demo
from .interval import cascade
from .settings import ADAPTIVE
from .stats import compare, empirical_entropy, entropy_digits
from .utils import parse_prob, text_to_symbols

log = logging.getLogger("toyrc")


def _prob_arg(s: str) -> int:
    try:
        return parse_prob(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _trace_sink(enabled: bool):
    return functools.partial(print, file=sys.stderr) if enabled else None


def _read_text(args: argparse.Namespace) -> str:
    if (args.text is None) == (args.infile is None):
        raise ValueError("Provide exactly one of --text or --infile")
    if args.text is not None:
        return args.text
    with open(args.infile, "r", encoding="utf-8") as f:
        return f.read().strip()


def _cmd_encode(args: argparse.Namespace) -> int:
    text = _read_text(args)
    pkg = pack(text, args.prob, CoderOptions(trace=_trace_sink(args.trace)))
    out_json = json.dumps(pkg, indent=2)
    if args.out in ("-", None):
        print(out_json)
    else:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(out_json)
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    if args.infile in ("-", None):
        pkg = json.load(sys.stdin)
    else:
        with open(args.infile, "r", encoding="utf-8") as f:
            pkg = json.load(f)
    print(unpack(pkg, CoderOptions(trace=_trace_sink(args.trace))))
    return 0


def _cmd_cascade(args: argparse.Namespace) -> int:
    rows = cascade(args.prob, lo=args.lo, hi=args.hi)
    target = f"{int(10000 * args.lo):04d} .. {int(10000 * args.hi):04d}"
    for x0, x1, x2 in rows:
        print(f"{x0:04d} .. {x1:04d} .. {x2:04d}   compared to   {target}")
    return 0


def _cmd_stats(args: argparse.Namespace) -> int:
    symbols = text_to_symbols(_read_text(args))
    print(
        f"n={len(symbols)}  entropy={empirical_entropy(symbols):.4f} bits/symbol"
        f"  ({entropy_digits(symbols):.2f} digits)"
    )
    for row in compare(symbols):
        ideal = "" if row["ideal"] is None else f"   ideal: {row['ideal']:6.2f}"
        print(f"p = {row['label']}   digits: {row['digits']:3d}   final p: {row['final_p']:2d}{ideal}")
    return 0


def _cmd_demo(args: argparse.Namespace) -> int:
    run_demo()
    return 0


def _add_text_args(ap: argparse.ArgumentParser):
    ap.add_argument("--text", type=str, help="Input text of 'b'/'g' letters")
    ap.add_argument("--infile", type=str, help="Read text from file (mutually exclusive)")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="toyrc", description="Toy decimal range coder")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    enc = sub.add_parser("encode", help="Encode b/g text to a JSON package")
    _add_text_args(enc)
    enc.add_argument("--prob", type=_prob_arg, default=ADAPTIVE, help="1..15 (in 16ths) or 'adaptive'")
    enc.add_argument("--out", type=str, default="-", help="JSON output (or '-')")
    enc.add_argument("--trace", action="store_true", help="Print the coder trace to stderr")
    enc.set_defaults(func=_cmd_encode)

    dec = sub.add_parser("decode", help="Decode a JSON package to b/g text")
    dec.add_argument("--in", dest="infile", type=str, default="-", help="JSON input (or '-')")
    dec.add_argument("--trace", action="store_true", help="Print the coder trace to stderr")
    dec.set_defaults(func=_cmd_decode)

    cas = sub.add_parser("cascade", help="Print the interval narrowing rows")
    cas.add_argument("--prob", type=int, default=5000, help="Split weight in 1/10000ths")
    cas.add_argument("--lo", type=float, default=0.83)
    cas.add_argument("--hi", type=float, default=0.84)
    cas.set_defaults(func=_cmd_cascade)

    st = sub.add_parser("stats", help="Compare coded sizes across probabilities")
    _add_text_args(st)
    st.set_defaults(func=_cmd_stats)

    demo = sub.add_parser("demo", help="Run the blog post demo")
    demo.set_defaults(func=_cmd_demo)

    ns = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.WARNING, format="%(name)s: %(message)s")
    try:
        return int(ns.func(ns))
    except MalformedStreamError as exc:
        print(f"malformed stream: {exc}", file=sys.stderr)
        return 1
    except (ValueError, KeyError, OSError) as exc:
        log.debug("command %s failed", ns.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


def encode_main(argv=None):
    return main(["encode", *(argv if argv is not None else sys.argv[1:])])


def decode_main(argv=None):
    return main(["decode", *(argv if argv is not None else sys.argv[1:])])


if __name__ == "__main__":
    raise SystemExit(main())
