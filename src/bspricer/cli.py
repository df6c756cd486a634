import argparse
import logging
import sys

from .core import CALL, PUT, LONG, SHORT, MathError
from .black_scholes import price as bs_price
from .valuation import break_even_point, payoff

logger = logging.getLogger(__name__)


def _kind(s: str):
    s = s.lower()
    if s in {"call", "c"}:
        return CALL
    if s in {"put", "p"}:
        return PUT
    raise argparse.ArgumentTypeError("kind must be 'call' or 'put'")


def _position(s: str):
    s = s.lower()
    if s in {"long", "l"}:
        return LONG
    if s in {"short", "s"}:
        return SHORT
    raise argparse.ArgumentTypeError("position must be 'long' or 'short'")


def cmd_bs(args):
    px = bs_price(args.kind, args.K, args.S0, args.r, args.sigma, args.T, args.q)
    print(f"{px:.10f}")


def cmd_breakeven(args):
    print(f"{break_even_point(args.kind, args.K, args.premium):.10f}")


def cmd_payoff(args):
    print(f"{payoff(args.position, args.kind, args.K, args.S0, args.premium):.10f}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bspricer", description="Vanilla option pricing CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # BS
    p_bs = sub.add_parser("bs", help="Black-Scholes price")
    p_bs.add_argument("--K", type=float, required=True, help="strike")
    p_bs.add_argument("--S0", type=float, required=True, help="underlying price")
    p_bs.add_argument("--r", type=float, required=True, help="cont. risk-free")
    p_bs.add_argument("--sigma", type=float, required=True)
    p_bs.add_argument("--T", type=float, required=True, help="years")
    p_bs.add_argument("--q", type=float, default=None, help="cont. dividend yield")
    p_bs.add_argument("--kind", type=_kind, default=CALL, help="call|put")
    p_bs.set_defaults(func=cmd_bs)

    # Break-even
    p_be = sub.add_parser("breakeven", help="break-even underlying price")
    p_be.add_argument("--K", type=float, required=True, help="strike")
    p_be.add_argument("--premium", type=float, default=None)
    p_be.add_argument("--kind", type=_kind, default=CALL, help="call|put")
    p_be.set_defaults(func=cmd_breakeven)

    # Payoff
    p_po = sub.add_parser("payoff", help="position profit/loss at S0")
    p_po.add_argument("--K", type=float, required=True, help="strike")
    p_po.add_argument("--S0", type=float, required=True, help="underlying price")
    p_po.add_argument("--premium", type=float, default=None)
    p_po.add_argument("--kind", type=_kind, default=CALL, help="call|put")
    p_po.add_argument("--position", type=_position, default=LONG, help="long|short")
    p_po.set_defaults(func=cmd_payoff)

    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    try:
        args.func(args)
    except MathError as e:
        logger.debug("%s rejected input", args.cmd)
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
