#!/usr/bin/env python3
import argparse
import logging
import sys

from polynomial import DEFAULT_FACTOR_BOUND, DEFAULT_LETTER, Polynomial


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Exact polynomial arithmetic over the rationals.")
    parser.add_argument("expression", help="polynomial to work on, e.g. 'x^2-5x+6'")
    parser.add_argument("-d", "--divide", metavar="DIVISOR", default=None,
                        help="print quotient and remainder of the division by DIVISOR")
    parser.add_argument("-b", "--bound", metavar="N", type=int, default=DEFAULT_FACTOR_BOUND,
                        help="search bound for linear factors (default: %(default)s)")
    parser.add_argument("-l", "--letter", default=DEFAULT_LETTER,
                        help="variable used for factors and derivatives (default: %(default)s)")
    parser.add_argument("--tex", action="store_true", help="print TeX instead of plain text")
    parser.add_argument("-v", "--verbose", action="store_true", help="log diagnostics")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    def show(P: Polynomial) -> str:
        return P.tex if args.tex else P.display

    try:
        P = Polynomial.parse(args.expression)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"polynomial: {show(P)}")
    if args.divide is not None:
        D = Polynomial.parse(args.divide)
        try:
            quotient, remainder = P.euclidian(D)
        except ZeroDivisionError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(f"quotient:   {show(quotient)}")
        print(f"remainder:  {show(remainder)}")
        return 0

    factors = P.factorize(args.bound, args.letter)
    print("factors:    " + " * ".join(show(F) if F.length == 1 else f"({show(F)})" for F in factors))
    zeroes = P.get_zeroes()
    print("zeroes:     " + ", ".join(str(z) for z in zeroes))
    print(f"derivative: {show(P.derivative(args.letter))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
