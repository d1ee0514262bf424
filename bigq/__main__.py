#!/usr/bin/env python3
##############################################################################
##                                                                          ##
##                                PYBIGQ                                    ##
##                                                                          ##
##              Copyright (C) 2019,      Florian Schanda                    ##
##                                                                          ##
##  This file is part of PyBigQ.                                            ##
##                                                                          ##
##  PyBigQ is free software: you can redistribute it and/or modify          ##
##  it under the terms of the GNU General Public License as published by    ##
##  the Free Software Foundation, either version 3 of the License, or       ##
##  (at your option) any later version.                                     ##
##                                                                          ##
##  PyBigQ is distributed in the hope that it will be useful,               ##
##  but WITHOUT ANY WARRANTY; without even the implied warranty of          ##
##  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the           ##
##  GNU General Public License for more details.                            ##
##                                                                          ##
##  You should have received a copy of the GNU General Public License       ##
##  along with PyBigQ. If not, see <http://www.gnu.org/licenses/>.          ##
##                                                                          ##
##############################################################################

# Small calculator on top of the rationals. For example:
#
#    python3 -m bigq 1/2 + 1/3        prints 5/6
#    python3 -m bigq 1/2 in 1/3..2/3  prints true
#    python3 -m bigq 1/2 + -1/3       prints 1/6
#
# The flags come first. Everything after them is an operand, so
# negative rationals such as -1/3 are never taken for options.

import sys
import argparse
import operator

from .rationals import (Rational, Invalid_Argument, Parse_Error,
                        div_by, q_from_int64, q_from_string)

TYP_RATIONAL = "rational"
TYP_BOOL     = "boolean"

Q_OPS = {
    "+"  : {"fn" : operator.add, "result" : TYP_RATIONAL},
    "-"  : {"fn" : operator.sub, "result" : TYP_RATIONAL},
    "*"  : {"fn" : operator.mul, "result" : TYP_RATIONAL},
    "/"  : {"fn" : operator.truediv, "result" : TYP_RATIONAL},
    "<"  : {"fn" : operator.lt, "result" : TYP_BOOL},
    "<=" : {"fn" : operator.le, "result" : TYP_BOOL},
    ">"  : {"fn" : operator.gt, "result" : TYP_BOOL},
    ">=" : {"fn" : operator.ge, "result" : TYP_BOOL},
    "==" : {"fn" : operator.eq, "result" : TYP_BOOL},
    "!=" : {"fn" : operator.ne, "result" : TYP_BOOL},
    "in" : {"fn" : None, "result" : TYP_BOOL},
}

RANGE_SEPARATOR = ".."

OPTION_FLAGS = ("-h", "--help", "--verbose", "--demo")

def pp_bool(b):
    return "true" if b else "false"

def parse_range(text):
    if RANGE_SEPARATOR not in text:
        raise Parse_Error("%r is not a range, expected LOW..HIGH" % text)
    low, high = text.split(RANGE_SEPARATOR, 1)
    return q_from_string(low).range_to(q_from_string(high))

def demo_scenarios():
    """The classic worked examples, as (description, outcome) pairs"""
    half      = div_by(1, 2)
    third     = div_by(1, 3)
    two_third = div_by(2, 3)

    big_n = int("912016490186296920119201192141970416029")
    big_d = int("1824032980372593840238402384283940832058")

    return [
        ("1/2 + 1/3 == 5/6",  half + third == div_by(5, 6)),
        ("1/2 - 1/3 == 1/6",  half - third == div_by(1, 6)),
        ("1/2 * 1/3 == 1/6",  half * third == div_by(1, 6)),
        ("1/2 / 1/3 == 3/2",  half / third == div_by(3, 2)),
        ("-(1/2) == -1/2",    -half == div_by(-1, 2)),
        ('2/1 is "2"',        str(div_by(2, 1)) == "2"),
        ('-2/4 is "-1/2"',    str(div_by(-2, 4)) == "-1/2"),
        ('117/1098 is "13/122"',
         str(q_from_string("117/1098")) == "13/122"),
        ("1/2 < 2/3",         half < two_third),
        ("1/2 in [1/3 .. 2/3]", half in third.range_to(two_third)),
        ("2000000000/4000000000 == 1/2",
         q_from_int64(2000000000, 4000000000) == div_by(1, 2)),
        ("%i/%i == 1/2" % (big_n, big_d),
         div_by(big_n, big_d) == div_by(1, 2)),
    ]

def evaluate(left, op, right, verbose=False):
    """Evaluate LEFT OP RIGHT, all given as strings

    Returns the printable result.
    """
    if op not in Q_OPS:
        raise Parse_Error("unknown operator %r" % op)

    lhs = q_from_string(left)
    if op == "in":
        rhs = parse_range(right)
    else:
        rhs = q_from_string(right)

    if verbose:
        print("> left  : %r" % lhs, file=sys.stderr)
        print("> right : %r" % rhs, file=sys.stderr)

    if op == "in":
        result = lhs in rhs
    else:
        result = Q_OPS[op]["fn"](lhs, rhs)

    if Q_OPS[op]["result"] == TYP_BOOL:
        return pp_bool(result)
    else:
        assert isinstance(result, Rational)
        return str(result)

def operands_after_flags(argv):
    """Insert "--" between the leading flags and the operands"""
    n = 0
    while n < len(argv) and argv[n] in OPTION_FLAGS:
        n += 1
    if n == len(argv) or "--" in argv:
        return list(argv)
    return argv[:n] + ["--"] + argv[n:]

def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    ap = argparse.ArgumentParser(
        prog="bigq",
        description="Exact rational arithmetic.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    ap.add_argument("--verbose",
                    default=False,
                    action="store_true",
                    help="Show the parsed operands on stderr.")
    ap.add_argument("--demo",
                    default=False,
                    action="store_true",
                    help="Run the worked examples and print the outcomes.")
    ap.add_argument("left", nargs="?",
                    help="Rational, e.g. 1/2 or -3.")
    ap.add_argument("op", nargs="?",
                    choices=sorted(Q_OPS),
                    help="Operator.")
    ap.add_argument("right", nargs="?",
                    help="Rational, or LOW..HIGH for 'in'.")
    options = ap.parse_args(operands_after_flags(argv))

    if options.demo:
        for description, outcome in demo_scenarios():
            if options.verbose:
                print("> %s" % description, file=sys.stderr)
            print(pp_bool(outcome))
        return 0

    if options.left is None:
        ap.error("a rational is required unless --demo is given")
    if (options.op is None) != (options.right is None):
        ap.error("an operator needs a right-hand side")

    try:
        if options.op is None:
            print(q_from_string(options.left))
        else:
            print(evaluate(options.left, options.op, options.right,
                           options.verbose))
    except (Parse_Error, Invalid_Argument) as e:
        print("bigq: error: %s" % e, file=sys.stderr)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
