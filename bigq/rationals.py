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

"""
This module defines an immutable class to deal with exact rational
numbers. Numerator and denominator are python ints, so there is no
limit on their magnitude.

Every value is reduced to lowest terms when it is created:

>>> str(Rational(117, 1098))
'13/122'
>>> Rational(2000000000, 4000000000) == Rational(1, 2)
True
"""

import re
from math import gcd

from .interval_q import Interval

DEBUG_NORMALISATION = False

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")

##############################################################################
# Errors
##############################################################################

class Invalid_Argument(ValueError):
    pass

class Parse_Error(ValueError):
    pass

class Internal_Consistency(Exception):
    pass

def sign(x):
    """Sign of an int, one of -1, 0 or 1"""
    return (x > 0) - (x < 0)

##############################################################################
# Rationals
##############################################################################

class Rational:
    """Rational number

    *n* is the numerator

    *d* is the denominator, it must not be 0

    Both are kept as supplied in :attr:`numerator` and
    :attr:`denominator`. The reduced pair is stored in
    :attr:`normalized_numerator` and :attr:`normalized_denominator`;
    there the sign is always carried by the numerator, so the
    normalized denominator is positive.
    """
    __slots__ = ("numerator",
                 "denominator",
                 "gcd",
                 "numerator_sign",
                 "denominator_sign",
                 "is_positive",
                 "normalized_numerator",
                 "normalized_denominator")

    def __init__(self, n=0, d=1):
        assert isinstance(n, int) and not isinstance(n, bool)
        assert isinstance(d, int) and not isinstance(d, bool)

        if d == 0:
            raise Invalid_Argument("denominator of %i/%i is zero" % (n, d))

        g = gcd(n, d)
        assert g > 0
        nn = n // g
        nd = d // g
        if nd < 0:
            nn = -nn
            nd = -nd

        init = object.__setattr__
        init(self, "numerator", n)
        init(self, "denominator", d)
        init(self, "gcd", g)
        init(self, "numerator_sign", sign(n))
        init(self, "denominator_sign", sign(d))
        init(self, "is_positive", sign(n) * sign(d) == 1)
        init(self, "normalized_numerator", nn)
        init(self, "normalized_denominator", nd)

        if DEBUG_NORMALISATION:
            print("> normalise : %i/%i -> %i/%i (gcd %u)" % (n, d, nn, nd, g))

    @classmethod
    def normalize(cls, n, d):
        """Construct from a pair reduced by its gcd up front

        Gives the same value as plain construction.
        """
        if d == 0:
            raise Invalid_Argument("denominator of %i/%i is zero" % (n, d))
        g = gcd(n, d)
        return cls(n // g, d // g)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    def __delattr__(self, name):
        raise AttributeError("Rational is immutable")

    ######################################################################
    # Arithmetic

    def __add__(self, other):
        """Addition"""
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(self.numerator * other.denominator +
                        other.numerator * self.denominator,
                        self.denominator * other.denominator)

    def __sub__(self, other):
        """Substraction"""
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(self.numerator * other.denominator -
                        other.numerator * self.denominator,
                        self.denominator * other.denominator)

    def __mul__(self, other):
        """Multiplication"""
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(self.numerator * other.numerator,
                        self.denominator * other.denominator)

    def __truediv__(self, other):
        """Division

        Raises :class:`Invalid_Argument` when *other* is zero.
        """
        if not isinstance(other, Rational):
            return NotImplemented
        if other.numerator == 0:
            raise Invalid_Argument("division of %s by zero" % self)
        return Rational(self.numerator * other.denominator,
                        self.denominator * other.numerator)

    def __neg__(self):
        """Negation"""
        return Rational(-self.numerator, self.denominator)

    def __pos__(self):
        return self

    def __abs__(self):
        """Absolute value"""
        return Rational(abs(self.normalized_numerator),
                        self.normalized_denominator)

    ######################################################################
    # Ordering and equality

    def compare(self, other):
        """Three-way comparison

        Returns -1, 0 or 1 when *self* is smaller than, equal to or
        greater than *other*.
        """
        assert isinstance(other, Rational)
        lhs = self.normalized_numerator * other.normalized_denominator
        rhs = other.normalized_numerator * self.normalized_denominator
        return sign(lhs - rhs)

    def __lt__(self, other):
        """<"""
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        """<="""
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        """>"""
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        """>="""
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) >= 0

    def magnitudes(self):
        """Sign-adjusted magnitudes of the reduced pair

        Returns the tuple (abs(n), abs(d)). Together with
        :attr:`is_positive` this identifies the value, so 1/2 and
        -1/-2 are the same number.
        """
        return (self.normalized_numerator * sign(self.normalized_numerator),
                self.normalized_denominator)

    def __eq__(self, other):
        """Equality"""
        if not isinstance(other, Rational):
            return NotImplemented
        return (self.is_positive == other.is_positive and
                self.magnitudes() == other.magnitudes())

    def __ne__(self, other):
        """Inequality"""
        if not isinstance(other, Rational):
            return NotImplemented
        return not self == other

    def __hash__(self):
        n, d = self.magnitudes()
        result = 17
        result = 31 * result + hash(n)
        result = 31 * result + hash(d)
        return hash(result)

    def range_to(self, end):
        """Closed interval [self .. end]"""
        return Interval(self, end)

    ######################################################################
    # Predicates

    def isZero(self):
        """Test if zero"""
        return self.normalized_numerator == 0

    def isNegative(self):
        """Test if negative

        Returns false for 0.
        """
        return self.normalized_numerator < 0

    def isIntegral(self):
        """Test if integral"""
        return self.normalized_denominator == 1

    ######################################################################
    # Conversion

    def __repr__(self):
        if self.normalized_denominator == 1:
            return "Rational(%i)" % self.normalized_numerator
        else:
            return "Rational(%i, %i)" % (self.normalized_numerator,
                                         self.normalized_denominator)

    def __str__(self):
        """Canonical string, e.g. "-1/2" or "3" """
        n = self.normalized_numerator
        d = self.normalized_denominator
        if d == 1:
            return "%i" % n
        elif d > 0:
            return "%i/%i" % (n, d)
        elif d < 0:
            return "%i/%i" % (-n, -d)
        else:
            raise Internal_Consistency("normalised denominator of %i/%i is 0" %
                                       (self.numerator, self.denominator))

##############################################################################
# Constructors
##############################################################################

def div_by(n, d):
    """Create rational for n / d"""
    return Rational(n, d)

def q_from_fixed_width(n, d, low, high):
    """Create rational for n / d where both must lie in [low, high]"""
    for value in (n, d):
        if not low <= value <= high:
            raise Invalid_Argument("%i does not fit in [%i, %i]" %
                                   (value, low, high))
    return Rational(n, d)

def q_from_int32(n, d=1):
    """Create rational from two signed 32-bit integers"""
    return q_from_fixed_width(n, d, INT32_MIN, INT32_MAX)

def q_from_int64(n, d=1):
    """Create rational from two signed 64-bit integers"""
    return q_from_fixed_width(n, d, INT64_MIN, INT64_MAX)

def q_from_string(text):
    """Parse a rational

    Accepts "<int>/<int>" or "<int>", where <int> is an optionally
    signed decimal literal. The text is split on the first "/".

    >>> str(q_from_string("-2/4"))
    '-1/2'
    """
    assert isinstance(text, str)

    if "/" in text:
        numerator, denominator = text.split("/", 1)
    else:
        numerator, denominator = text, "1"

    for part in (numerator, denominator):
        if INTEGER_LITERAL.fullmatch(part) is None:
            raise Parse_Error("%r is not a rational literal" % text)

    return Rational(int(numerator, 10), int(denominator, 10))
