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

# Closed intervals for rationals. Both bounds are always included, and
# there is no special handling for reversed bounds: if low > high the
# interval is simply empty.
#
# Representation uses the "German" method, i.e. "[ 1/3 .. 2/3 ]" is
# the interval between 1/3 and 2/3, including both.

class Interval:
    """Closed interval [*low* .. *high*] of rationals"""
    def __init__(self, low, high):
        self.low  = low
        self.high = high

    def __str__(self):
        return "[ %s .. %s ]" % (self.low, self.high)

    def __repr__(self):
        return "Interval(%r, %r)" % (self.low, self.high)

    def __contains__(self, q):
        if not isinstance(q, type(self.low)):
            return False
        return self.low.compare(q) <= 0 and q.compare(self.high) <= 0

    def is_empty(self):
        return self.low.compare(self.high) > 0
