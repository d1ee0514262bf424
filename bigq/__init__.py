from .rationals import (Rational,
                        Invalid_Argument,
                        Parse_Error,
                        Internal_Consistency,
                        div_by,
                        q_from_int32,
                        q_from_int64,
                        q_from_string)
from .interval_q import Interval
