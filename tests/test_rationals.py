import pytest

# The things we're testing
from bigq import rationals
from bigq.rationals import *

def test_scenario_arithmetic():
    half  = div_by(1, 2)
    third = div_by(1, 3)

    assert half + third == div_by(5, 6)
    assert half - third == div_by(1, 6)
    assert half * third == div_by(1, 6)
    assert half / third == div_by(3, 2)
    assert -half == div_by(-1, 2)

def test_scenario_formatting():
    assert str(div_by(2, 1)) == "2"
    assert str(div_by(-2, 4)) == "-1/2"
    assert str(q_from_string("117/1098")) == "13/122"

def test_scenario_ordering():
    assert div_by(1, 2) < div_by(2, 3)
    assert div_by(1, 2) in div_by(1, 3).range_to(div_by(2, 3))

def test_scenario_large_magnitudes():
    assert div_by(2000000000, 4000000000) == div_by(1, 2)
    assert q_from_int64(2000000000, 4000000000) == div_by(1, 2)

    big_n = int("912016490186296920119201192141970416029")
    big_d = int("1824032980372593840238402384283940832058")
    q = div_by(big_n, big_d)
    assert q == div_by(1, 2)
    assert q.gcd == big_n
    assert str(q) == "1/2"

def test_construction_reduces():
    for n in range(-12, 13):
        for d in range(-12, 13):
            if d == 0:
                continue
            q = Rational(n, d)
            assert q.numerator == n
            assert q.denominator == d
            assert q.normalized_denominator > 0
            assert d % q.normalized_denominator == 0
            if q.normalized_numerator != 0:
                assert n % q.normalized_numerator == 0
            assert rationals.gcd(q.normalized_numerator,
                                 q.normalized_denominator) == 1

def test_zero_denominator():
    with pytest.raises(Invalid_Argument):
        Rational(1, 0)
    with pytest.raises(Invalid_Argument):
        Rational(0, 0)
    with pytest.raises(Invalid_Argument):
        Rational.normalize(0, 0)

def test_default_is_zero():
    q = Rational()
    assert q.isZero()
    assert str(q) == "0"
    assert str(Rational(5)) == "5"

def test_signs():
    q = Rational(-3, -6)
    assert q.numerator_sign == -1
    assert q.denominator_sign == -1
    assert q.is_positive
    assert q.gcd == 3
    assert (q.normalized_numerator, q.normalized_denominator) == (1, 2)

    q = Rational(3, -6)
    assert not q.is_positive
    assert q.isNegative()
    assert (q.normalized_numerator, q.normalized_denominator) == (-1, 2)

    q = Rational(0, -6)
    assert q.numerator_sign == 0
    assert not q.is_positive
    assert not q.isNegative()
    assert q.isZero()

def test_normalize_matches_construction():
    for n, d in ((6, 4), (-6, 4), (6, -4), (0, 7), (117, 1098)):
        assert Rational.normalize(n, d) == Rational(n, d)
        assert str(Rational.normalize(n, d)) == str(Rational(n, d))

def test_immutable():
    q = Rational(1, 2)
    with pytest.raises(AttributeError):
        q.numerator = 3
    with pytest.raises(AttributeError):
        q.is_positive = False
    with pytest.raises(AttributeError):
        del q.denominator
    assert q == Rational(1, 2)

def test_non_integer_components():
    with pytest.raises(AssertionError):
        Rational(1.5, 2)
    with pytest.raises(AssertionError):
        Rational(True, 2)

def test_equality():
    a = Rational(1, 2)
    b = Rational(-1, -2)
    c = Rational(3, 6)

    assert a == a
    assert a == b and b == a
    assert b == c and a == c
    assert Rational(0, 5) == Rational(0, -3)
    assert Rational(1, -2) == Rational(-1, 2)
    assert a != Rational(-1, 2)
    assert not a != b

def test_equality_with_other_types():
    assert Rational(1, 2) != 0.5
    assert not Rational(2) == 2
    assert Rational(1, 2) != "1/2"

def test_hash_consistency():
    assert hash(Rational(1, 2)) == hash(Rational(-1, -2))
    assert hash(Rational(1, 2)) == hash(Rational(50, 100))
    assert hash(Rational(0, 5)) == hash(Rational(0, -3))
    assert len({Rational(1, 2), Rational(2, 4), Rational(-3, -6)}) == 1
    assert len({Rational(1, 2), Rational(-1, 2)}) == 2

def test_compare():
    assert Rational(1, 2).compare(Rational(2, 3)) == -1
    assert Rational(2, 3).compare(Rational(1, 2)) == 1
    assert Rational(2, 4).compare(Rational(-1, -2)) == 0
    assert Rational(1, -2).compare(Rational(1, 3)) == -1
    assert Rational(-1, -2).compare(Rational(1, 3)) == 1

def test_rich_comparison():
    half = Rational(1, 2)
    assert half <= Rational(2, 4)
    assert half >= Rational(2, 4)
    assert half > Rational(1, -3)
    assert not half < Rational(-1, -2)
    assert sorted([Rational(2, 3), Rational(1, -2), Rational(0)]) == \
        [Rational(-1, 2), Rational(0), Rational(2, 3)]

def test_mixed_type_operations():
    with pytest.raises(TypeError):
        Rational(1, 2) + 1
    with pytest.raises(TypeError):
        Rational(1, 2) * 0.5
    with pytest.raises(TypeError):
        Rational(1, 2) < 1

def test_arithmetic_with_negative_denominators():
    assert Rational(1, -2) + Rational(1, 2) == Rational(0)
    assert Rational(1, -2) - Rational(1, 2) == Rational(-1)
    assert Rational(1, -2) * Rational(-1, 2) == Rational(1, 4)
    assert Rational(1, -2) / Rational(-1, 4) == Rational(2)
    assert -Rational(1, -2) == Rational(1, 2)

def test_division_by_zero():
    with pytest.raises(Invalid_Argument):
        Rational(1, 2) / Rational(0, 5)
    with pytest.raises(Invalid_Argument):
        Rational(0) / Rational(0)

def test_abs_and_pos():
    assert abs(Rational(-3, 6)) == Rational(1, 2)
    assert abs(Rational(3, -6)) == Rational(1, 2)
    q = Rational(2, 3)
    assert +q is q

def test_is_integral():
    assert Rational(4, 2).isIntegral()
    assert Rational(-4, -2).isIntegral()
    assert not Rational(1, 2).isIntegral()

def test_repr():
    assert repr(Rational(4, 2)) == "Rational(2)"
    assert repr(Rational(1, -2)) == "Rational(-1, 2)"

def test_format_negative_denominator_for_display():
    q = Rational(1, 2)
    object.__setattr__(q, "normalized_denominator", -2)
    assert str(q) == "-1/2"

def test_format_zero_denominator():
    q = Rational(1, 2)
    object.__setattr__(q, "normalized_denominator", 0)
    with pytest.raises(Internal_Consistency):
        str(q)

def test_parse():
    assert q_from_string("3") == Rational(3)
    assert q_from_string("-2/4") == Rational(-1, 2)
    assert q_from_string("+3/-6") == Rational(-1, 2)
    assert q_from_string("0/7").isZero()
    assert q_from_string("-0") == Rational(0)

def test_parse_errors():
    for text in ("", "/", "1/", "/2", "a", "1.5", "1/2/3", " 1", "1 / 2",
                 "1_000", "0x10", "--1", "1/+"):
        with pytest.raises(Parse_Error):
            q_from_string(text)

def test_parse_zero_denominator():
    with pytest.raises(Invalid_Argument):
        q_from_string("1/0")

def test_canonical_round_trip():
    for text in ("0", "7", "-7", "1/2", "-1/2", "13/122",
                 "912016490186296920119201192141970416029/2"):
        assert str(q_from_string(text)) == text

def test_fixed_width_constructors():
    assert q_from_int32(-(2 ** 31), 2 ** 31 - 1) == \
        Rational(-(2 ** 31), 2 ** 31 - 1)
    assert q_from_int32(3) == Rational(3)
    with pytest.raises(Invalid_Argument):
        q_from_int32(2 ** 31, 1)
    with pytest.raises(Invalid_Argument):
        q_from_int32(2000000000, 4000000000)
    with pytest.raises(Invalid_Argument):
        q_from_int64(1, 2 ** 63)
    assert q_from_int64(-(2 ** 63)) == Rational(-(2 ** 63))
    with pytest.raises(Invalid_Argument):
        q_from_int64(-(2 ** 63) - 1)
    with pytest.raises(Invalid_Argument):
        q_from_int64(1, 0)

def test_debug_normalisation(monkeypatch, capsys):
    monkeypatch.setattr(rationals, "DEBUG_NORMALISATION", True)
    Rational(2, 4)
    captured = capsys.readouterr()
    assert "2/4 -> 1/2 (gcd 2)" in captured.out
