"""Tests for base 2..36 digit decoding."""

import pytest
from polysecret.digits import parse_base, digit_value, decode, encode
from polysecret.errors import UnsupportedBase, InvalidDigit, DigitOutOfRange


class TestParseBase:

    def test_int_and_string(self):
        assert parse_base(16) == 16
        assert parse_base("16") == 16
        assert parse_base(" 2 ") == 2
        assert parse_base("36") == 36

    @pytest.mark.parametrize("base", [0, 1, 37, "1", "37", "-2", "ten", "", "16.5", 16.0, None, True])
    def test_unsupported(self, base):
        with pytest.raises(UnsupportedBase) as exc:
            parse_base(base)
        assert exc.value.base == base

    def test_message_names_base(self):
        with pytest.raises(UnsupportedBase, match="37"):
            parse_base("37")


class TestDigitValue:

    def test_digits(self):
        assert digit_value("0") == 0
        assert digit_value("9") == 9

    def test_letters_either_case(self):
        assert digit_value("a") == 10
        assert digit_value("A") == 10
        assert digit_value("z") == 35
        assert digit_value("Z") == 35

    @pytest.mark.parametrize("ch", ["-", "+", ".", " ", "_", "é", "٣"])
    def test_invalid(self, ch):
        with pytest.raises(InvalidDigit) as exc:
            digit_value(ch)
        assert exc.value.char == ch


class TestDecode:

    def test_known_values(self):
        assert decode("ff", 16) == 255
        assert decode("111", 2) == 7
        assert decode("213", "4") == 39
        assert decode("zz", 36) == 1295
        assert decode("0", 10) == 0
        assert decode("000123", 10) == 123

    def test_case_insensitive(self):
        assert decode("Ff", 16) == decode("ff", 16) == decode("FF", 16)

    def test_surrounding_whitespace(self):
        assert decode("  1010\n", 2) == 10

    def test_long_value_exact(self):
        s = "z" * 300
        assert decode(s, 36) == 36 ** 300 - 1

    def test_large_mixed_base(self):
        assert decode("e1b5e05623d881f", 16) == 0xe1b5e05623d881f

    def test_digit_out_of_range(self):
        with pytest.raises(DigitOutOfRange) as exc:
            decode("102", 2)
        assert exc.value.char == "2"
        assert exc.value.base == 2

    def test_letter_out_of_range(self):
        with pytest.raises(DigitOutOfRange):
            decode("G", 16)

    def test_invalid_character(self):
        with pytest.raises(InvalidDigit) as exc:
            decode("12-3", 10)
        assert exc.value.char == "-"

    def test_no_sign_handling(self):
        with pytest.raises(InvalidDigit):
            decode("-5", 10)

    def test_inner_whitespace_invalid(self):
        with pytest.raises(InvalidDigit):
            decode("1 0", 10)

    def test_empty_raises(self):
        with pytest.raises(InvalidDigit):
            decode("", 10)
        with pytest.raises(InvalidDigit):
            decode("   ", 10)

    def test_bad_base_checked_first(self):
        with pytest.raises(UnsupportedBase):
            decode("", 1)


class TestEncode:

    def test_known_values(self):
        assert encode(255, 16) == "ff"
        assert encode(7, 2) == "111"
        assert encode(0, 5) == "0"
        assert encode(1295, 36) == "zz"

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            encode(-1, 10)

    def test_decode_inverts_encode(self, rng):
        for base in range(2, 37):
            for _ in range(5):
                n = rng.getrandbits(rng.randint(1, 400))
                assert decode(encode(n, base), base) == n

    def test_matches_builtin_int(self, rng):
        for base in range(2, 37):
            n = rng.getrandbits(128)
            assert int(encode(n, base), base) == n
