"""Integer manipulation: digit reversal, parsing and Roman numerals."""

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)

_ROMAN_PLACES = (("I", "V", "X"), ("X", "L", "C"), ("C", "D", "M"))
_ROMAN_WEIGHTS = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _reverse_digits(value: int) -> int:
    result = 0
    while value > 0:
        value, digit = divmod(value, 10)
        result = result * 10 + digit
    return result


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves 32-bit range."""
    if -10 < x < 10:
        return x
    sign = -1 if x < 0 else 1
    reversed_value = _reverse_digits(abs(x))
    if reversed_value > INT32_MAX:
        return 0
    return sign * reversed_value


def parse_int(s: str) -> int:
    """Parse a leading integer from ``s`` the way atoi does, clamped to 32 bits."""
    rest = s.lstrip(" ")
    if not rest:
        return 0
    sign = -1 if rest[0] == "-" else 1
    if rest[0] in "+-":
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + ord(ch) - ord("0")
        if value > INT32_MAX:
            return INT32_MAX if sign == 1 else INT32_MIN
    return sign * value


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    if x < 10:
        return True
    reversed_value = _reverse_digits(x)
    if reversed_value > INT32_MAX:
        return False
    return reversed_value == x


def _roman_digit(digit: int, one: str, five: str, ten: str) -> str:
    if digit == 9:
        return one + ten
    if digit >= 5:
        return five + one * (digit - 5)
    if digit == 4:
        return one + five
    return one * digit


def int_to_roman(num: int) -> str:
    """Write ``num`` in Roman numerals; thousands are repeated M's."""
    if num < 0:
        raise ValueError("Roman numerals cannot represent negative numbers")
    parts = []
    for one, five, ten in _ROMAN_PLACES:
        num, digit = divmod(num, 10)
        parts.append(_roman_digit(digit, one, five, ten))
        if num == 0:
            return "".join(reversed(parts))
    parts.append("M" * num)
    return "".join(reversed(parts))


def roman_to_int(s: str) -> int:
    """Read a Roman numeral."""
    if not s:
        raise ValueError("empty Roman numeral")
    try:
        weights = [_ROMAN_WEIGHTS[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman digit: {exc.args[0]!r}") from None
    previous = weights[-1]
    total = previous
    sign = 1
    for weight in reversed(weights[:-1]):
        if weight < previous:
            sign = -1
        elif weight > previous:
            sign = 1
        total += sign * weight
        previous = weight
    return total