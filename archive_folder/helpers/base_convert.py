"""Conversion of arbitrarily large numbers between radix alphabets.

Numbers are digit strings written in an alphabet, the position of a symbol in
the alphabet being its digit value. Python integers have unbounded precision,
so a 128-bit digest converts without overflow.
"""

DECIMAL = "0123456789"
HEXADECIMAL = "0123456789abcdef"
BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _check_alphabet(alphabet: str) -> None:
    if len(alphabet) < 2:
        raise ValueError(f"Alphabet '{alphabet}' must contain at least two symbols.")
    if len(set(alphabet)) != len(alphabet):
        raise ValueError(f"Alphabet '{alphabet}' contains repeated symbols.")


def to_integer(number: str, alphabet: str) -> int:
    """Evaluate a digit string written in the given alphabet.

    :param number: the digit string, most significant digit first
    :param alphabet: the radix alphabet
    :raises: ValueError if a digit is not part of the alphabet
    :returns: the value of the number
    """
    _check_alphabet(alphabet)
    radix = len(alphabet)
    value = 0
    for digit in number:
        position = alphabet.find(digit)
        if position < 0:
            raise ValueError(f"Digit '{digit}' is not part of alphabet '{alphabet}'.")
        value = value * radix + position
    return value


def from_integer(value: int, alphabet: str) -> str:
    """Write a non-negative integer in the given alphabet.

    :param value: the integer to write
    :param alphabet: the radix alphabet
    :returns: the digit string, without leading zero digits
    """
    _check_alphabet(alphabet)
    if value < 0:
        raise ValueError(f"Cannot convert negative value {value}.")
    radix = len(alphabet)
    if value < radix:
        return alphabet[value]

    digits = []
    while value:
        value, remainder = divmod(value, radix)
        digits.append(alphabet[remainder])
    return "".join(reversed(digits))


def convert_base(number: str, from_alphabet: str, to_alphabet: str) -> str:
    """Convert a number from any radix alphabet to any other one.

    Identical alphabets return the number untouched. Otherwise the number goes
    through its decimal value.

    :param number: the digit string to convert
    :param from_alphabet: the alphabet the number is written in
    :param to_alphabet: the alphabet to write the number in
    :raises: ValueError if the number or an alphabet is invalid
    :returns: the converted digit string
    """
    if from_alphabet == to_alphabet:
        return number

    return from_integer(to_integer(number, from_alphabet), to_alphabet)
