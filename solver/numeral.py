# Conversión de cadenas de dígitos en cualquier base (2-36) a enteros exactos

from solver.config import DIGIT_ALPHABET, MAX_BASE, MIN_BASE
from solver.errors import InvalidDigit


def _check_base(base: int) -> None:
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"Base fuera de rango: {base} (admitidas {MIN_BASE}-{MAX_BASE}).")


def digit_value(char: str) -> int:
    """Valor de un dígito alfanumérico: '0'-'9' -> 0-9, 'a'/'A'-'z'/'Z' -> 10-35."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    raise ValueError(f"Carácter no alfanumérico: {char!r}")


def decode(digits: str, base: int) -> int:
    """
    Convierte 'digits' (más significativo primero) en base 'base' a entero.
    - digits: cadena no vacía de dígitos 0-9 / a-z (sin distinguir mayúsculas)
    - base: entero entre 2 y 36
    Lanza InvalidDigit si algún carácter no es un dígito válido para la base.
    """
    _check_base(base)
    if not digits:
        raise InvalidDigit(digits, base, -1)

    # Horner: el acumulador es un entero de Python, sin desbordamiento posible
    result = 0
    for position, char in enumerate(digits):
        try:
            value = digit_value(char)
        except ValueError:
            raise InvalidDigit(digits, base, position) from None
        if value >= base:
            raise InvalidDigit(digits, base, position)
        result = result * base + value
    return result


def encode(value: int, base: int) -> str:
    """Inversa de decode para enteros no negativos (dígitos en minúscula)."""
    _check_base(base)
    if value < 0:
        raise ValueError("Solo se codifican enteros no negativos.")
    if value == 0:
        return "0"
    chars = []
    while value:
        value, remainder = divmod(value, base)
        chars.append(DIGIT_ALPHABET[remainder])
    return "".join(reversed(chars))
