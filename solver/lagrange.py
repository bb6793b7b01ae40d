# Interpolación de Lagrange exacta sobre enteros (sin fracciones ni floats)

from typing import Sequence, Tuple

from solver.errors import DegenerateInterpolation, InexactInterpolation

Share = Tuple[int, int]


# ---------------------------
# FUNCIÓN shared_fraction: suma de Lagrange como una sola fracción N/D
# ---------------------------
def shared_fraction(points: Sequence[Share], x0: int) -> Tuple[int, int]:
    """
    Acumula P(x0) = sum_j y_j * L_j(x0) como una única fracción N/D.
    - points: lista de (x, y) con x distintos
    - x0: punto donde evaluar
    Devuelve: (N, D) sin reducir; D nunca es cero.
    """
    if not points:
        raise ValueError("Se necesita al menos un punto para interpolar.")

    numerator = 0
    denominator = 1
    for j, (xj, yj) in enumerate(points):
        term_num = yj
        term_den = 1
        for i, (xi, _) in enumerate(points):
            if i == j:
                continue
            term_num *= x0 - xi
            term_den *= xj - xi
        # a/b + c/d = (a*d + c*b) / (b*d)
        numerator = numerator * term_den + term_num * denominator
        denominator *= term_den

    if denominator == 0:
        raise DegenerateInterpolation(
            "Denominador cero en la base de Lagrange: hay coordenadas x duplicadas."
        )
    return numerator, denominator


def _truncate_div(numerator: int, denominator: int) -> Tuple[int, int]:
    # división entera truncando hacia cero (// de Python redondea hacia -inf)
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient, numerator - quotient * denominator


def evaluate(points: Sequence[Share], x0: int, exact: bool = False) -> int:
    """
    Valor en x0 del polinomio de grado mínimo que pasa por 'points'.
    Si la división final no es exacta se trunca hacia cero, salvo que
    exact=True, en cuyo caso se lanza InexactInterpolation.
    """
    numerator, denominator = shared_fraction(points, x0)
    quotient, remainder = _truncate_div(numerator, denominator)
    if remainder and exact:
        raise InexactInterpolation(
            f"P({x0}) no es entero: {numerator}/{denominator} deja resto {remainder}."
        )
    return quotient


def interpolate_at_zero(points: Sequence[Share], exact: bool = False) -> int:
    """Término constante P(0)."""
    return evaluate(points, 0, exact=exact)


def is_exact_at(points: Sequence[Share], x0: int) -> bool:
    numerator, denominator = shared_fraction(points, x0)
    return numerator % denominator == 0


def passes_through(points: Sequence[Share], share: Share) -> bool:
    # comparación cruzada N == y*D: nunca con un cociente truncado
    x, y = share
    numerator, denominator = shared_fraction(points, x)
    return numerator == y * denominator
