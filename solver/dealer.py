# Generación de shares sobre enteros (sin campo finito) para demos y pruebas

# ---------------------------
# IMPORTS
# ---------------------------
from typing import List, Optional, Tuple

# pycryptodome: aleatoriedad criptográfica con randint/sample
from Crypto.Random import random

from solver.config import COEFFICIENT_BITS
from solver.lagrange import Share


# ---------------------------
# FUNCIÓN polynom: evaluar polinomio en un punto x
# ---------------------------
def polynom(x: int, coeffs: List[int]) -> int:
    """
    Evalúa el polinomio definido por 'coeffs' en el punto x (aritmética exacta).
    - coeffs: lista de coeficientes [a0, a1, a2, ...] (a0 = secreto)
    """
    total = 0
    # Horner desde el coeficiente de mayor grado
    for coeff in reversed(coeffs):
        total = total * x + coeff
    return total


def random_coefficients(secret: int, k: int, bits: Optional[int] = None) -> List[int]:
    """[secret] seguido de k-1 coeficientes aleatorios positivos de 'bits' bits como máximo."""
    if bits is None:
        bits = COEFFICIENT_BITS
    coeffs = [secret]
    for _ in range(k - 1):
        coeffs.append(random.randint(1, (1 << bits) - 1))
    return coeffs


# ---------------------------
# FUNCIÓN split_secret: dividir secreto en n shares con umbral k
# ---------------------------
def split_secret(secret: int, n: int, k: int, corrupted: int = 0) -> Tuple[List[Share], List[int]]:
    """
    Divide 'secret' en 'n' shares (x = 1..n) de un polinomio de grado k-1.
    - corrupted: cuántos shares se alteran sumando un desplazamiento aleatorio
    Devuelve: (lista de (x, y), lista ordenada de las x alteradas)
    """
    if k < 1 or n < k:
        raise ValueError(f"Parámetros inválidos: se requiere 1 <= k <= n (k={k}, n={n}).")
    # los n - c honestos deben superar a k - 1 honestos + c corruptos
    if corrupted < 0 or 2 * corrupted > n - k:
        raise ValueError(
            f"Se pueden corromper como máximo (n - k) // 2 = {(n - k) // 2} shares (pedidos {corrupted})."
        )

    coeffs = random_coefficients(secret, k)
    shares = [(x, polynom(x, coeffs)) for x in range(1, n + 1)]

    corrupted_xs = sorted(random.sample(range(1, n + 1), corrupted))
    for x in corrupted_xs:
        # desplazamiento nunca nulo para que el share quede realmente fuera
        offset = random.randint(1, 1 << COEFFICIENT_BITS)
        shares[x - 1] = (x, shares[x - 1][1] + offset)
    return shares, corrupted_xs
