"""
Búsqueda combinatoria de consenso entre shares.

Dados n shares, algunos posiblemente corruptos, se prueba cada subconjunto
de k shares (en orden lexicográfico de índices), se cuenta cuántos de los n
shares pasan por el polinomio que define, y se devuelve el P(0) del primer
subconjunto con más coincidencias. Es una búsqueda exhaustiva y exacta,
pensada para n pequeño.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, replace
from typing import Iterator, List, Sequence, Tuple

from solver.errors import InsufficientShares
from solver.lagrange import Share, interpolate_at_zero, is_exact_at, passes_through

CONSENSUS = "consensus"
FIRST_K = "first-k"
MODES = (CONSENSUS, FIRST_K)


@dataclass(frozen=True)
class ProblemInstance:
    """Umbral k más la lista completa de shares; inmutable una vez cargado."""

    k: int
    shares: Tuple[Share, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "shares", tuple(self.shares))

    @property
    def n(self) -> int:
        return len(self.shares)


@dataclass(frozen=True)
class ConsensusResult:
    inliers: int
    constant_term: int
    combination: Tuple[int, ...]
    exact: bool
    outliers: Tuple[int, ...] = ()


def _check_threshold(shares: Sequence[Share], k: int) -> None:
    if k < 1:
        raise ValueError(f"El umbral k debe ser positivo (recibido {k}).")
    if len(shares) < k:
        raise InsufficientShares(len(shares), k)


def candidate_subsets(n: int, k: int) -> Iterator[Tuple[int, ...]]:
    """Las C(n, k) combinaciones de índices, en orden lexicográfico."""
    return itertools.combinations(range(n), k)


def count_inliers(subset: Sequence[Share], shares: Sequence[Share]) -> int:
    """Número de shares (de la lista completa) por los que pasa el polinomio de 'subset'."""
    return sum(1 for share in shares if passes_through(subset, share))


def find_consensus(shares: Sequence[Share], k: int) -> ConsensusResult:
    """
    Devuelve el resultado del subconjunto de tamaño k con más inliers.
    En caso de empate gana el primero en orden lexicográfico: solo se
    reemplaza el mejor cuando el nuevo recuento es estrictamente mayor.
    """
    _check_threshold(shares, k)

    best = None
    best_subset: List[Share] = []
    for combination in candidate_subsets(len(shares), k):
        subset = [shares[i] for i in combination]
        inliers = count_inliers(subset, shares)
        if best is None or inliers > best.inliers:
            best = ConsensusResult(
                inliers=inliers,
                constant_term=interpolate_at_zero(subset),
                combination=combination,
                exact=is_exact_at(subset, 0),
            )
            best_subset = subset

    outliers = tuple(sorted(x for x, y in shares if not passes_through(best_subset, (x, y))))
    return replace(best, outliers=outliers)


def best_fit(shares: Sequence[Share], k: int) -> Tuple[int, int]:
    """(número de inliers, término constante) del mejor subconjunto."""
    result = find_consensus(shares, k)
    return result.inliers, result.constant_term


def reconstruct_first_k(shares: Sequence[Share], k: int) -> int:
    """Variante no robusta: interpola los k shares de menor x."""
    _check_threshold(shares, k)
    selected = sorted(shares, key=lambda share: share[0])[:k]
    return interpolate_at_zero(selected)


def solve(instance: ProblemInstance, mode: str = CONSENSUS) -> ConsensusResult:
    if mode == CONSENSUS:
        return find_consensus(instance.shares, instance.k)
    if mode != FIRST_K:
        raise ValueError(f"Modo de reconstrucción desconocido: {mode!r} (use {', '.join(MODES)}).")

    _check_threshold(instance.shares, instance.k)
    order = sorted(range(instance.n), key=lambda i: instance.shares[i][0])
    combination = tuple(sorted(order[: instance.k]))
    subset = [instance.shares[i] for i in combination]
    outliers = tuple(sorted(x for x, y in instance.shares if not passes_through(subset, (x, y))))
    return ConsensusResult(
        inliers=instance.n - len(outliers),
        constant_term=reconstruct_first_k(instance.shares, instance.k),
        combination=combination,
        exact=is_exact_at(subset, 0),
        outliers=outliers,
    )
