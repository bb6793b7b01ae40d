"""
Lectura y escritura de instancias en formato JSON.

Cada fichero describe una instancia del problema::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Toda clave distinta de ``keys`` es la coordenada x de un share; su ``value``
se decodifica en la base indicada para obtener y.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Iterable, List, Tuple

from solver.config import MAX_BASE, MIN_BASE
from solver.consensus import ProblemInstance
from solver.numeral import decode, encode

KEYS_FIELD = "keys"


class InstanceFormatError(ValueError):
    """El contenido del fichero no describe una instancia válida."""


def _parse_int(raw, what: str) -> int:
    if isinstance(raw, (bool, float)):
        raise InstanceFormatError(f"{what} debe ser un entero, no {raw!r}.")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InstanceFormatError(f"{what} debe ser un entero, no {raw!r}.") from None


def _warn_declared_n(declared_n, actual: int) -> None:
    # 'keys.n' es informativo: nunca aborta la carga
    if declared_n is None:
        return
    try:
        matches = _parse_int(declared_n, "'keys.n'") == actual
    except InstanceFormatError:
        matches = False
    if not matches:
        print(
            f"⚠️  'keys.n' declara {declared_n!r} shares pero hay {actual}.",
            file=sys.stderr,
        )


def parse_instance(data: dict) -> ProblemInstance:
    """Valida el diccionario ya cargado y construye la ProblemInstance."""
    if not isinstance(data, dict):
        raise InstanceFormatError("La instancia debe ser un objeto JSON.")
    keys = data.get(KEYS_FIELD)
    if not isinstance(keys, dict) or "k" not in keys:
        raise InstanceFormatError("Falta el campo 'keys.k'.")
    k = _parse_int(keys["k"], "'keys.k'")
    if k < 1:
        raise InstanceFormatError(f"'keys.k' debe ser positivo (recibido {k}).")

    shares: List[Tuple[int, int]] = []
    seen = set()
    for key, entry in data.items():
        if key == KEYS_FIELD:
            continue
        x = _parse_int(key, f"La clave {key!r}")
        if x in seen:
            raise InstanceFormatError(f"Coordenada x duplicada: {x} (clave {key!r}).")
        seen.add(x)

        if not isinstance(entry, dict) or "base" not in entry or "value" not in entry:
            raise InstanceFormatError(f"El share {key!r} necesita 'base' y 'value'.")
        base = _parse_int(entry["base"], f"La base del share {key!r}")
        if not MIN_BASE <= base <= MAX_BASE:
            raise InstanceFormatError(
                f"Base {base} del share {key!r} fuera de rango ({MIN_BASE}-{MAX_BASE})."
            )
        value = entry["value"]
        if not isinstance(value, str):
            raise InstanceFormatError(f"El 'value' del share {key!r} debe ser texto.")
        # InvalidDigit se propaga tal cual: el llamador decide si continuar
        shares.append((x, decode(value, base)))

    _warn_declared_n(keys.get("n"), len(shares))
    return ProblemInstance(k=k, shares=shares)


def load_instance(path) -> ProblemInstance:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InstanceFormatError(f"JSON inválido en {path}: {exc}") from exc
    return parse_instance(data)


def instance_to_dict(k: int, shares: Iterable[Tuple[int, int]], base: int = 10) -> dict:
    """Serializa shares al formato de fichero; y debe ser no negativo."""
    shares = list(shares)
    payload = {KEYS_FIELD: {"n": len(shares), "k": k}}
    for x, y in shares:
        payload[str(x)] = {"base": str(base), "value": encode(y, base)}
    return payload


class InstanceStore:
    """Directorio con un fichero JSON por instancia."""

    def __init__(self, storage_dir) -> None:
        self.base_path = Path(storage_dir).expanduser().resolve()

    def save(self, name: str, k: int, shares: Iterable[Tuple[int, int]], base: int = 10) -> Path:
        if not name or Path(name).name != name:
            raise ValueError(f"Nombre de instancia inválido: {name!r}")
        self.base_path.mkdir(parents=True, exist_ok=True)

        payload = instance_to_dict(k, shares, base)
        instance_file = self.base_path / f"{name}.json"
        with instance_file.open("w", encoding="utf-8") as handler:
            json.dump(payload, handler, indent=2)
        return instance_file

    def list(self) -> List[Path]:
        if not self.base_path.exists():
            return []
        return sorted(self.base_path.glob("*.json"))

    def load(self, name: str) -> ProblemInstance:
        return load_instance(self.base_path / f"{name}.json")
