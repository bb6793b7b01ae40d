import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def clean_instance():
    """P(x) = x^2 + x + 2, sin shares corruptos."""
    return {
        "keys": {"n": 3, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "1000"},
        "3": {"base": "16", "value": "E"},
    }


@pytest.fixture
def corrupted_instance(clean_instance):
    """Mismo polinomio con un cuarto share alterado (el valor real sería 22)."""
    data = dict(clean_instance)
    data["keys"] = {"n": 4, "k": 3}
    data["4"] = {"base": "10", "value": "99"}
    return data


@pytest.fixture
def write_instance(tmp_path):
    """Escribe un diccionario como fichero JSON y devuelve su ruta."""

    def _write(data, name="instance"):
        path = tmp_path / f"{name}.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
