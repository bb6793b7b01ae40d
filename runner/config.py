# Configuración del ejecutor por lotes y del generador de instancias
import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Directorio donde make_instance guarda los ficheros JSON
INSTANCES_DIR = Path(os.getenv("INSTANCES_DIR", str(PROJECT_ROOT / "instances"))).expanduser()

# Valores por defecto del generador
DEFAULT_N_SHARES = int(os.getenv("DEFAULT_N_SHARES", "6"))
DEFAULT_THRESHOLD = int(os.getenv("DEFAULT_THRESHOLD", "3"))
DEFAULT_CORRUPTED = int(os.getenv("DEFAULT_CORRUPTED", "1"))
DEFAULT_BASE = int(os.getenv("DEFAULT_BASE", "10"))

# "consensus" (robusto) o "first-k" (los k shares de menor x)
RECONSTRUCTION_MODE = os.getenv("RECONSTRUCTION_MODE", "consensus").strip().lower()
