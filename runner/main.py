import argparse
import os
import sys

# Obtener el directorio raíz del proyecto
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from solver.consensus import CONSENSUS, MODES, solve
from solver.errors import ReconstructionError
from runner.config import RECONSTRUCTION_MODE
from runner.instance_store import load_instance


def process_file(filename, mode=CONSENSUS):
    """Reconstruye P(0) de un fichero. Devuelve True si terminó sin errores."""
    print(f"===== Procesando archivo: {filename} =====")

    try:
        instance = load_instance(filename)
        result = solve(instance, mode)
    except OSError as exc:
        print(f"Error: no se pudo abrir {filename}: {exc}\n", file=sys.stderr)
        return False
    except ReconstructionError as exc:
        print(f"Error de reconstrucción: {exc}\n", file=sys.stderr)
        return False
    except ValueError as exc:
        print(f"Error en la instancia: {exc}\n", file=sys.stderr)
        return False

    if mode == CONSENSUS:
        print(f"Probadas todas las combinaciones de {instance.k} de {instance.n} shares.")
    else:
        print(f"Usando los {instance.k} shares con menor x para el cálculo.")
    print("\n-----------------------------------------")
    print(f"Término constante calculado P(0) = {result.constant_term}")
    print(f"Shares consistentes: {result.inliers} de {instance.n}")
    if result.outliers:
        print(f"Shares descartados (x): {', '.join(str(x) for x in result.outliers)}")
    if not result.exact:
        print("Aviso: la división final no fue exacta; P(0) está truncado.")
    print("-----------------------------------------\n")
    return True


def build_parser():
    parser = argparse.ArgumentParser(
        description="Reconstruye el término constante de un polinomio a partir de shares, "
        "tolerando shares corruptos."
    )
    parser.add_argument("files", nargs="+", help="Ficheros JSON de instancia")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=RECONSTRUCTION_MODE if RECONSTRUCTION_MODE in MODES else CONSENSUS,
        help="consensus: búsqueda robusta; first-k: los k shares de menor x",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    failures = 0
    for filename in args.files:
        if not process_file(filename, args.mode):
            failures += 1
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
