import argparse
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from solver.dealer import split_secret
from runner.config import (
    INSTANCES_DIR,
    DEFAULT_N_SHARES,
    DEFAULT_THRESHOLD,
    DEFAULT_CORRUPTED,
    DEFAULT_BASE,
)
from runner.instance_store import InstanceStore


def build_parser():
    parser = argparse.ArgumentParser(description="Genera una instancia de shares (con corruptos) en JSON.")
    parser.add_argument("--secret", type=int, required=True, help="Término constante P(0), no negativo")
    parser.add_argument("-n", type=int, default=DEFAULT_N_SHARES, help="Número total de shares")
    parser.add_argument("-k", type=int, default=DEFAULT_THRESHOLD, help="Umbral (grado + 1)")
    parser.add_argument("--corrupted", type=int, default=DEFAULT_CORRUPTED, help="Shares a corromper")
    parser.add_argument("--base", type=int, default=DEFAULT_BASE, help="Base de los valores (2-36)")
    parser.add_argument("--name", default="instance", help="Nombre del fichero (sin .json)")
    parser.add_argument("--dir", default=str(INSTANCES_DIR), help="Directorio de salida")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.secret < 0:
        print("❌ El secreto debe ser no negativo.", file=sys.stderr)
        return 1

    try:
        shares, corrupted_xs = split_secret(args.secret, n=args.n, k=args.k, corrupted=args.corrupted)
        path = InstanceStore(args.dir).save(args.name, args.k, shares, base=args.base)
    except ValueError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    print(f"✅ Generados {args.n} shares (umbral: {args.k}) en {path}")
    if corrupted_xs:
        print(f"   Shares corruptos (x): {', '.join(str(x) for x in corrupted_xs)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
