"""
Configuración centralizada del núcleo de reconstrucción
"""
import os

# Rango de bases admitidas por el decodificador
MIN_BASE = 2
MAX_BASE = 36
DIGIT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

# Tamaño (bits) de los coeficientes aleatorios que genera el dealer
COEFFICIENT_BITS = int(os.getenv("COEFFICIENT_BITS", "64"))
