"""
Errores de la reconstrucción de shares.

Todos heredan de ``ValueError`` para que el código que ya captura
``ValueError`` siga funcionando.
"""


class ReconstructionError(ValueError):
    """Error base del núcleo de reconstrucción."""


class InvalidDigit(ReconstructionError):
    def __init__(self, digits: str, base: int, position: int) -> None:
        self.digits = digits
        self.base = base
        self.position = position
        if position < 0:
            message = f"Cadena vacía: no hay dígitos que convertir en base {base}."
        else:
            message = (
                f"Dígito inválido {digits[position]!r} en la posición {position} "
                f"de {digits!r} para base {base}."
            )
        super().__init__(message)


class DegenerateInterpolation(ReconstructionError):
    """El denominador común es cero: hay coordenadas x duplicadas."""


class InexactInterpolation(ReconstructionError):
    """La división final deja resto: los puntos no están en un polinomio entero."""


class InsufficientShares(ReconstructionError):
    def __init__(self, available: int, required: int) -> None:
        self.available = available
        self.required = required
        super().__init__(
            f"No hay suficientes shares: hay {available}, se necesitan {required}."
        )
