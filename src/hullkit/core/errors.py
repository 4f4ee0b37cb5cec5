"""
Geometry Errors — таксономия ошибок геометрического ядра

Все ошибки синхронные и пробрасываются немедленно, внутренних повторов нет.
Каждая ошибка несёт `kind` (ErrorKind), по которому вызывающий код может
различать ситуации без разбора текста сообщения.

Классы дополнительно наследуют ValueError / RuntimeError, чтобы обычные
`except ValueError` продолжали работать:
- ValueError: некорректный вход (размерность, нулевая норма, невыпуклый hull)
- RuntimeError: некорректное состояние (мало вершин, генерация, регион)
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Тип ошибки геометрического ядра"""

    DIMENSION_MISMATCH = "DIMENSION_MISMATCH"
    ZERO_NORM = "ZERO_NORM"
    NON_CONVEX_HULL = "NON_CONVEX_HULL"
    INSUFFICIENT_VERTICES = "INSUFFICIENT_VERTICES"
    HULL_GENERATION_FAILED = "HULL_GENERATION_FAILED"
    DEGENERATE_LINE = "DEGENERATE_LINE"
    UNBOUNDED_REGION = "UNBOUNDED_REGION"


class GeometryError(Exception):
    """Базовая ошибка геометрического ядра."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.kind = kind


class DimensionMismatchError(GeometryError, ValueError):
    """Массив координат имеет длину, отличную от ожидаемой."""

    def __init__(self, actual: int, expected: int = 2):
        super().__init__(
            f"Dimension mismatch: {actual} != {expected}", ErrorKind.DIMENSION_MISMATCH
        )
        self.actual = actual
        self.expected = expected


class ZeroNormError(GeometryError, ValueError):
    """Операция требует вектор ненулевой длины."""

    def __init__(self, message: str = "Norm is zero"):
        super().__init__(message, ErrorKind.ZERO_NORM)


class HullValidationError(GeometryError, ValueError):
    """Последовательность вершин не образует выпуклый hull в CCW порядке."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.NON_CONVEX_HULL)


class InsufficientVerticesError(GeometryError, RuntimeError):
    """Для построения региона нужно минимум 3 вершины."""

    def __init__(self, actual: int, required: int = 3):
        super().__init__(
            f"Region generation requires at least {required} vertices "
            f"but found only {actual}",
            ErrorKind.INSUFFICIENT_VERTICES,
        )
        self.actual = actual
        self.required = required


class HullGenerationError(GeometryError, RuntimeError):
    """Генератор не смог построить выпуклую оболочку."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.HULL_GENERATION_FAILED)


class DegenerateLineError(GeometryError, ValueError):
    """Две точки линии совпадают в пределах tolerance."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.DEGENERATE_LINE)


class RegionError(GeometryError, RuntimeError):
    """Пересечение полуплоскостей не даёт ограниченного региона."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.UNBOUNDED_REGION)
