"""
Errors — Таксономия ошибок векторной абстракции

Все ошибки этого модуля — ошибки программирования, а не recoverable состояния:
- Выход индекса компоненты за границы → ComponentIndexError (fail fast)
- Несовпадение числа компонент → DimensionMismatchError
- Нарушение контракта binding'а → VectorContractViolation

Ошибки скалярной арифметики (например, деление на ноль) НЕ оборачиваются
и пропагируют как есть (ZeroDivisionError и т.д.).
"""


class VectorError(Exception):
    """Базовый класс для всех ошибок spade_vectors."""

    pass


class ComponentIndexError(VectorError, IndexError):
    """
    Индекс компоненты вне диапазона [0, dimensions()).

    Отрицательные индексы НЕ интерпретируются как отсчёт с конца:
    тихая порча координаты распространяется в геометрические предикаты
    без обнаружимых следов, поэтому доступ прерывается немедленно.
    """

    def __init__(self, index: object, dimensions: int):
        self.index = index
        self.dimensions = dimensions
        super().__init__(
            f"Component index {index!r} out of range for "
            f"{dimensions}-dimensional vector (valid: 0..{dimensions - 1})"
        )


class DimensionMismatchError(VectorError, ValueError):
    """Число компонент не совпадает с фиксированной размерностью типа."""

    def __init__(self, expected: int, actual: int, context: str = "vector"):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{context}: expected {expected} components, got {actual}"
        )


class VectorContractViolation(VectorError):
    """
    Binding не удовлетворяет контракту VectorN.

    Выбрасывается contracts.conformance.check_vector_type().
    """

    pass
