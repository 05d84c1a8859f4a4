"""
Monotone — брендирование монотонных кривых

Большинство операций требует, чтобы X не убывала вдоль кривой. Runtime-обёртка
с проверкой в конструкторе потерялась бы при (де)сериализации, поэтому
монотонность утверждает вызывающий код, а Monotone — лишь статический бренд
(typing.NewType) без runtime-нагрузки: значение остаётся той же последовательностью.

Получить Monotone можно через:
- is_monotone / sort_ascending / ensure_monotone (monotonicity)
- assume_monotone — когда порядок уже известен (например, данные из хранилища)
"""

from typing import Any, NewType, Sequence

Monotone = NewType("Monotone", Sequence[Any])


class MonotonicityViolation(ValueError):
    """
    Кривая не является слабо монотонной по X.

    Attributes:
        index: Индекс первой точки, нарушившей порядок
        previous_x: X предыдущей точки
        current_x: X точки с индексом index
    """

    def __init__(self, index: int, previous_x: float, current_x: float) -> None:
        self.index = index
        self.previous_x = previous_x
        self.current_x = current_x
        super().__init__(
            f"Curve is not monotone: x[{index}]={current_x!r} < x[{index - 1}]={previous_x!r}"
        )


def assume_monotone(curve: Sequence[Any]) -> Monotone:
    """Пометить кривую как монотонную без проверки."""
    return Monotone(curve)
