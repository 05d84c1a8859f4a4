"""
Coordinates — доступ к X/Y полям произвольной точки

Алгебра не знает формы точки: она читает только две числовые координаты
(независимую X и зависимую Y) и умеет создавать новые точки из пары (X, Y).
Coordinates — неизменяемый набор из трёх функций:

- x(point)    → независимая координата
- y(point)    → зависимая координата
- make(x, y)  → новая точка, содержащая только X и Y

Передаётся явно в каждую операцию, поэтому кривые с разной формой точек
(dict, pydantic-модели, dataclasses) обрабатываются одним и тем же кодом.
"""

import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Final

DEFAULT_X_FIELD: Final[str] = "x"
DEFAULT_Y_FIELD: Final[str] = "y"


@dataclass(frozen=True)
class Coordinates:
    """Селекторы X/Y и конструктор точек для одной формы точки.

    Равенство определяется только именами полей и видом доступа.
    """

    x_field: str
    y_field: str
    access: str
    get_x: Callable[[Any], float] = field(compare=False, repr=False)
    get_y: Callable[[Any], float] = field(compare=False, repr=False)
    make_point: Callable[[float, float], Any] = field(compare=False, repr=False)

    def x(self, point: Any) -> float:
        return self.get_x(point)

    def y(self, point: Any) -> float:
        return self.get_y(point)

    def xy(self, point: Any) -> tuple[float, float]:
        return self.get_x(point), self.get_y(point)

    def make(self, x: float, y: float) -> Any:
        """Создать новую точку только с координатами X и Y."""
        return self.make_point(x, y)

    @classmethod
    def for_mapping(
        cls,
        x_field: str = DEFAULT_X_FIELD,
        y_field: str = DEFAULT_Y_FIELD,
    ) -> "Coordinates":
        """
        Доступ к точкам-словарям: point[x_field], point[y_field].

        Новые точки создаются как dict {x_field: X, y_field: Y}.

        Args:
            x_field: Ключ независимой координаты
            y_field: Ключ зависимой координаты

        Raises:
            ValueError: Если x_field и y_field совпадают
        """
        _check_fields(x_field, y_field)
        return cls(
            x_field=x_field,
            y_field=y_field,
            access="mapping",
            get_x=operator.itemgetter(x_field),
            get_y=operator.itemgetter(y_field),
            make_point=lambda x, y: {x_field: x, y_field: y},
        )

    @classmethod
    def for_attributes(
        cls,
        x_field: str,
        y_field: str,
        factory: Callable[..., Any],
    ) -> "Coordinates":
        """
        Доступ к точкам-объектам: point.x_field, point.y_field.

        Подходит для pydantic-моделей, dataclasses и NamedTuple.
        Новые точки создаются как factory(**{x_field: X, y_field: Y}).

        Args:
            x_field: Имя атрибута независимой координаты
            y_field: Имя атрибута зависимой координаты
            factory: Конструктор точки, принимающий оба поля keyword-аргументами

        Raises:
            ValueError: Если x_field и y_field совпадают
        """
        _check_fields(x_field, y_field)
        return cls(
            x_field=x_field,
            y_field=y_field,
            access="attribute",
            get_x=operator.attrgetter(x_field),
            get_y=operator.attrgetter(y_field),
            make_point=lambda x, y: factory(**{x_field: x, y_field: y}),
        )

    def swapped(self) -> "Coordinates":
        """Тот же доступ с переставленными ролями X и Y."""
        make_point = self.make_point
        return Coordinates(
            x_field=self.y_field,
            y_field=self.x_field,
            access=self.access,
            get_x=self.get_y,
            get_y=self.get_x,
            make_point=lambda x, y: make_point(y, x),
        )


def _check_fields(x_field: str, y_field: str) -> None:
    if x_field == y_field:
        raise ValueError(f"x_field and y_field must differ, got {x_field!r} for both")


def coordinates(x_field: str = DEFAULT_X_FIELD, y_field: str = DEFAULT_Y_FIELD) -> Coordinates:
    """Сокращение для Coordinates.for_mapping."""
    return Coordinates.for_mapping(x_field, y_field)


# Точки вида {"x": ..., "y": ...}
XY: Final[Coordinates] = coordinates()
