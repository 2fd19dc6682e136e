"""
Errors — Иерархия исключений bizmath

Все ошибки вычислений сообщаются синхронно вызывающему коду через исключения.
Ни одна ошибка не ретраится: входные данные статичны, повтор не изменит результат.

Виды ошибок:
- InvalidInput: пустые или разной длины серии, невалидные параметры
- DegenerateInput: нулевая дисперсия domain (slope не определён), a == 0 в квадратичной форме
- NoRealSolution: отрицательный дискриминант (нет breakeven цены)
- InsufficientData: окно moving average длиннее серии, пустая серия акций
- TooManyWindows: запрошено больше 3 окон moving average
"""


class BizMathError(Exception):
    """Базовое исключение для всех вычислительных ошибок bizmath."""

    pass


class InvalidInput(BizMathError, ValueError):
    """
    Невалидные входные данные.

    Пустые серии, серии разной длины, NaN/Inf, неположительные коэффициенты сплита.
    """

    pass


class DegenerateInput(BizMathError):
    """
    Вырожденные входные данные.

    Например, все значения domain одинаковы (Sxx = 0): деление дало бы Inf/NaN,
    поэтому slope считается неопределённым и результат не возвращается.
    """

    pass


class NoRealSolution(BizMathError):
    """Нет действительного решения (дискриминант < 0 или параллельные прямые)."""

    pass


class InsufficientData(BizMathError):
    """Недостаточно данных для вычисления (пустая серия, окно длиннее серии)."""

    pass


class TooManyWindows(InvalidInput):
    """Запрошено больше окон moving average, чем допускает chart."""

    pass
