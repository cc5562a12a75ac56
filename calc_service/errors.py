from enum import Enum


class ErrorKind(Enum):
    UNBALANCED_BRACKETS = "unbalanced_brackets"
    INSUFFICIENT_VALUES = "insufficient_values"
    DIVISION_BY_ZERO = "division_by_zero"
    DISALLOWED_CHARACTER = "disallowed_character"
    INTERNAL = "internal"


ERROR_MESSAGES = {
    ErrorKind.UNBALANCED_BRACKETS: "Неверно. Количество скобок не совпадает",
    ErrorKind.INSUFFICIENT_VALUES: "Неверно. Недостаточно значений",
    ErrorKind.DIVISION_BY_ZERO: "Неверно. Деление на ноль",
    ErrorKind.DISALLOWED_CHARACTER: "Недопустимо. Допускаются только числа и ( ) + - * /",
    ErrorKind.INTERNAL: "Внутренняя ошибка сервера",
}


class CalculationException(Exception):
    kind = ErrorKind.INTERNAL

    def __init__(self, message=None):
        self.message = message or self.kind.value.replace("_", " ")
        super().__init__(self.message)


class UnbalancedBracketsException(CalculationException):
    kind = ErrorKind.UNBALANCED_BRACKETS


class InsufficientValuesException(CalculationException):
    kind = ErrorKind.INSUFFICIENT_VALUES


class DivisionByZeroException(CalculationException):
    kind = ErrorKind.DIVISION_BY_ZERO


class DisallowedCharacterException(CalculationException):
    kind = ErrorKind.DISALLOWED_CHARACTER


EXCEPTIONS = {
    exc.kind: exc
    for exc in (
        UnbalancedBracketsException,
        InsufficientValuesException,
        DivisionByZeroException,
        DisallowedCharacterException,
    )
}


class LoadingException(Exception):
    def __init__(self, message):
        self.message = message
        super().__init__(message)


class ServiceException(Exception):
    def __init__(self, status_code, message):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class ServiceUnavailableException(ServiceException):
    def __init__(self, attempts, message):
        self.attempts = attempts
        super().__init__(None, message)
