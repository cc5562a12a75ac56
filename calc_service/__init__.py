"""Arithmetic expression calculator served over HTTP."""
from calc_service.errors import (
    ErrorKind, CalculationException, UnbalancedBracketsException,
    InsufficientValuesException, DivisionByZeroException,
    DisallowedCharacterException
)
from calc_service.calculation import calc, convert_to_postfix, evaluate_postfix, PRIORITY

__all__ = [
    'ErrorKind', 'CalculationException', 'UnbalancedBracketsException',
    'InsufficientValuesException', 'DivisionByZeroException',
    'DisallowedCharacterException',
    'calc', 'convert_to_postfix', 'evaluate_postfix', 'PRIORITY'
]
