"""
Brazilian taxpayer identifier rules.

- cpf: individual taxpayer ID (11 digits, two mod-11 check digits)
- cnpj: company taxpayer ID (14 digits, two mod-11 check digits)

Both rules read the fixed 'cpf' / 'cnpj' keys of the value bag, not the
schema field that named them. A schema binding either rule to another
field name validates whatever sits under the fixed key.

The two rules short-circuit differently and are kept that way:
- cpf rejects only "00000000000"; other repeated-digit numbers reach the
  checksum (and satisfy it).
- cnpj treats malformed input (empty, unsupported type, wrong digit count,
  14 identical digits) as valid and only flags a check-digit mismatch.
"""

import re
from typing import Any, List
from modules.validation.core.base import RuleKind
from modules.validation.core.registry import register_rule
from shared.utils.config import settings
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

CPF_KEY = "cpf"
CNPJ_KEY = "cnpj"

CPF_LENGTH = 11
CNPJ_LENGTH = 14
CPF_ALL_ZEROS = "0" * CPF_LENGTH

NON_DIGITS = re.compile(r'[^0-9]+')
DIGIT = re.compile(r'[0-9]')


def _as_text(value: Any) -> str:
    """Text form of an identifier given as str, number or digit sequence"""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _cpf_check_digit(digits: str, length: int) -> int:
    """
    Check digit over the first `length` digits.

    Weights run from length + 1 down to 2.
    """
    total = sum(
        int(digit) * weight
        for digit, weight in zip(digits[:length], range(length + 1, 1, -1))
    )
    remainder = (total * 10) % 11
    return 0 if remainder in (10, 11) else remainder


@register_rule(RuleKind.CPF, value_key=CPF_KEY)
def cpf(value: Any = None) -> bool:
    """
    Validate a CPF number.

    Punctuation is ignored ("529.982.247-25" and "52998224725" are the same).
    Digits past the eleventh are not inspected.

    Returns:
        True when the number is invalid
    """
    if value is not None and not isinstance(value, str) and settings.LOG_VALUE_ANOMALIES:
        logger.debug(f"cpf rule received {type(value).__name__}, validating its text form")

    digits = NON_DIGITS.sub("", _as_text(value))

    if digits == CPF_ALL_ZEROS:
        return True

    if len(digits) < CPF_LENGTH:
        return True

    if _cpf_check_digit(digits, 9) != int(digits[9]):
        return True

    return _cpf_check_digit(digits, 10) != int(digits[10])


def _cnpj_check_digit(numbers: List[int], length: int) -> int:
    """
    Check digit over the first `length` digits.

    Weights start at length - 7, count down to 2 and wrap around to 9.
    """
    factor = length - 7
    total = 0

    for number in numbers[:length]:
        total += number * factor
        factor -= 1
        if factor < 2:
            factor = 9

    result = 11 - (total % 11)
    return 0 if result > 9 else result


@register_rule(RuleKind.CNPJ, value_key=CNPJ_KEY)
def cnpj(value: Any = None) -> bool:
    """
    Validate a CNPJ number.

    Accepts a string, an integer or a sequence of digits. Only a check-digit
    mismatch is reported as invalid; anything that cannot be checked passes.

    Returns:
        True when the number is invalid
    """
    if not value:
        return False

    is_integral = (
        isinstance(value, int)
        or (isinstance(value, float) and value.is_integer())
    )
    if isinstance(value, bool) or not (isinstance(value, (str, list, tuple)) or is_integral):
        if settings.LOG_VALUE_ANOMALIES:
            logger.debug(f"cnpj rule skipped unsupported type {type(value).__name__}")
        return False

    numbers = [int(digit) for digit in DIGIT.findall(_as_text(value))]

    if len(numbers) != CNPJ_LENGTH:
        return False

    if len(set(numbers)) == 1:
        return False

    if _cnpj_check_digit(numbers, 12) != numbers[12]:
        return True

    return _cnpj_check_digit(numbers, 13) != numbers[13]
