"""
ABA Check Digit — контрольная сумма routing transit number

Взвешенная сумма ABA по 9 цифрам MICR-формы:
    3(d1 + d4 + d7) + 7(d2 + d5 + d8) + (d3 + d6 + d9) ≡ 0 (mod 10)

Контрольная цифра d9 вычисляется по первым 8 цифрам:
    d9 = (10 - (3(d1 + d4 + d7) + 7(d2 + d5 + d8) + (d3 + d6)) mod 10) mod 10

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат calculate_check_digit всегда в диапазоне 0..9 (10 сворачивается в 0)
2. Вес цифры зависит только от её позиции (3, 7, 1 по циклу)
3. Функции чистые и детерминированные
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Веса позиций d1..d9 (цикл 3, 7, 1)
ABA_WEIGHTS: Final[tuple[int, ...]] = (3, 7, 1, 3, 7, 1, 3, 7, 1)

# Длины полей MICR-формы
FED_ROUTING_SYMBOL_LENGTH: Final[int] = 4
ABA_INSTITUTION_LENGTH: Final[int] = 4
MICR_LENGTH: Final[int] = 9

_ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def is_ascii_digits(value: object, length: int) -> bool:
    """
    Проверка, что value — строка ровно из length ASCII-цифр.

    str.isdigit() не подходит: он принимает надстрочные и не-ASCII цифры.
    """
    return (
        isinstance(value, str)
        and len(value) == length
        and all(ch in _ASCII_DIGITS for ch in value)
    )


def weighted_sum(digits: str) -> int:
    """
    Взвешенная сумма ABA для первых len(digits) позиций.

    Args:
        digits: Строка ASCII-цифр длиной не более 9

    Returns:
        Сумма d_i * ABA_WEIGHTS[i]
    """
    return sum(int(ch) * weight for ch, weight in zip(digits, ABA_WEIGHTS))


# =============================================================================
# КОНТРОЛЬНАЯ ЦИФРА
# =============================================================================


def calculate_check_digit(fed_routing_symbol: str, aba_institution: str) -> int:
    """
    Вычисление контрольной цифры по routing symbol и institution identifier.

    Веса пересекают границу полей: d4 принадлежит routing symbol,
    d5..d8 — institution identifier.

    Если (сумма mod 10) == 0, формула 10 - 0 даёт 10; значение сворачивается
    в 0, иначе routing numbers с контрольной цифрой 0 были бы непредставимы.

    Args:
        fed_routing_symbol: 4 цифры (Federal Reserve Routing Symbol)
        aba_institution: 4 цифры (ABA Institution Identifier)

    Returns:
        Контрольная цифра 0..9

    Raises:
        ValueError: Если какое-либо поле не является строкой из 4 цифр

    Examples:
        >>> calculate_check_digit("1110", "0002")
        5
        >>> calculate_check_digit("0110", "0006")
        0
    """
    if not is_ascii_digits(fed_routing_symbol, FED_ROUTING_SYMBOL_LENGTH):
        raise ValueError(
            f"fed_routing_symbol must be {FED_ROUTING_SYMBOL_LENGTH} digits, "
            f"got {fed_routing_symbol!r}"
        )
    if not is_ascii_digits(aba_institution, ABA_INSTITUTION_LENGTH):
        raise ValueError(
            f"aba_institution must be {ABA_INSTITUTION_LENGTH} digits, "
            f"got {aba_institution!r}"
        )

    total = weighted_sum(fed_routing_symbol + aba_institution)
    return (10 - total % 10) % 10


def is_valid_micr_checksum(micr: object) -> bool:
    """
    Проверка контрольной суммы полной 9-значной MICR-строки.

    Не проверяет диапазон Federal Routing Symbol — только арифметику.

    Args:
        micr: Кандидат в MICR-строку

    Returns:
        True если micr — 9 ASCII-цифр и взвешенная сумма кратна 10
    """
    if not is_ascii_digits(micr, MICR_LENGTH):
        return False
    return weighted_sum(micr) % 10 == 0  # type: ignore[arg-type]
