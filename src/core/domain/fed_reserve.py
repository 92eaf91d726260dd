"""
FedReserve — классификация Federal Reserve Routing Symbol

Первые две цифры routing symbol определяют тип обработки и округ ФРС:
- 00      → GOVERNMENT (казначейство США)
- 01..12  → PRIMARY (основные банки округов 1..12)
- 21..32  → THRIFT (сберегательные учреждения, округ + 20)
- 61..72  → ELECTRONIC (электронные платежи, округ + 60)

Диапазоны 50-59 (internal use), 80 (travelers checks) и 81-92 (legacy)
не поддерживаются и отклоняются как невалидные.
"""

from enum import Enum
from typing import Final, Optional


# =============================================================================
# ENUMS
# =============================================================================


class FedReserveType(str, Enum):
    """Тип Federal Reserve по диапазону routing symbol"""

    GOVERNMENT = "GOVERNMENT"
    PRIMARY = "PRIMARY"
    THRIFT = "THRIFT"
    ELECTRONIC = "ELECTRONIC"


class FedReserveBank(str, Enum):
    """
    Банк Федерального резерва.

    Порядок членов (кроме GOVERNMENT) совпадает с официальной нумерацией
    округов Federal Reserve System (Federal Reserve Act, 1914):
    1 Boston, 2 New York, 3 Philadelphia, 4 Cleveland, 5 Richmond, 6 Atlanta,
    7 Chicago, 8 St. Louis, 9 Minneapolis, 10 Kansas City, 11 Dallas,
    12 San Francisco.
    """

    GOVERNMENT = "GOVERNMENT"
    BOSTON = "BOSTON"
    NEW_YORK = "NEW_YORK"
    PHILADELPHIA = "PHILADELPHIA"
    CLEVELAND = "CLEVELAND"
    RICHMOND = "RICHMOND"
    ATLANTA = "ATLANTA"
    CHICAGO = "CHICAGO"
    ST_LOUIS = "ST_LOUIS"
    MINNEAPOLIS = "MINNEAPOLIS"
    KANSAS_CITY = "KANSAS_CITY"
    DALLAS = "DALLAS"
    SAN_FRANCISCO = "SAN_FRANCISCO"


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================

# Замкнутые интервалы [low, high] для первых двух цифр routing symbol
FED_ROUTING_RANGES: Final[dict[FedReserveType, tuple[int, int]]] = {
    FedReserveType.GOVERNMENT: (0, 0),
    FedReserveType.PRIMARY: (1, 12),
    FedReserveType.THRIFT: (21, 32),
    FedReserveType.ELECTRONIC: (61, 72),
}

# Смещение номера округа относительно начала диапазона
_DISTRICT_OFFSETS: Final[dict[FedReserveType, int]] = {
    FedReserveType.PRIMARY: 0,
    FedReserveType.THRIFT: 20,
    FedReserveType.ELECTRONIC: 60,
}

# Банки в порядке номеров округов 1..12
_DISTRICT_BANKS: Final[tuple[FedReserveBank, ...]] = tuple(
    bank for bank in FedReserveBank if bank is not FedReserveBank.GOVERNMENT
)


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def routing_symbol_prefix(fed_routing_symbol: str) -> int:
    """
    Первые две цифры routing symbol как целое число.

    Raises:
        ValueError: Если первые два символа не являются ASCII-цифрами
    """
    head = fed_routing_symbol[:2]
    if len(head) != 2 or not all("0" <= ch <= "9" for ch in head):
        raise ValueError(f"Routing symbol must start with two digits, got {fed_routing_symbol!r}")
    return int(head)


def classify_routing_symbol(fed_routing_symbol: str) -> Optional[FedReserveType]:
    """
    Тип Federal Reserve для routing symbol.

    Args:
        fed_routing_symbol: 4-значный routing symbol

    Returns:
        FedReserveType или None, если префикс вне всех известных диапазонов
    """
    prefix = routing_symbol_prefix(fed_routing_symbol)
    for reserve_type, (low, high) in FED_ROUTING_RANGES.items():
        if low <= prefix <= high:
            return reserve_type
    return None


def is_valid_routing_symbol(fed_routing_symbol: str) -> bool:
    """Попадает ли routing symbol в один из четырёх диапазонов"""
    return classify_routing_symbol(fed_routing_symbol) is not None


def fed_reserve_bank_for(fed_routing_symbol: str) -> FedReserveBank:
    """
    Банк ФРС (округ) для routing symbol.

    Округ = префикс - смещение диапазона (0 / 20 / 60). Первые две цифры
    routing symbol кодируют номер округа по нумерации Federal Reserve
    System (1 Boston ... 12 San Francisco); THRIFT и ELECTRONIC добавляют
    к нему 20 и 60 соответственно (ABA Key to Routing Numbers).
    Реестр отдельных учреждений не используется.

    Raises:
        ValueError: Если routing symbol вне известных диапазонов
    """
    reserve_type = classify_routing_symbol(fed_routing_symbol)
    if reserve_type is None:
        raise ValueError(f"Routing symbol {fed_routing_symbol!r} is outside known ranges")
    if reserve_type is FedReserveType.GOVERNMENT:
        return FedReserveBank.GOVERNMENT

    district = routing_symbol_prefix(fed_routing_symbol) - _DISTRICT_OFFSETS[reserve_type]
    return _DISTRICT_BANKS[district - 1]
