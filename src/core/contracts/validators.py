"""
RoutingNumber Contract — проверка сериализованного routing number

Двухступенчатая проверка словаря из RoutingNumber.to_dict():
1. Структура: JSON Schema (schema/routing_number.json) через jsonschema
2. Семантика: межполевые инварианты, которые схема выразить не может
   - micr == fed_routing_symbol + aba_institution + check_digit
   - check_digit совпадает с контрольной суммой ABA
   - fed_reserve_type / fed_reserve_bank соответствуют routing symbol

Семантические проверки выполняются только для структурно валидных данных.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Final, List, Optional

from jsonschema import Draft202012Validator

from src.core.domain.fed_reserve import classify_routing_symbol, fed_reserve_bank_for
from src.core.domain.routing_number import RoutingNumber
from src.core.math.check_digit import calculate_check_digit

SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "routing_number.json"


# =============================================================================
# НАРУШЕНИЯ
# =============================================================================


@dataclass(frozen=True)
class ContractViolation:
    """Одно нарушение контракта."""

    field: str
    message: str

    # structural (JSON Schema) или semantic (межполевой инвариант)
    kind: str


class RoutingNumberContractError(ValueError):
    """Данные не соответствуют контракту routing_number"""

    def __init__(self, violations: List[ContractViolation]):
        self.violations = violations
        summary = "; ".join(f"{v.field}: {v.message}" for v in violations)
        super().__init__(f"routing_number contract violated: {summary}")


# =============================================================================
# CONTRACT
# =============================================================================


class RoutingNumberContract:
    """
    Контракт сериализованного RoutingNumber.

    Схема читается и проходит meta-validation один раз при создании.
    """

    def __init__(self, schema_path: Optional[Path] = None):
        """
        Args:
            schema_path: Путь к JSON Schema (default: schema/routing_number.json)

        Raises:
            FileNotFoundError: Если файл схемы не найден
            jsonschema.SchemaError: Если схема невалидна
        """
        path = schema_path or SCHEMA_PATH
        with open(path, "r", encoding="utf-8") as f:
            self.schema: Dict[str, Any] = json.load(f)
        Draft202012Validator.check_schema(self.schema)
        self._validator = Draft202012Validator(self.schema)

    def structural_violations(self, data: Any) -> List[ContractViolation]:
        """Нарушения JSON Schema, отсортированные по пути поля"""
        violations = [
            ContractViolation(
                field=".".join(str(p) for p in error.absolute_path) or "$",
                message=error.message,
                kind="structural",
            )
            for error in self._validator.iter_errors(data)
        ]
        return sorted(violations, key=lambda v: v.field)

    def semantic_violations(self, data: Dict[str, Any]) -> List[ContractViolation]:
        """
        Межполевые инварианты. Ожидает структурно валидные данные.

        Returns:
            Список нарушений (пустой, если данные согласованы)
        """
        symbol = data["fed_routing_symbol"]
        institution = data["aba_institution"]
        violations: List[ContractViolation] = []

        def violation(field: str, message: str) -> None:
            violations.append(ContractViolation(field=field, message=message, kind="semantic"))

        expected_digit = str(calculate_check_digit(symbol, institution))
        if data["check_digit"] != expected_digit:
            violation(
                "check_digit",
                f"expected {expected_digit} for {symbol}{institution}, got {data['check_digit']}",
            )

        expected_micr = f"{symbol}{institution}{data['check_digit']}"
        if data["micr"] != expected_micr:
            violation("micr", f"expected {expected_micr}, got {data['micr']}")

        reserve_type = classify_routing_symbol(symbol)
        if reserve_type is None or data["fed_reserve_type"] != reserve_type.value:
            expected = reserve_type.value if reserve_type else None
            violation(
                "fed_reserve_type",
                f"expected {expected} for symbol {symbol}, got {data['fed_reserve_type']}",
            )
        elif data["fed_reserve_bank"] != fed_reserve_bank_for(symbol).value:
            violation(
                "fed_reserve_bank",
                f"expected {fed_reserve_bank_for(symbol).value} for symbol {symbol}, "
                f"got {data['fed_reserve_bank']}",
            )

        return violations

    def violations(self, data: Any) -> List[ContractViolation]:
        """Все нарушения: структурные, а при их отсутствии — семантические"""
        structural = self.structural_violations(data)
        if structural:
            return structural
        return self.semantic_violations(data)

    def is_valid(self, data: Any) -> bool:
        return not self.violations(data)

    def validate(self, data: Any) -> None:
        """
        Raises:
            RoutingNumberContractError: Если есть хотя бы одно нарушение
        """
        violations = self.violations(data)
        if violations:
            raise RoutingNumberContractError(violations)

    def load(self, data: Any) -> RoutingNumber:
        """
        Восстановление RoutingNumber из сериализованного словаря.

        Производные поля (micr, fed_reserve_type, fed_reserve_bank) только
        проверяются, модель строится из четырёх исходных полей.

        Raises:
            RoutingNumberContractError: Если данные нарушают контракт
        """
        self.validate(data)
        return RoutingNumber(
            fed_routing_symbol=data["fed_routing_symbol"],
            aba_institution=data["aba_institution"],
            check_digit=data["check_digit"],
            prefix=data["prefix"],
        )


# Глобальный экземпляр контракта
_CONTRACT = RoutingNumberContract()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_routing_number(data: Any) -> None:
    """
    Проверка сериализованного routing number (структура + семантика).

    Raises:
        RoutingNumberContractError: Если данные нарушают контракт
    """
    _CONTRACT.validate(data)


def load_routing_number(data: Any) -> RoutingNumber:
    """Восстановление RoutingNumber из RoutingNumber.to_dict()"""
    return _CONTRACT.load(data)
