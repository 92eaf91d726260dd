"""
Тесты для контракта routing_number

Проверяет:
1. Структурную валидацию (JSON Schema: required, pattern, enum)
2. Межполевые инварианты (micr, check_digit, fed_reserve_type, fed_reserve_bank)
3. Восстановление RoutingNumber из to_dict()
4. Ошибки загрузки схемы
"""

import json

import pytest
from jsonschema import SchemaError

from src.core.contracts import (
    ContractViolation,
    RoutingNumberContract,
    RoutingNumberContractError,
    load_routing_number,
    validate_routing_number,
)
from src.core.domain import parse_fraction, parse_micr


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def contract() -> RoutingNumberContract:
    return RoutingNumberContract()


@pytest.fixture
def valid_routing_number_data():
    """Валидный routing_number из MICR-формы."""
    return parse_micr("111000025").to_dict()


# =============================================================================
# ЗАГРУЗКА СХЕМЫ
# =============================================================================


class TestSchemaLoading:
    """Тесты загрузки схемы контракта"""

    def test_default_schema(self, contract: RoutingNumberContract) -> None:
        assert contract.schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
        assert contract.schema["title"] == "routing_number"

    def test_missing_schema(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            RoutingNumberContract(tmp_path / "missing.json")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(SchemaError):
            RoutingNumberContract(path)


# =============================================================================
# СТРУКТУРА
# =============================================================================


class TestStructuralViolations:
    """Нарушения JSON Schema"""

    def test_all_reserve_types_valid(self, contract: RoutingNumberContract) -> None:
        for micr in ("000000518", "011000015", "211000019", "721000017"):
            assert contract.is_valid(parse_micr(micr).to_dict())

    def test_fraction_origin_valid(self) -> None:
        validate_routing_number(parse_fraction("66-2/1110").to_dict())

    def test_missing_required_field(self, contract, valid_routing_number_data) -> None:
        del valid_routing_number_data["check_digit"]
        violations = contract.violations(valid_routing_number_data)
        assert len(violations) == 1
        assert violations[0].field == "$"
        assert violations[0].kind == "structural"

    def test_unknown_routing_symbol_range(self, contract, valid_routing_number_data) -> None:
        valid_routing_number_data["fed_routing_symbol"] = "1310"
        violations = contract.violations(valid_routing_number_data)
        assert [v.field for v in violations] == ["fed_routing_symbol"]

    def test_invalid_prefix_and_enum(self, contract, valid_routing_number_data) -> None:
        valid_routing_number_data["prefix"] = "06"
        valid_routing_number_data["fed_reserve_type"] = "TRAVELERS_CHECKS"
        violations = contract.violations(valid_routing_number_data)
        assert [v.field for v in violations] == ["fed_reserve_type", "prefix"]

    def test_additional_properties_rejected(self, contract, valid_routing_number_data) -> None:
        valid_routing_number_data["bank_name"] = "Unknown"
        assert not contract.is_valid(valid_routing_number_data)

    def test_not_a_mapping(self, contract: RoutingNumberContract) -> None:
        assert contract.violations("111000025")[0].kind == "structural"

    def test_semantic_checks_skipped_when_structure_broken(
        self, contract, valid_routing_number_data
    ) -> None:
        valid_routing_number_data["micr"] = "1234"
        valid_routing_number_data["check_digit"] = "6"
        violations = contract.violations(valid_routing_number_data)
        assert all(v.kind == "structural" for v in violations)


# =============================================================================
# МЕЖПОЛЕВЫЕ ИНВАРИАНТЫ
# =============================================================================


class TestSemanticViolations:
    """Инварианты, которые JSON Schema выразить не может"""

    def test_consistent_data_has_no_violations(self, contract, valid_routing_number_data) -> None:
        assert contract.semantic_violations(valid_routing_number_data) == []

    def test_wrong_check_digit(self, contract, valid_routing_number_data) -> None:
        """Структурно валидно, но 111000026 не проходит контрольную сумму"""
        valid_routing_number_data["check_digit"] = "6"
        valid_routing_number_data["micr"] = "111000026"
        violations = contract.violations(valid_routing_number_data)
        assert violations == [
            ContractViolation(
                field="check_digit",
                message="expected 5 for 11100002, got 6",
                kind="semantic",
            )
        ]

    def test_micr_disagrees_with_fields(self, contract, valid_routing_number_data) -> None:
        valid_routing_number_data["micr"] = "021000021"
        violations = contract.violations(valid_routing_number_data)
        assert [v.field for v in violations] == ["micr"]
        assert violations[0].message == "expected 111000025, got 021000021"

    def test_reserve_type_disagrees_with_symbol(self, contract, valid_routing_number_data) -> None:
        valid_routing_number_data["fed_reserve_type"] = "THRIFT"
        violations = contract.violations(valid_routing_number_data)
        assert [v.field for v in violations] == ["fed_reserve_type"]
        assert "expected PRIMARY for symbol 1110" in violations[0].message

    def test_reserve_bank_disagrees_with_symbol(self, contract, valid_routing_number_data) -> None:
        valid_routing_number_data["fed_reserve_bank"] = "BOSTON"
        violations = contract.violations(valid_routing_number_data)
        assert [v.field for v in violations] == ["fed_reserve_bank"]
        assert "expected DALLAS for symbol 1110" in violations[0].message

    def test_validate_raises_with_all_violations(self, valid_routing_number_data) -> None:
        valid_routing_number_data["micr"] = "111000026"
        valid_routing_number_data["fed_reserve_bank"] = "CHICAGO"
        with pytest.raises(RoutingNumberContractError) as exc_info:
            validate_routing_number(valid_routing_number_data)
        assert [v.field for v in exc_info.value.violations] == ["micr", "fed_reserve_bank"]
        assert "micr: expected 111000025" in str(exc_info.value)

    def test_contract_error_is_value_error(self, valid_routing_number_data) -> None:
        valid_routing_number_data["micr"] = "111000026"
        with pytest.raises(ValueError):
            validate_routing_number(valid_routing_number_data)


# =============================================================================
# ВОССТАНОВЛЕНИЕ
# =============================================================================


class TestLoadRoutingNumber:
    """Тесты для load_routing_number"""

    def test_micr_origin(self) -> None:
        original = parse_micr("021000021")
        assert load_routing_number(original.to_dict()) == original

    def test_prefix_preserved(self) -> None:
        original = parse_fraction("66-2/1110")
        restored = load_routing_number(original.to_dict())
        assert restored == original
        assert restored.to_fraction_string() == "66-2/1110"

    def test_survives_json_round_trip(self) -> None:
        original = parse_micr("611000017")
        restored = load_routing_number(json.loads(json.dumps(original.to_dict())))
        assert restored == original

    def test_inconsistent_data_rejected(self, valid_routing_number_data) -> None:
        valid_routing_number_data["fed_reserve_type"] = "GOVERNMENT"
        with pytest.raises(RoutingNumberContractError):
            load_routing_number(valid_routing_number_data)
