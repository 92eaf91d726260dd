"""
RoutingNumber — Модель U.S. Routing Transit Number (RTN)

Immutable Pydantic модель routing number. Создаётся через parse-функции:
- parse_micr: 9-значная MICR-форма SSSSIIIIC
- parse_fraction: дробная форма [PP-]N/M (institution / routing symbol)

Порядок проверок при parse:
1. Наличие входа (None → InvalidInputError)
2. Формат (regex → InvalidFormatError)
3. Диапазон Federal Routing Symbol (→ InvalidRoutingSymbolError)
4. Контрольная цифра, только MICR (→ CheckDigitMismatchError)
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Final, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.domain.fed_reserve import (
    FedReserveBank,
    FedReserveType,
    classify_routing_symbol,
    fed_reserve_bank_for,
)
from src.core.math.check_digit import (
    ABA_INSTITUTION_LENGTH,
    FED_ROUTING_SYMBOL_LENGTH,
    calculate_check_digit as compute_check_digit,
)


# =============================================================================
# ФОРМАТЫ
# =============================================================================

# SSSS IIII C, только ASCII-цифры, без разделителей
MICR_PATTERN: Final[re.Pattern[str]] = re.compile(r"^([0-9]{4})([0-9]{4})([0-9])$")

# [PP-]NNNN/MMMM: prefix 1-2 цифры без ведущего нуля, numerator/denominator 1-4 цифры
FRACTION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:([1-9][0-9]?)-)?([0-9]{1,4})/([0-9]{1,4})$"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RoutingNumberParseError(ValueError):
    """Базовая ошибка разбора routing number"""

    pass


class InvalidInputError(RoutingNumberParseError):
    """Вход отсутствует (None)"""

    pass


class InvalidFormatError(RoutingNumberParseError):
    """Вход не соответствует MICR или дробному формату"""

    pass


class InvalidRoutingSymbolError(RoutingNumberParseError):
    """Первые две цифры routing symbol вне GOVERNMENT/PRIMARY/THRIFT/ELECTRONIC"""

    pass


class CheckDigitMismatchError(RoutingNumberParseError):
    """Контрольная цифра MICR-строки не совпадает с вычисленной"""

    def __init__(self, expected: int, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Check Digit not correct: expected {expected}, got {actual}")


# =============================================================================
# ROUTING NUMBER MODEL
# =============================================================================


class RoutingNumber(BaseModel):
    """
    U.S. Routing Transit Number.

    Immutable модель (frozen=True). Содержит:
    - fed_routing_symbol: 4 цифры, округ и тип обработки ФРС
    - aba_institution: 4 цифры, идентификатор учреждения
    - check_digit: 1 цифра, всегда согласована с двумя полями выше
    - prefix: 1-2 цифры, только для значений из дробной формы

    Инварианты проверяются model_validator, поэтому невалидный экземпляр
    нельзя создать и прямым конструктором (pydantic ValidationError).
    """

    fed_routing_symbol: str = Field(
        ..., pattern=r"^[0-9]{4}$", description="Federal Reserve Routing Symbol"
    )
    aba_institution: str = Field(
        ..., pattern=r"^[0-9]{4}$", description="ABA Institution Identifier"
    )
    check_digit: str = Field(..., pattern=r"^[0-9]$", description="Check Digit")
    prefix: Optional[str] = Field(
        None, pattern=r"^[1-9][0-9]?$", description="Префикс дробной формы"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_invariants(self) -> "RoutingNumber":
        """Диапазон routing symbol и согласованность контрольной цифры"""
        if classify_routing_symbol(self.fed_routing_symbol) is None:
            raise ValueError("Invalid Federal Routing Symbol")

        expected = compute_check_digit(self.fed_routing_symbol, self.aba_institution)
        if int(self.check_digit) != expected:
            raise ValueError(
                f"Check Digit not correct: expected {expected}, got {self.check_digit}"
            )
        return self

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    @classmethod
    def parse_micr(cls, text: Optional[str]) -> "RoutingNumber":
        """
        Разбор 9-значной MICR-формы.

        Args:
            text: Строка вида SSSSIIIIC

        Returns:
            RoutingNumber с prefix=None

        Raises:
            InvalidInputError: text is None
            InvalidFormatError: не 9 ASCII-цифр
            InvalidRoutingSymbolError: routing symbol вне известных диапазонов
            CheckDigitMismatchError: контрольная цифра не совпадает
        """
        if text is None:
            raise InvalidInputError("Null MICR")
        match = MICR_PATTERN.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidFormatError("Invalid MICR format")

        fed_routing_symbol, aba_institution, check_digit = match.groups()
        _require_known_routing_symbol(fed_routing_symbol)

        expected = compute_check_digit(fed_routing_symbol, aba_institution)
        if int(check_digit) != expected:
            raise CheckDigitMismatchError(expected, check_digit)

        return cls(
            fed_routing_symbol=fed_routing_symbol,
            aba_institution=aba_institution,
            check_digit=check_digit,
        )

    @classmethod
    def parse_fraction(cls, text: Optional[str]) -> "RoutingNumber":
        """
        Разбор дробной формы [PP-]N/M.

        Numerator → aba_institution, denominator → fed_routing_symbol
        (оба дополняются нулями до 4 цифр). Контрольная цифра вычисляется,
        prefix сохраняется без разделителя.

        Raises:
            InvalidInputError: text is None
            InvalidFormatError: строка не соответствует [PP-]N/M
            InvalidRoutingSymbolError: routing symbol вне известных диапазонов
        """
        if text is None:
            raise InvalidInputError("Null fraction")
        match = FRACTION_PATTERN.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidFormatError("Invalid fraction format")

        prefix, numerator, denominator = match.groups()
        fed_routing_symbol = denominator.zfill(FED_ROUTING_SYMBOL_LENGTH)
        aba_institution = numerator.zfill(ABA_INSTITUTION_LENGTH)
        _require_known_routing_symbol(fed_routing_symbol)

        check_digit = compute_check_digit(fed_routing_symbol, aba_institution)
        return cls(
            fed_routing_symbol=fed_routing_symbol,
            aba_institution=aba_institution,
            check_digit=str(check_digit),
            prefix=prefix,
        )

    @classmethod
    def parse(cls, text: Optional[str]) -> "RoutingNumber":
        """Разбор любой из двух форм: дробная, если в строке есть '/'"""
        if isinstance(text, str) and "/" in text:
            return cls.parse_fraction(text)
        return cls.parse_micr(text)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_fed_routing_symbol(self) -> str:
        return self.fed_routing_symbol

    def get_aba_institution(self) -> str:
        return self.aba_institution

    def get_check_digit(self) -> str:
        return self.check_digit

    def calculate_check_digit(self) -> int:
        """Контрольная цифра, вычисленная по routing symbol и institution (0..9)"""
        return compute_check_digit(self.fed_routing_symbol, self.aba_institution)

    def get_federal_reserve_type(self) -> FedReserveType:
        """
        Тип Federal Reserve по первым двум цифрам routing symbol.

        Всегда определён для экземпляров, прошедших валидацию.

        Raises:
            InvalidRoutingSymbolError: Экземпляр создан в обход валидации
                (model_construct) с routing symbol вне диапазонов
        """
        reserve_type = classify_routing_symbol(self.fed_routing_symbol)
        if reserve_type is None:
            raise InvalidRoutingSymbolError("Invalid Federal Routing Symbol")
        return reserve_type

    def get_federal_reserve_bank(self) -> FedReserveBank:
        """Банк ФРС (округ 1..12) или GOVERNMENT для префикса 00"""
        return fed_reserve_bank_for(self.fed_routing_symbol)

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def to_micr_string(self) -> str:
        """
        MICR-форма SSSSIIIIC.

        Returns:
            9 цифр без разделителей
        """
        return f"{self.fed_routing_symbol}{self.aba_institution}{self.check_digit}"

    def to_fraction_string(self) -> str:
        """
        Дробная форма [PP-]N/M без ведущих нулей.

        Returns:
            Например, "2/1110" или "66-2/1110"
        """
        fraction = f"{int(self.aba_institution)}/{int(self.fed_routing_symbol)}"
        if self.prefix is not None:
            return f"{self.prefix}-{fraction}"
        return fraction

    def to_dict(self) -> dict[str, Any]:
        """Сериализация по контракту routing_number.json"""
        return {
            "fed_routing_symbol": self.fed_routing_symbol,
            "aba_institution": self.aba_institution,
            "check_digit": self.check_digit,
            "prefix": self.prefix,
            "micr": self.to_micr_string(),
            "fed_reserve_type": self.get_federal_reserve_type().value,
            "fed_reserve_bank": self.get_federal_reserve_bank().value,
        }

    def __str__(self) -> str:
        return self.to_micr_string()


def _require_known_routing_symbol(fed_routing_symbol: str) -> None:
    if classify_routing_symbol(fed_routing_symbol) is None:
        raise InvalidRoutingSymbolError("Invalid Federal Routing Symbol")


# =============================================================================
# PARSE RESULT
# =============================================================================


@dataclass(frozen=True)
class RoutingNumberParseResult:
    """Результат разбора без исключений: ровно одно из routing_number / error"""

    ok: bool
    routing_number: Optional[RoutingNumber]
    error: Optional[RoutingNumberParseError]

    # Детали
    details: str

    def __post_init__(self) -> None:
        if (self.routing_number is None) == (self.error is None):
            raise ValueError("Exactly one of routing_number and error must be set")
        if self.ok != (self.routing_number is not None):
            raise ValueError(f"ok={self.ok} does not match routing_number presence")


def _to_result(
    parser: Callable[[Optional[str]], RoutingNumber], text: Optional[str]
) -> RoutingNumberParseResult:
    try:
        routing_number = parser(text)
    except RoutingNumberParseError as e:
        return RoutingNumberParseResult(
            ok=False,
            routing_number=None,
            error=e,
            details=f"{type(e).__name__}: {e}",
        )
    return RoutingNumberParseResult(
        ok=True,
        routing_number=routing_number,
        error=None,
        details=f"parsed {routing_number.to_micr_string()}",
    )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def parse_micr(text: Optional[str]) -> RoutingNumber:
    """См. RoutingNumber.parse_micr"""
    return RoutingNumber.parse_micr(text)


def parse_fraction(text: Optional[str]) -> RoutingNumber:
    """См. RoutingNumber.parse_fraction"""
    return RoutingNumber.parse_fraction(text)


def try_parse_micr(text: Optional[str]) -> RoutingNumberParseResult:
    """parse_micr без исключений"""
    return _to_result(RoutingNumber.parse_micr, text)


def try_parse_fraction(text: Optional[str]) -> RoutingNumberParseResult:
    """parse_fraction без исключений"""
    return _to_result(RoutingNumber.parse_fraction, text)
