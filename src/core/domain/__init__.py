"""
Domain models and value objects.

Contains the RoutingNumber value type and Federal Reserve classification.
"""

from src.core.domain.fed_reserve import (
    FED_ROUTING_RANGES,
    FedReserveBank,
    FedReserveType,
    classify_routing_symbol,
    fed_reserve_bank_for,
    is_valid_routing_symbol,
)
from src.core.domain.routing_number import (
    CheckDigitMismatchError,
    InvalidFormatError,
    InvalidInputError,
    InvalidRoutingSymbolError,
    RoutingNumber,
    RoutingNumberParseError,
    RoutingNumberParseResult,
    parse_fraction,
    parse_micr,
    try_parse_fraction,
    try_parse_micr,
)

__all__ = [
    # Fed reserve classification
    "FED_ROUTING_RANGES",
    "FedReserveType",
    "FedReserveBank",
    "classify_routing_symbol",
    "fed_reserve_bank_for",
    "is_valid_routing_symbol",
    # Routing number model
    "RoutingNumber",
    "RoutingNumberParseResult",
    "parse_micr",
    "parse_fraction",
    "try_parse_micr",
    "try_parse_fraction",
    # Errors
    "RoutingNumberParseError",
    "InvalidInputError",
    "InvalidFormatError",
    "InvalidRoutingSymbolError",
    "CheckDigitMismatchError",
]
