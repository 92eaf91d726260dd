"""
Contract Validation Module

Контракт сериализованного routing number: JSON Schema + межполевые инварианты.
"""

from .validators import (
    ContractViolation,
    RoutingNumberContract,
    RoutingNumberContractError,
    load_routing_number,
    validate_routing_number,
)

__all__ = [
    # Classes
    "RoutingNumberContract",
    "ContractViolation",
    "RoutingNumberContractError",
    # Functions
    "validate_routing_number",
    "load_routing_number",
]
