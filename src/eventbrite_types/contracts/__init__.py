"""
Contract Validation Module

Опциональная проверка сырых wire-объектов Eventbrite против JSON Schema
контрактов перед декодированием.
"""

from .validators import (
    CONTRACTS,
    SchemaLoader,
    check_contract,
    contract_for,
    default_loader,
    is_valid,
    iter_violations,
)

__all__ = [
    "CONTRACTS",
    "SchemaLoader",
    "check_contract",
    "contract_for",
    "default_loader",
    "is_valid",
    "iter_violations",
]
