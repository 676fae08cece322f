"""
Contract Validation Module

Модуль для валидации JSON контрактов вызова SendFunds.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SendFundsOptionsValidator,
    SendFundsRequestValidator,
    validate_send_funds_options,
    validate_send_funds_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SendFundsRequestValidator",
    "SendFundsOptionsValidator",
    # Functions
    "validate_send_funds_request",
    "validate_send_funds_options",
]
