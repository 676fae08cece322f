"""
SendFunds errors — типизированные ошибки сборки опций перевода.

Иерархия:
- SendFundsOptionsError (ValueError) — база
  - OptionArgumentError — неверные аргументы конструктора опции
    * MultipleColorsError
    * InvalidAmountError
  - AmountOverflowError — накопленная сумма вышла за диапазон
  - AggregateValidationError — собранные опции нарушают общий инвариант
    * NoDestinationError
    * TooManyDestinationsError
- BuilderStateError (RuntimeError) — операция над завершённым builder

Каждая ошибка несёт code (snake_case) для диагностики.
"""

from typing import Any


class SendFundsOptionsError(ValueError):
    """Базовая ошибка опций SendFunds."""

    code = "send_funds_options_error"


# =============================================================================
# ARGUMENT ERRORS
# =============================================================================


class OptionArgumentError(SendFundsOptionsError):
    """Неверные аргументы конструктора опции (обнаруживаются при создании)."""

    code = "option_argument_error"


class MultipleColorsError(OptionArgumentError):
    code = "multiple_colors"

    def __init__(self, colors_count: int):
        super().__init__(
            "providing more than one output color for the destination of funds is forbidden "
            f"(got {colors_count})"
        )
        self.colors_count = colors_count


class InvalidAmountError(OptionArgumentError):
    code = "invalid_amount"

    def __init__(self, amount: Any):
        super().__init__(
            f"the amount provided in the destinations needs to be larger than 0 "
            f"and fit the ledger range (got {amount!r})"
        )
        self.amount = amount


# =============================================================================
# APPLICATION ERRORS
# =============================================================================


class AmountOverflowError(SendFundsOptionsError):
    """Накопленная сумма (address, color) превысила max_amount."""

    code = "amount_overflow"

    def __init__(self, address: Any, color: Any, total: int, max_amount: int):
        super().__init__(
            f"cumulative amount {total} for destination {address} / color {color} "
            f"exceeds maximum {max_amount}"
        )
        self.address = address
        self.color = color
        self.total = total
        self.max_amount = max_amount


# =============================================================================
# AGGREGATE VALIDATION ERRORS
# =============================================================================


class AggregateValidationError(SendFundsOptionsError):
    """Ошибка финальной проверки собранных опций."""

    code = "aggregate_validation_error"


class NoDestinationError(AggregateValidationError):
    code = "no_destination"

    def __init__(self):
        super().__init__(
            "you need to provide at least one Destination for a valid transfer to be issued"
        )


class TooManyDestinationsError(AggregateValidationError):
    code = "too_many_destinations"

    def __init__(self, count: int, limit: int):
        super().__init__(f"{count} destination addresses exceed the limit of {limit}")
        self.count = count
        self.limit = limit


# =============================================================================
# BUILDER
# =============================================================================


class BuilderStateError(RuntimeError):
    """Builder уже в терминальном состоянии (VALIDATED/FAILED)."""

    code = "builder_terminal_state"
