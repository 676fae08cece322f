"""Wallet — параметры вызова SendFunds.

- Функциональные опции destination/remainder и агрегатор build_options
- Chainable builder с state machine
- JSON-форма запроса (SendFundsRequest)
"""

from .builder import BuildState, SendFundsOptionsBuilder
from .errors import (
    AggregateValidationError,
    AmountOverflowError,
    BuilderStateError,
    InvalidAmountError,
    MultipleColorsError,
    NoDestinationError,
    OptionArgumentError,
    SendFundsOptionsError,
    TooManyDestinationsError,
)
from .request import (
    DestinationSpec,
    RemainderSpec,
    SendFundsRequest,
    build_options_from_request,
)
from .sendfunds_options import (
    SendFundsOption,
    SendFundsOptions,
    SendFundsOptionsConfig,
    SendFundsOptionsDraft,
    build_options,
    destination,
    option_error,
    remainder,
)

__all__ = [
    # Options
    "SendFundsOption",
    "SendFundsOptions",
    "SendFundsOptionsConfig",
    "SendFundsOptionsDraft",
    "build_options",
    "destination",
    "remainder",
    "option_error",
    # Builder
    "BuildState",
    "SendFundsOptionsBuilder",
    # Request
    "DestinationSpec",
    "RemainderSpec",
    "SendFundsRequest",
    "build_options_from_request",
    # Errors
    "SendFundsOptionsError",
    "OptionArgumentError",
    "MultipleColorsError",
    "InvalidAmountError",
    "AmountOverflowError",
    "AggregateValidationError",
    "NoDestinationError",
    "TooManyDestinationsError",
    "BuilderStateError",
]
