"""
SendFundsRequest — JSON-форма вызова SendFunds

Payload — упорядоченный список tagged variants:
- {"type": "destination", "address": <hex>, "amount": <int>, "color": <hex|null>}
- {"type": "remainder", "address": <hex>}

Порядок списка = порядок применения опций (важно для remainder:
последний выигрывает).

Путь обработки:
1. JSON Schema контракт send_funds_request (jsonschema)
2. Pydantic модели (discriminated union по полю type)
3. Конверсия в опции и build_options
"""

import logging
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from src.core.contracts import validate_send_funds_request
from src.core.domain.address import Address
from src.core.domain.amounts import MAX_AMOUNT
from src.core.domain.color import Color
from src.wallet.sendfunds_options import (
    SendFundsOption,
    SendFundsOptions,
    SendFundsOptionsConfig,
    build_options,
    destination,
    remainder,
)

logger = logging.getLogger(__name__)


# =============================================================================
# SPECS
# =============================================================================


class DestinationSpec(BaseModel):
    """Destination: сумма одного цвета на один адрес."""

    type: Literal["destination"] = "destination"
    address: str = Field(..., pattern="^[0-9a-f]{66}$", description="Адрес получателя (hex)")
    amount: int = Field(..., strict=True, gt=0, le=MAX_AMOUNT, description="Сумма в минимальных единицах")
    color: Optional[str] = Field(
        None, pattern="^[0-9a-f]{64}$", description="Цвет (hex), null — нативный актив"
    )

    model_config = {"frozen": True}

    def to_option(self) -> SendFundsOption:
        colors = [Color.from_hex(self.color)] if self.color is not None else []
        return destination(Address.from_hex(self.address), self.amount, *colors)


class RemainderSpec(BaseModel):
    """Remainder: адрес для сдачи."""

    type: Literal["remainder"] = "remainder"
    address: str = Field(..., pattern="^[0-9a-f]{66}$", description="Адрес сдачи (hex)")

    model_config = {"frozen": True}

    def to_option(self) -> SendFundsOption:
        return remainder(Address.from_hex(self.address))


OptionSpec = Annotated[Union[DestinationSpec, RemainderSpec], Field(discriminator="type")]


class SendFundsRequest(BaseModel):
    """Запрос SendFunds: упорядоченный список спецификаций опций."""

    options: List[OptionSpec] = Field(default_factory=list, description="Опции в порядке применения")

    model_config = {"frozen": True}

    def to_options(self) -> List[SendFundsOption]:
        return [spec.to_option() for spec in self.options]


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_options_from_request(
    payload: Dict[str, Any],
    config: Optional[SendFundsOptionsConfig] = None,
) -> SendFundsOptions:
    """
    Сборка SendFundsOptions из JSON payload.

    Args:
        payload: Данные запроса (dict)
        config: Конфигурация сборки (опционально)

    Returns:
        Проверенный SendFundsOptions

    Raises:
        jsonschema.ValidationError: Payload не соответствует контракту
        pydantic.ValidationError: Payload не разбирается в модели
        SendFundsOptionsError: Ошибка сборки опций
    """
    validate_send_funds_request(payload)
    request = SendFundsRequest.model_validate(payload)
    logger.debug("send funds request parsed: %d option specs", len(request.options))

    return build_options(*request.to_options(), config=config)
