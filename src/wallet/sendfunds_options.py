"""SendFunds options — параметры вызова SendFunds в виде функциональных опций.

Опция — отложенная мутация над черновиком (SendFundsOptionsDraft).
Ошибки аргументов обнаруживаются при создании опции и упаковываются
в опцию, которая всегда падает при применении (option_error). Поэтому
build_options обрабатывает обе категории ошибок одним путём.

Порядок build_options:
1. Новый пустой черновик
2. Применение опций по порядку, первая ошибка прерывает сборку
3. Финальная проверка (хотя бы один destination)
4. Заморозка черновика в SendFundsOptions
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from src.core.domain.address import Address
from src.core.domain.amounts import MAX_AMOUNT, fits_amount_range, is_valid_amount
from src.core.domain.color import COLOR_IOTA, Color
from src.wallet.errors import (
    AmountOverflowError,
    InvalidAmountError,
    MultipleColorsError,
    NoDestinationError,
    SendFundsOptionsError,
    TooManyDestinationsError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SendFundsOptionsConfig:
    """Конфигурация сборки опций.

    max_destinations=None — без ограничения числа адресов.
    """

    # Верхняя граница накопленной суммы одного (address, color)
    max_amount: int = MAX_AMOUNT

    # Максимум различных адресов получателей
    max_destinations: Optional[int] = None


# =============================================================================
# DRAFT / RESULT
# =============================================================================


@dataclass
class SendFundsOptionsDraft:
    """Черновик опций: принадлежит build_options на время сборки."""

    destinations: Dict[Address, Dict[Color, int]] = field(default_factory=dict)
    remainder_address: Address = field(default_factory=Address.empty)
    max_amount: int = MAX_AMOUNT

    def freeze(self) -> "SendFundsOptions":
        return SendFundsOptions(
            destinations=MappingProxyType(
                {
                    address: MappingProxyType(dict(amounts))
                    for address, amounts in self.destinations.items()
                }
            ),
            remainder_address=self.remainder_address,
        )


@dataclass(frozen=True)
class SendFundsOptions:
    """Проверенные опции SendFunds — единственный вход transaction builder."""

    destinations: Mapping[Address, Mapping[Color, int]]
    remainder_address: Address

    # MappingProxyType не hashable, поэтому и запись не hashable
    __hash__ = None

    def has_remainder_address(self) -> bool:
        return not self.remainder_address.is_empty()

    def required_balances(self) -> Dict[Color, int]:
        """
        Суммарная потребность по каждому цвету по всем destinations.

        Returns:
            color → сумма, которую должны покрыть входы транзакции
        """
        totals: Dict[Color, int] = {}
        for amounts in self.destinations.values():
            for color, amount in amounts.items():
                totals[color] = totals.get(color, 0) + amount

        return totals

    def to_dict(self) -> Dict[str, Any]:
        """JSON-представление по контракту send_funds_options."""
        return {
            "destinations": {
                address.hex(): {color.hex(): amount for color, amount in amounts.items()}
                for address, amounts in self.destinations.items()
            },
            "remainder_address": (
                self.remainder_address.hex() if self.has_remainder_address() else None
            ),
        }


SendFundsOption = Callable[[SendFundsOptionsDraft], None]


# =============================================================================
# OPTIONS
# =============================================================================


def destination(address: Address, amount: int, *colors: Color) -> SendFundsOption:
    """
    Опция: перевести amount цвета color на address.

    Повторные вызовы для той же пары (address, color) складываются.

    Args:
        address: Адрес получателя (не проверяется)
        amount: Сумма > 0
        colors: Не более одного цвета, по умолчанию COLOR_IOTA

    Returns:
        Опция; при неверных аргументах — опция, всегда возвращающая ошибку
    """
    if len(colors) > 1:
        return option_error(MultipleColorsError(len(colors)))
    output_color = colors[0] if colors else COLOR_IOTA

    if not is_valid_amount(amount):
        return option_error(InvalidAmountError(amount))

    def apply(draft: SendFundsOptionsDraft) -> None:
        current = draft.destinations.get(address, {}).get(output_color, 0)
        total = current + amount
        if not fits_amount_range(total, draft.max_amount):
            raise AmountOverflowError(address, output_color, total, draft.max_amount)

        draft.destinations.setdefault(address, {})[output_color] = total

    return apply


def remainder(address: Address) -> SendFundsOption:
    """Опция: адрес для сдачи. Последний вызов выигрывает."""

    def apply(draft: SendFundsOptionsDraft) -> None:
        draft.remainder_address = address

    return apply


def option_error(error: SendFundsOptionsError) -> SendFundsOption:
    """Опция, которая при применении всегда выбрасывает error."""

    def apply(draft: SendFundsOptionsDraft) -> None:
        # Один и тот же экземпляр: сбрасываем кадры предыдущих применений
        raise error.with_traceback(None)

    return apply


# =============================================================================
# AGGREGATOR
# =============================================================================


def build_options(
    *options: SendFundsOption,
    config: Optional[SendFundsOptionsConfig] = None,
) -> SendFundsOptions:
    """
    Сборка и проверка опций SendFunds.

    Args:
        options: Опции в порядке применения
        config: Конфигурация (опционально, используется default)

    Returns:
        Замороженный SendFundsOptions

    Raises:
        SendFundsOptionsError: Первая ошибка опции или финальной проверки
    """
    config = config or SendFundsOptionsConfig()
    draft = SendFundsOptionsDraft(max_amount=config.max_amount)

    try:
        for option in options:
            option(draft)
        _validate_draft(draft, config)
    except SendFundsOptionsError as e:
        logger.warning("send funds options rejected: %s: %s", e.code, e)
        raise

    logger.debug(
        "send funds options built: %d options, %d destination addresses",
        len(options),
        len(draft.destinations),
    )
    return draft.freeze()


def _validate_draft(draft: SendFundsOptionsDraft, config: SendFundsOptionsConfig) -> None:
    """Финальная проверка собранного черновика."""
    if len(draft.destinations) == 0:
        raise NoDestinationError()

    if config.max_destinations is not None and len(draft.destinations) > config.max_destinations:
        raise TooManyDestinationsError(len(draft.destinations), config.max_destinations)
