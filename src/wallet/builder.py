"""SendFunds builder — chainable сборка опций с явной state machine.

Состояния:
- EMPTY: опции ещё не добавлены
- ACCUMULATING: добавлена хотя бы одна опция
- VALIDATED: build() успешен, результат закэширован (терминальное)
- FAILED: build() завершился ошибкой, ошибка сохранена (терминальное)

Из терминального состояния возврата нет: любая мутация или повторный
build() выбрасывает BuilderStateError.
"""

import logging
from enum import Enum
from typing import List, Optional

from src.core.domain.address import Address
from src.core.domain.color import Color
from src.wallet.errors import BuilderStateError, SendFundsOptionsError
from src.wallet.sendfunds_options import (
    SendFundsOption,
    SendFundsOptions,
    SendFundsOptionsConfig,
    build_options,
    destination,
    remainder,
)

logger = logging.getLogger(__name__)


class BuildState(str, Enum):
    """Состояние builder."""

    EMPTY = "EMPTY"
    ACCUMULATING = "ACCUMULATING"
    VALIDATED = "VALIDATED"
    FAILED = "FAILED"


TERMINAL_STATES = frozenset({BuildState.VALIDATED, BuildState.FAILED})


class SendFundsOptionsBuilder:
    """Builder опций SendFunds.

    Пример:
        options = (
            SendFundsOptionsBuilder()
            .destination(addr_x, 100)
            .remainder(addr_y)
            .build()
        )

    Не потокобезопасен: один builder на один вызов SendFunds.
    """

    def __init__(self, config: Optional[SendFundsOptionsConfig] = None):
        """
        Args:
            config: конфигурация сборки (опционально, используется default)
        """
        self.config = config or SendFundsOptionsConfig()
        self._options: List[SendFundsOption] = []
        self._state = BuildState.EMPTY
        self._result: Optional[SendFundsOptions] = None
        self._error: Optional[SendFundsOptionsError] = None

    @property
    def state(self) -> BuildState:
        return self._state

    @property
    def result(self) -> Optional[SendFundsOptions]:
        return self._result

    @property
    def error(self) -> Optional[SendFundsOptionsError]:
        return self._error

    def destination(self, address: Address, amount: int, *colors: Color) -> "SendFundsOptionsBuilder":
        return self.option(destination(address, amount, *colors))

    def remainder(self, address: Address) -> "SendFundsOptionsBuilder":
        return self.option(remainder(address))

    def option(self, option: SendFundsOption) -> "SendFundsOptionsBuilder":
        """Добавление произвольной опции. EMPTY/ACCUMULATING → ACCUMULATING."""
        self._ensure_not_terminal("add option")
        self._options.append(option)
        self._state = BuildState.ACCUMULATING
        return self

    def build(self) -> SendFundsOptions:
        """
        Применение всех накопленных опций.

        Returns:
            SendFundsOptions (state → VALIDATED)

        Raises:
            SendFundsOptionsError: первая ошибка сборки (state → FAILED)
            BuilderStateError: builder уже в терминальном состоянии
        """
        self._ensure_not_terminal("build")

        try:
            self._result = build_options(*self._options, config=self.config)
        except SendFundsOptionsError as e:
            self._error = e
            self._transition(BuildState.FAILED)
            raise

        self._transition(BuildState.VALIDATED)
        return self._result

    def _ensure_not_terminal(self, action: str) -> None:
        if self._state in TERMINAL_STATES:
            raise BuilderStateError(f"cannot {action}: builder is {self._state.value}")

    def _transition(self, new_state: BuildState) -> None:
        logger.debug("send funds builder: %s → %s", self._state.value, new_state.value)
        self._state = new_state
