"""
Тесты для опций SendFunds: destination, remainder, option_error, build_options

Coverage:
- Аддитивность destination для одной пары (address, color)
- Ошибки аргументов (amount == 0, несколько цветов)
- Финальная проверка (нет destination)
- Remainder: последний выигрывает
- Независимость результата от порядка destination
- Fail-fast: после первой ошибки опции не применяются
- Переполнение суммы и лимит адресов (config)
- Сценарии 1-6
"""

import itertools
import logging
import traceback

import pytest

from src.core.domain import ADDRESS_LENGTH, COLOR_IOTA, COLOR_LENGTH, COLOR_NEW, Address, Color
from src.wallet import (
    AmountOverflowError,
    InvalidAmountError,
    MultipleColorsError,
    NoDestinationError,
    OptionArgumentError,
    SendFundsOptions,
    SendFundsOptionsConfig,
    SendFundsOptionsDraft,
    SendFundsOptionsError,
    TooManyDestinationsError,
    build_options,
    destination,
    option_error,
    remainder,
)


def make_address(n: int) -> Address:
    return Address(data=bytes([0]) + bytes([n]) * (ADDRESS_LENGTH - 1))


def make_color(n: int) -> Color:
    return Color(data=bytes([n]) * COLOR_LENGTH)


@pytest.fixture
def addr_x() -> Address:
    return make_address(1)


@pytest.fixture
def addr_y() -> Address:
    return make_address(2)


@pytest.fixture
def addr_z() -> Address:
    return make_address(3)


@pytest.fixture
def color_a() -> Color:
    return make_color(0xA)


@pytest.fixture
def color_b() -> Color:
    return make_color(0xB)


# =============================================================================
# SCENARIOS
# =============================================================================


class TestScenarios:
    """Базовые сценарии сборки"""

    def test_single_destination(self, addr_x):
        """Сценарий 1: один destination → нативный цвет, remainder пуст."""
        options = build_options(destination(addr_x, 100))

        assert isinstance(options, SendFundsOptions)
        assert list(options.destinations) == [addr_x]
        assert dict(options.destinations[addr_x]) == {COLOR_IOTA: 100}
        assert options.remainder_address == Address.empty()
        assert options.has_remainder_address() is False

    def test_same_destination_merges(self, addr_x):
        """Сценарий 2: 50 + 70 на тот же адрес → 120."""
        options = build_options(destination(addr_x, 50), destination(addr_x, 70))

        assert dict(options.destinations[addr_x]) == {COLOR_IOTA: 120}

    def test_zero_amount_fails(self, addr_x):
        """Сценарий 3: amount == 0 → ошибка, результата нет."""
        with pytest.raises(InvalidAmountError, match="larger than 0"):
            build_options(destination(addr_x, 0))

    def test_multiple_colors_fails(self, addr_x, color_a, color_b):
        """Сценарий 4: два цвета → ошибка."""
        with pytest.raises(MultipleColorsError, match="more than one output color"):
            build_options(destination(addr_x, 10, color_a, color_b))

    def test_remainder_only_fails(self, addr_y):
        """Сценарий 5: только remainder → нужна хотя бы одна destination."""
        with pytest.raises(NoDestinationError, match="at least one Destination"):
            build_options(remainder(addr_y))

    def test_remainder_last_write_wins(self, addr_x, addr_y, addr_z):
        """Сценарий 6: remainder Y, затем Z → Z."""
        options = build_options(
            destination(addr_x, 10),
            remainder(addr_y),
            remainder(addr_z),
        )

        assert dict(options.destinations[addr_x]) == {COLOR_IOTA: 10}
        assert options.remainder_address == addr_z
        assert options.has_remainder_address() is True


# =============================================================================
# DESTINATION
# =============================================================================


class TestDestination:
    """Тесты для опции destination"""

    @pytest.mark.parametrize("amounts", [[1], [1, 2], [5, 5, 5, 5], [10**18, 10**18]])
    def test_additivity(self, addr_x, color_a, amounts):
        options = build_options(*[destination(addr_x, amount, color_a) for amount in amounts])

        assert options.destinations[addr_x][color_a] == sum(amounts)

    def test_colors_kept_separate(self, addr_x, color_a):
        options = build_options(
            destination(addr_x, 10),
            destination(addr_x, 20, color_a),
            destination(addr_x, 5, COLOR_IOTA),
        )

        assert dict(options.destinations[addr_x]) == {COLOR_IOTA: 15, color_a: 20}

    def test_addresses_kept_separate(self, addr_x, addr_y):
        options = build_options(destination(addr_x, 10), destination(addr_y, 20))

        assert len(options.destinations) == 2
        assert options.destinations[addr_x][COLOR_IOTA] == 10
        assert options.destinations[addr_y][COLOR_IOTA] == 20

    def test_explicit_native_color_equals_default(self, addr_x):
        implicit = build_options(destination(addr_x, 10))
        explicit = build_options(destination(addr_x, 10, COLOR_IOTA))

        assert implicit.to_dict() == explicit.to_dict()

    @pytest.mark.parametrize("amount", [0, -1, 1.5, True])
    def test_invalid_amount_is_argument_error(self, addr_x, amount):
        with pytest.raises(OptionArgumentError):
            build_options(destination(addr_x, amount))

    def test_multiple_colors_independent_of_amount(self, addr_x, color_a, color_b):
        """Несколько цветов — ошибка даже при amount == 0 (цвета проверяются первыми)."""
        with pytest.raises(MultipleColorsError):
            build_options(destination(addr_x, 0, color_a, color_b))

        with pytest.raises(MultipleColorsError):
            build_options(destination(addr_x, 10, color_a, color_b, COLOR_NEW))

    def test_invalid_option_does_not_touch_draft(self, addr_x):
        """Ошибочная опция при применении не изменяет черновик."""
        draft = SendFundsOptionsDraft()
        destination(addr_x, 10)(draft)

        with pytest.raises(InvalidAmountError):
            destination(addr_x, 0)(draft)

        assert draft.destinations == {addr_x: {COLOR_IOTA: 10}}

    def test_option_is_deferred(self, addr_x):
        """Создание опции не выбрасывает ошибку — только применение."""
        option = destination(addr_x, 0)
        assert callable(option)

        with pytest.raises(InvalidAmountError):
            option(SendFundsOptionsDraft())

    def test_merge_is_order_independent(self, addr_x, addr_y, color_a):
        triples = [
            (addr_x, 10, COLOR_IOTA),
            (addr_y, 20, color_a),
            (addr_x, 30, color_a),
            (addr_x, 40, COLOR_IOTA),
        ]
        expected = build_options(*[destination(a, n, c) for a, n, c in triples]).to_dict()

        for permutation in itertools.permutations(triples):
            options = build_options(*[destination(a, n, c) for a, n, c in permutation])
            assert options.to_dict()["destinations"] == expected["destinations"]

    def test_error_order_is_sequence_dependent(self, addr_x, color_a, color_b):
        zero = destination(addr_x, 0)
        two_colors = destination(addr_x, 10, color_a, color_b)

        with pytest.raises(InvalidAmountError):
            build_options(zero, two_colors)

        with pytest.raises(MultipleColorsError):
            build_options(two_colors, zero)


# =============================================================================
# AGGREGATOR
# =============================================================================


class TestBuildOptions:
    """Тесты для агрегатора build_options"""

    def test_no_options_fails(self):
        with pytest.raises(NoDestinationError):
            build_options()

    def test_fail_fast_stops_application(self, addr_x):
        applied = []

        def spy(draft: SendFundsOptionsDraft) -> None:
            applied.append(True)

        with pytest.raises(InvalidAmountError):
            build_options(destination(addr_x, 10), destination(addr_x, 0), spy)

        assert applied == []

    def test_first_error_wins_over_aggregate_error(self, addr_y):
        with pytest.raises(InvalidAmountError):
            build_options(remainder(addr_y), destination(addr_y, 0))

    def test_option_error_helper(self, addr_x):
        error = NoDestinationError()
        option = option_error(error)

        draft = SendFundsOptionsDraft()
        with pytest.raises(NoDestinationError) as exc_info:
            option(draft)

        assert exc_info.value is error
        assert draft.destinations == {}
        assert draft.remainder_address == Address.empty()

    def test_reused_error_option_traceback_bounded(self):
        """Повторное применение одной ошибочной опции не наращивает traceback."""
        option = option_error(NoDestinationError())
        depths = []

        for _ in range(3):
            with pytest.raises(NoDestinationError) as exc_info:
                build_options(option)
            depths.append(len(traceback.extract_tb(exc_info.value.__traceback__)))

        assert depths[0] == depths[1] == depths[2]

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            build_options()

    def test_each_call_has_fresh_draft(self, addr_x):
        option = destination(addr_x, 10)

        first = build_options(option)
        second = build_options(option)

        assert first.destinations[addr_x][COLOR_IOTA] == 10
        assert second.destinations[addr_x][COLOR_IOTA] == 10

    def test_result_is_read_only(self, addr_x):
        options = build_options(destination(addr_x, 10))

        with pytest.raises(TypeError):
            options.destinations[addr_x] = {}

        with pytest.raises(TypeError):
            options.destinations[addr_x][COLOR_IOTA] = 1

    def test_rejection_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.wallet.sendfunds_options"):
            with pytest.raises(NoDestinationError):
                build_options()

        assert "no_destination" in caplog.text


# =============================================================================
# CONFIG
# =============================================================================


class TestConfig:
    """Тесты для SendFundsOptionsConfig"""

    def test_overflow_detected_on_application(self, addr_x):
        config = SendFundsOptionsConfig(max_amount=100)

        with pytest.raises(AmountOverflowError) as exc_info:
            build_options(destination(addr_x, 60), destination(addr_x, 50), config=config)

        assert exc_info.value.total == 110
        assert exc_info.value.max_amount == 100

    def test_overflow_at_default_max(self, addr_x):
        from src.core.domain import MAX_AMOUNT

        with pytest.raises(AmountOverflowError):
            build_options(destination(addr_x, MAX_AMOUNT), destination(addr_x, 1))

    def test_overflow_does_not_mutate_bucket(self, addr_x):
        draft = SendFundsOptionsDraft(max_amount=10)
        destination(addr_x, 10)(draft)

        with pytest.raises(AmountOverflowError):
            destination(addr_x, 1)(draft)

        assert draft.destinations[addr_x][COLOR_IOTA] == 10

    def test_max_destinations(self, addr_x, addr_y, addr_z):
        config = SendFundsOptionsConfig(max_destinations=2)

        options = build_options(
            destination(addr_x, 1), destination(addr_y, 1), destination(addr_x, 1), config=config
        )
        assert len(options.destinations) == 2

        with pytest.raises(TooManyDestinationsError):
            build_options(
                destination(addr_x, 1),
                destination(addr_y, 1),
                destination(addr_z, 1),
                config=config,
            )

    def test_all_errors_share_base(self):
        for error_type in (
            InvalidAmountError,
            MultipleColorsError,
            AmountOverflowError,
            NoDestinationError,
            TooManyDestinationsError,
        ):
            assert issubclass(error_type, SendFundsOptionsError)


# =============================================================================
# RESULT HELPERS
# =============================================================================


class TestSendFundsOptions:
    """Тесты для SendFundsOptions"""

    def test_required_balances(self, addr_x, addr_y, color_a):
        options = build_options(
            destination(addr_x, 10),
            destination(addr_y, 15),
            destination(addr_y, 7, color_a),
        )

        assert options.required_balances() == {COLOR_IOTA: 25, color_a: 7}

    def test_to_dict(self, addr_x, addr_y, color_a):
        options = build_options(
            destination(addr_x, 10),
            destination(addr_x, 3, color_a),
            remainder(addr_y),
        )

        assert options.to_dict() == {
            "destinations": {
                addr_x.hex(): {COLOR_IOTA.hex(): 10, color_a.hex(): 3},
            },
            "remainder_address": addr_y.hex(),
        }

    def test_record_is_unhashable(self, addr_x):
        options = build_options(destination(addr_x, 10))

        assert SendFundsOptions.__hash__ is None
        with pytest.raises(TypeError):
            hash(options)

    def test_to_dict_without_remainder(self, addr_x):
        options = build_options(destination(addr_x, 10))

        assert options.to_dict()["remainder_address"] is None
