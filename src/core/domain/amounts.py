"""
Amounts — Централизованные правила для сумм переводов

Суммы хранятся как целые числа в минимальных единицах актива и ограничены
беззнаковым 64-битным диапазоном ledger.

Единственный допустимый способ проверки и сложения сумм destination.
"""

from typing import Final


# =============================================================================
# ГРАНИЦЫ
# =============================================================================

# Минимальная сумма одного destination
MIN_AMOUNT: Final[int] = 1

# Максимальная сумма (uint64)
MAX_AMOUNT: Final[int] = 2**64 - 1


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_amount(amount: object, max_amount: int = MAX_AMOUNT) -> bool:
    """
    Проверка суммы одного destination.

    bool отклоняется явно: это подкласс int, но не сумма.

    Args:
        amount: Проверяемое значение
        max_amount: Верхняя граница (включительно)

    Returns:
        True если MIN_AMOUNT <= amount <= max_amount
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        return False

    return MIN_AMOUNT <= amount <= max_amount


def fits_amount_range(total: int, max_amount: int = MAX_AMOUNT) -> bool:
    """Проверка накопленной суммы на переполнение."""
    return total <= max_amount

