"""
Address — Адрес получателя средств

Immutable Pydantic value object, используемый как ключ в destination map.
Хранит сырые байты адреса (version byte + digest) фиксированной длины.

Проверяется только форма значения (длина). Корректность адреса
(derivation, signature scheme) — ответственность внешнего слоя.
"""

from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# CONSTANTS
# =============================================================================

# Длина адреса в байтах: 1 байт версии + 32 байта digest
ADDRESS_LENGTH: Final[int] = 33


# =============================================================================
# ADDRESS MODEL
# =============================================================================


class Address(BaseModel):
    """
    Адрес в ledger.

    Immutable модель (frozen=True), hashable — может быть ключом dict.
    Zero value (все байты 0) означает "адрес не задан".
    """

    data: bytes = Field(
        ...,
        strict=True,
        min_length=ADDRESS_LENGTH,
        max_length=ADDRESS_LENGTH,
        description="Сырые байты адреса (version + digest)",
    )

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def empty(cls) -> "Address":
        """Zero value адреса (все байты 0)."""
        return cls(data=bytes(ADDRESS_LENGTH))

    @classmethod
    def from_hex(cls, value: str) -> "Address":
        """
        Разбор адреса из hex-строки.

        Args:
            value: Hex-представление (66 символов)

        Returns:
            Address

        Raises:
            ValueError: Если строка не hex или длина неверна
        """
        return cls(data=bytes.fromhex(value))

    def is_empty(self) -> bool:
        return self.data == bytes(ADDRESS_LENGTH)

    def hex(self) -> str:
        return self.data.hex()

    def __str__(self) -> str:
        return self.hex()
