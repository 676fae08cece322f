"""
Color — Тип актива (цвет) баланса

Immutable Pydantic value object, используемый как ключ второго уровня
в destination map (address → color → amount).

Выделенные значения:
- COLOR_IOTA: нативный (базовый) актив, все байты 0
- COLOR_NEW: маркер нового окрашенного актива (mint), все байты 0xff
"""

from typing import Final

from pydantic import BaseModel, Field


# Длина цвета в байтах
COLOR_LENGTH: Final[int] = 32


class Color(BaseModel):
    """Цвет (тип актива). Immutable, hashable."""

    data: bytes = Field(
        ...,
        strict=True,
        min_length=COLOR_LENGTH,
        max_length=COLOR_LENGTH,
        description="Сырые байты цвета",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """
        Разбор цвета из hex-строки (64 символа).

        Raises:
            ValueError: Если строка не hex или длина неверна
        """
        return cls(data=bytes.fromhex(value))

    def hex(self) -> str:
        return self.data.hex()

    def __str__(self) -> str:
        if self == COLOR_IOTA:
            return "IOTA"
        if self == COLOR_NEW:
            return "NEW"
        return self.hex()


# =============================================================================
# ВЫДЕЛЕННЫЕ ЦВЕТА
# =============================================================================

COLOR_IOTA: Final[Color] = Color(data=bytes(COLOR_LENGTH))

COLOR_NEW: Final[Color] = Color(data=b"\xff" * COLOR_LENGTH)
