"""
Ownership — Модели владельцев и корпорации

Immutable Pydantic модели:
- Owner: владелец (имя + сумма инвестиций)
- Corporation: корпорация со списком владельцев и общим количеством акций
- OwnershipShare: типизированный результат (имя + процент владения)

Доля владения считается по инвестициям и округляется до целого процента.
Количество акций владельца считается от ОКРУГЛЁННОГО процента — накопленная
ошибка округления сохраняется намеренно.
"""

from decimal import Decimal
from typing import Any, Final, Optional

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

from bizmath.core.contracts import validate_corporation
from bizmath.core.math.numerical_safeguards import round_percent, to_decimal


# =============================================================================
# CONSTANTS
# =============================================================================

# Порог мажоритарного акционера (в процентах, включительно)
MAJORITY_THRESHOLD_PCT: Final[float] = 50.0


# =============================================================================
# MODELS
# =============================================================================


class Owner(BaseModel):
    """Владелец доли в корпорации."""

    name: str = Field(..., min_length=1, description="Уникальное имя владельца")
    investment: Decimal = Field(..., gt=0, description="Сумма инвестиций")

    model_config = {"frozen": True}

    @field_validator("investment", mode="before")
    @classmethod
    def coerce_investment(cls, v: Any) -> Any:
        """float → Decimal через str (без двоичного дрейфа)."""
        if isinstance(v, float):
            return to_decimal(v, "investment")
        return v


class OwnershipShare(BaseModel):
    """Процент владения одного владельца."""

    name: str = Field(..., description="Имя владельца")
    percentage: float = Field(..., ge=0.0, description="Округлённый процент владения")

    model_config = {"frozen": True}


class Corporation(BaseModel):
    """
    Корпорация с фиксированным списком владельцев.

    total_investment всегда вычисляется из текущих владельцев и не хранится.
    Изменение списка владельцев после создания не поддерживается —
    для пересчёта создаётся новый экземпляр.
    """

    name: str = Field(default="", description="Название корпорации")
    owners: tuple[Owner, ...] = Field(default=(), description="Владельцы в порядке ввода")
    total_shares: int = Field(default=0, ge=0, description="Общее количество акций")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_owner_names(self) -> "Corporation":
        """Имена владельцев уникальны в пределах корпорации."""
        names = [owner.name for owner in self.owners]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate owner names: {', '.join(duplicates)}")
        return self

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "Corporation":
        """
        Создание корпорации из JSON payload с валидацией контракта.

        Raises:
            InvalidInput: Если payload не соответствует схеме corporation
        """
        validate_corporation(data)
        return cls.model_validate(data)

    # -------------------------------------------------------------------------
    # Derived
    # -------------------------------------------------------------------------

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_investment(self) -> Decimal:
        """Сумма инвестиций всех владельцев."""
        return sum((owner.investment for owner in self.owners), Decimal(0))

    def find_owner(self, owner_name: str) -> Optional[Owner]:
        """Поиск владельца по имени (None если не найден)."""
        for owner in self.owners:
            if owner.name == owner_name:
                return owner
        return None

    def _percentage_of(self, owner: Owner) -> float:
        return round_percent(owner.investment / self.total_investment * 100)

    # -------------------------------------------------------------------------
    # Ownership
    # -------------------------------------------------------------------------

    def ownership_percentage(self, owner_name: str) -> float:
        """
        Процент владения по инвестициям, округлённый до целого.

        Args:
            owner_name: Имя владельца

        Returns:
            round(investment / total_investment * 100); 0.0 если владелец не найден

        Examples:
            >>> corp.ownership_percentage("Mark")  # 250 / 600.25
            42.0
        """
        owner = self.find_owner(owner_name)
        if owner is None:
            return 0.0
        return self._percentage_of(owner)

    def ownership_percentages(self) -> list[OwnershipShare]:
        """
        Проценты владения всех владельцев в порядке ввода.

        Каждый процент округляется независимо, сумма может отличаться от 100.
        """
        return [
            OwnershipShare(name=owner.name, percentage=self._percentage_of(owner))
            for owner in self.owners
        ]

    def shares_for_owner(self, owner_name: str) -> int:
        """
        Количество акций владельца: floor(rounded_pct * total_shares / 100).

        Используется округлённый процент, а не точная доля.
        """
        percentage = int(self.ownership_percentage(owner_name))
        return (percentage * self.total_shares) // 100

    def is_majority_shareholder(self, owner_name: str) -> bool:
        """Владелец с округлённым процентом >= 50 — мажоритарный акционер."""
        return self.ownership_percentage(owner_name) >= MAJORITY_THRESHOLD_PCT
