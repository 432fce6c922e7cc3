"""
Pydantic input schemas for data that crosses the shell boundary.
"""
from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator


class GuestInput(BaseModel):
    """Misafir kayıt parametrelerini zorunlu ve boş olmayan alanlarla tanımlar."""

    name: str = Field(description="Misafirin tam adı")
    email: str = Field(description="Misafirin e-posta adresi")
    phone: str = Field(description="Misafirin telefon numarası")

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def _strip_and_require(cls, value, info):
        value = "" if value is None else str(value).strip()
        if not value:
            raise ValueError(f"{info.field_name.capitalize()} cannot be empty.")
        return value


class StayInput(BaseModel):
    """Giriş/çıkış tarihleri (YYYY-MM-DD). Aralık kontrolü ledger'da yapılır."""

    check_in: date
    check_out: date

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def _parse_strict(cls, value):
        if isinstance(value, date):
            return value
        try:
            return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
        except ValueError as e:
            raise ValueError("Invalid date format. Please use yyyy-MM-dd (e.g., 2024-12-25)") from e
