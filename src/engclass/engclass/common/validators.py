from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return str(value).strip()


def require_fee(value, field_name: str = "Học phí") -> int:
    """Fees are whole VND amounts, never negative."""
    if isinstance(value, bool) or value is None or value == "":
        raise ValidationError(f"{field_name} không hợp lệ")
    try:
        as_float = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} không hợp lệ") from e
    if as_float < 0 or not as_float.is_integer():
        raise ValidationError(f"{field_name} phải là số nguyên không âm")
    return int(as_float)
