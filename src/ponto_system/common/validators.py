from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} inválido")
    return str(value).strip()


def require_number(value: Any, field_name: str, default: float = 0.0) -> float:
    """Numbers may arrive as strings from forms; None/'' fall back to default."""
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} deve ser numérico")


def require_mapping(value: Any, field_name: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValidationError(f"{field_name} deve ser um objeto")
    return value


def require_list(value: Any, field_name: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f"{field_name} deve ser uma lista")
    return value
