"""
Validación de payloads de mascotas.

validate_pet_payload acumula todos los errores (no corta en el primero) y
devuelve la lista en orden; lista vacía = payload válido.
"""
import math
from typing import Any, Dict, List

PET_FIELDS = ("name", "species", "breed", "age", "owner")
OWNER_FIELDS = ("name", "contact")

# BSON solo guarda enteros de 8 bytes; por encima se guarda como double
INT64_MAX = 2 ** 63 - 1

NOT_A_MAPPING = "Request body must be a JSON object."


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def is_valid_age(value: Any) -> bool:
    # bool es subclase de int en Python, pero no es una edad
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        number = float(value)
    except OverflowError:
        return False
    return math.isfinite(number) and number >= 0


def extra_keys(mapping: Dict[str, Any], allowed) -> List[str]:
    return [key for key in mapping if key not in allowed]


def is_valid_owner(owner: Any) -> bool:
    if owner is None:
        return True
    if not isinstance(owner, dict):
        return False
    if extra_keys(owner, OWNER_FIELDS):
        return False
    return all(
        owner.get(field) is None or is_non_empty_string(owner[field])
        for field in OWNER_FIELDS
    )


def validate_pet_payload(payload: Any, partial: bool = False) -> List[str]:
    if not isinstance(payload, dict):
        return [NOT_A_MAPPING]

    errors: List[str] = []

    unexpected = extra_keys(payload, PET_FIELDS)
    if unexpected:
        errors.append(f"Unexpected fields: {', '.join(unexpected)}")

    for field in ("name", "species"):
        if not partial or field in payload:
            if not is_non_empty_string(payload.get(field)):
                errors.append(f'Field "{field}" must be a non-empty string.')

    if "breed" in payload and not is_non_empty_string(payload["breed"]):
        errors.append('Field "breed" must be a non-empty string when provided.')

    if "age" in payload and not is_valid_age(payload["age"]):
        errors.append('Field "age" must be a number greater than or equal to 0 when provided.')

    if "owner" in payload and not is_valid_owner(payload["owner"]):
        errors.append('Field "owner" must be an object with optional "name" and "contact" strings.')

    return errors


def clean_pet_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normaliza un payload ya validado para persistirlo: solo campos permitidos,
    strings recortados. owner=None se conserva (significa "sin dueño").
    """
    cleaned: Dict[str, Any] = {}
    for field in PET_FIELDS:
        if field not in payload:
            continue
        value = payload[field]
        if isinstance(value, str):
            value = value.strip()
        elif field == "age" and isinstance(value, int) and value > INT64_MAX:
            value = float(value)
        elif field == "owner" and value is not None:
            value = {
                key: value[key].strip()
                for key in OWNER_FIELDS
                if value.get(key) is not None
            }
        cleaned[field] = value
    return cleaned
