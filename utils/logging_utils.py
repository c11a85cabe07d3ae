from collections.abc import Mapping
from typing import Any, Dict, Iterable


def mask_value(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    if "@" in value:  # email
        name, _, domain = value.partition("@")
        return (name[:2] + "***@" + domain) if name else "***@" + domain
    if len(value) > 12:
        return value[:4] + "..." + value[-4:]
    return "***"


def sanitize_payload(payload: Dict, allowed_keys: Iterable[str], masked_keys: Iterable[str] = ()) -> Dict:
    """Return a filtered copy of payload with only allowed keys.

    Values under ``masked_keys`` are masked, list values are reduced to their length.
    """
    if not isinstance(payload, Mapping):
        return {}
    masked = set(masked_keys)
    result = {}
    for key in allowed_keys:
        if key not in payload:
            continue
        value = payload[key]
        if isinstance(value, (list, tuple)):
            result[key] = f"<{len(value)} items>"
        elif key in masked:
            result[key] = mask_value(value)
        else:
            result[key] = value
    return result
