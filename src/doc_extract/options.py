import json
from typing import Any, Dict, Mapping, Optional

GROUP_KEYS = ("pdf", "office", "ocr")


def options_to_payload(**options: Any) -> Optional[str]:
    """
    Converts keyword options into a JSON configuration payload.

    Top-level options are `xml`, `max_length` and `encoding`; `pdf`, `office`
    and `ocr` take a mapping of subsystem options. None values are dropped.
    Unknown keywords are passed through and ignored by the resolver.

    Returns:
        Optional[str]: JSON text, or None if no option was given.

    Raises:
        TypeError: If a top-level option or group has the wrong type.
    """
    config: Dict[str, Any] = {}

    for key, value in options.items():
        if value is None:
            continue
        if key == "max_length" and (not isinstance(value, int) or isinstance(value, bool)):
            raise TypeError("max_length must be an integer")
        if key == "encoding" and not isinstance(value, str):
            raise TypeError("encoding must be a string")
        if key in GROUP_KEYS:
            if not isinstance(value, Mapping):
                raise TypeError(f"{key} options must be a mapping")
            value = {k: v for k, v in value.items() if v is not None}
        config[key] = value

    if not config:
        return None

    try:
        return json.dumps(config)
    except (TypeError, ValueError) as e:
        raise TypeError(f"Failed to encode options to JSON: {e}") from e
