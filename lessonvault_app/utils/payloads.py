from typing import Any, Dict


def as_mapping(payload: Any) -> Dict[str, Any]:
    """``payload`` when it is a JSON object, otherwise an empty dict."""
    return payload if isinstance(payload, dict) else {}
