from typing import Dict, Iterable


SERVER_ASSIGNED_KEYS = {"id", "created_at"}


def exclude_keys(data: Dict, keys: Iterable[str] = SERVER_ASSIGNED_KEYS) -> Dict:
    """Drop keys whose values are assigned by the server and vary per run"""
    keys = set(keys)
    return {k: v for k, v in data.items() if k not in keys}
