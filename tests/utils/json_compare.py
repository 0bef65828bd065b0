from typing import Dict, Iterable


def exclude_keys(data: Dict, keys: Iterable[str]) -> Dict:
    """Drop volatile keys such as timestamps before comparing payloads"""
    keys = set(keys)
    return {k: v for k, v in data.items() if k not in keys}
