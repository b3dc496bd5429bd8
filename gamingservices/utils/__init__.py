from gamingservices.utils.nested import get_mapping, get_nested, get_string

__all__ = [
    "get_mapping",
    "get_nested",
    "get_string",
]
