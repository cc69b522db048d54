"""Encoding of options models into URL query strings."""

from typing import Any, List, Optional, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_options(options: Optional[BaseModel]) -> List[Tuple[str, str]]:
    """Collect the non-empty fields of an options model as query pairs.

    Fields are keyed by their alias when one is declared, otherwise by
    their attribute name, and keep their declaration order. ``None``,
    empty strings, zero numbers and empty lists are skipped. List values
    produce one pair per element.

    Args:
        options: Options model, or None for no options

    Returns:
        List of (name, value) pairs
    """
    if options is None:
        return []

    pairs: List[Tuple[str, str]] = []
    for name, field in type(options).model_fields.items():
        value = getattr(options, name)
        if value is None or value == "" or value == []:
            continue
        if type(value) in (int, float) and value == 0:
            continue
        key = field.alias or name
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _format_value(item)) for item in value)
        else:
            pairs.append((key, _format_value(value)))
    return pairs


def add_options(path: str, options: Optional[BaseModel]) -> str:
    """Append the query string for ``options`` to ``path``.

    Args:
        path: Request path, which may already carry a query string
        options: Options model, or None

    Returns:
        Path with the encoded options appended; unchanged if there are none

    Example:
        >>> add_options("/webhooks", WebhookListOptions(filter_status="enabled"))
        '/webhooks?filter%5Bstatus%5D=enabled'
    """
    pairs = encode_options(options)
    if not pairs:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{urlencode(pairs)}"
