# Text transforms applied to grid cells before they are written out.

import html
from typing import Any, Iterable, List


def decode_html(value: Any) -> Any:
    """Decodes HTML entities (&amp;, &quot;, &#039;, ...) in strings; other values pass through."""
    if isinstance(value, str):
        return html.unescape(value)
    return value


def decode_html_row(row: Iterable[Any]) -> List[Any]:
    """Returns a new row with every string cell entity-decoded."""
    return [decode_html(value) for value in row]
