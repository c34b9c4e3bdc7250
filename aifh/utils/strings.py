from typing import Iterable, Optional


def format_vector(values: Iterable[float]) -> str:
    """
    Render a vector as a bracketed, comma-separated list of decimals, e.g. '[1.0, 2.5, -3.0]'.
    An empty vector renders as '[]'.
    """
    return "[" + ", ".join(repr(float(v)) for v in values) + "]"


def format_label(label: Optional[str]) -> str:
    """Return the label text, or 'null' when there is no label."""
    if label is None:
        return "null"
    return label
