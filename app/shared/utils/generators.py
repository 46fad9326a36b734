"""ID generators for primary keys."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant identifier (CUID2) for a row id."""
    value = _next_cuid()
    if not isinstance(value, str):
        raise TypeError(f"cuid2 returned {type(value).__name__}, expected str")
    return value
