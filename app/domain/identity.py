"""External identity helpers.

An external id is the identity provider's stable subject (the ``oid`` claim).
The all-zero UUID is treated like a missing id.
"""

EMPTY_EXTERNAL_ID = "00000000-0000-0000-0000-000000000000"


def is_empty_external_id(external_id: str | None) -> bool:
    """True for None, blank, or the all-zero UUID sentinel."""
    return not external_id or not external_id.strip() or external_id == EMPTY_EXTERNAL_ID
