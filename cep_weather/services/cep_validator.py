"""CEP (Brazilian postal code) validation."""

import re

CEP_PATTERN = re.compile(r"[0-9]{8}")


def is_valid_cep(cep: str) -> bool:
    """Return True iff ``cep`` is exactly eight ASCII decimal digits.

    No normalization is applied: hyphens, whitespace and non-ASCII digits
    are all rejected. Callers strip input themselves if they want to.
    """
    return CEP_PATTERN.fullmatch(cep) is not None
