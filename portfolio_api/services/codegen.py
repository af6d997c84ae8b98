#v1.0
# portfolio_api/services/codegen.py
from __future__ import annotations
import secrets
from typing import Iterable, Optional

# Ambiguous characters removed (0/O, 1/I/L)
DEFAULT_ALPHABET = "ABCDEFGHJKMNPQRSTUVWXYZ23456789"
DEFAULT_LENGTH = 6


def _resolve_alphabet_and_length() -> tuple[str, int]:
    from portfolio_api.core.config import settings
    alphabet = settings.code_alphabet or DEFAULT_ALPHABET
    length = int(settings.code_length or DEFAULT_LENGTH)
    return alphabet, length


def generate_plain_code(
    length: Optional[int] = None,
    alphabet: Optional[str] = None,
) -> str:
    if alphabet is None or length is None:
        dfa, dfl = _resolve_alphabet_and_length()
        alphabet = alphabet or dfa
        length = length or dfl
    # always upper case: validation compares upper-cased values
    return "".join(secrets.choice(alphabet) for _ in range(int(length))).upper()


def generate_unique_code(
    existing: Iterable[str],
    length: Optional[int] = None,
    alphabet: Optional[str] = None,
    max_attempts: int = 32,
) -> str:
    """
    New code not present (case-insensitively) in ``existing``.
    Raises RuntimeError if the code space looks exhausted.
    """
    taken = {c.upper() for c in existing}
    for _ in range(int(max_attempts)):
        plain = generate_plain_code(length=length, alphabet=alphabet)
        if plain not in taken:
            return plain
    raise RuntimeError(f"could not generate a unique code in {max_attempts} attempts")
