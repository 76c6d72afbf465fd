"""Encoded-word scheme implementations (RFC 2047 §4)."""

from mimeword.config.codec.models import Scheme
from mimeword.services.codec.strategies.b_scheme import BSchemeStrategy
from mimeword.services.codec.strategies.base import BaseSchemeStrategy
from mimeword.services.codec.strategies.q_scheme import QSchemeStrategy

STRATEGY_REGISTRY: dict[Scheme, BaseSchemeStrategy] = {
    Scheme.Q: QSchemeStrategy(),
    Scheme.B: BSchemeStrategy(),
}

# Explicit ASCII letters; no locale-dependent case folding.
SCHEME_LETTERS: dict[str, Scheme] = {
    "Q": Scheme.Q,
    "q": Scheme.Q,
    "B": Scheme.B,
    "b": Scheme.B,
}


def scheme_from_letter(letter: str) -> Scheme | None:
    """Return the Scheme for an encoded-word scheme token, or None if unrecognized."""
    return SCHEME_LETTERS.get(letter)


def get_scheme_strategy(scheme: Scheme | str) -> BaseSchemeStrategy:
    """Return the strategy for a Scheme (or its letter). Raises ValueError if unknown."""
    if not isinstance(scheme, Scheme):
        resolved = scheme_from_letter(scheme)
        if resolved is None:
            raise ValueError(f"Unknown encoded-word scheme: {scheme!r}")
        scheme = resolved
    return STRATEGY_REGISTRY[scheme]
