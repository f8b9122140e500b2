from __future__ import annotations


class InvalidInput(TypeError):
    """Text handed to the normalizer or extractor is not a string."""


class InvalidFieldSpec(ValueError):
    """A field spec that can never extract anything (raised at construction)."""
