"""
Model Base Classes
==================

Frozen Pydantic base classes shared by the CSS and HTML models, plus the
helper that accepts externally tagged variants (``{"Tag": "body"}``) as
produced by the scripting runtime.
"""

from typing import Any, Callable, ClassVar, Dict, Mapping, Sequence, Tuple, Type

from pydantic import BaseModel, ConfigDict


class MarkupModel(BaseModel):
    """Immutable value object compared by structure."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Variant(MarkupModel):
    """One case of a closed tagged union.

    Subclasses declare ``kind`` as a ``Literal`` holding the variant tag and
    list their payload fields, in positional order, in ``positional_fields``.
    """

    positional_fields: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def variant_tag(cls) -> str:
        return cls.model_fields["kind"].default

    @classmethod
    def unpack(cls, payload: Any) -> Dict[str, Any]:
        """Map an externally tagged payload onto this variant's field names."""
        names = cls.positional_fields
        if not names:
            if payload not in (None, [], (), {}):
                raise ValueError(f"{cls.variant_tag()} takes no fields, got {payload!r}")
            return {}
        if len(names) == 1:
            return {names[0]: payload}
        if isinstance(payload, Mapping):
            return dict(payload)
        if isinstance(payload, (list, tuple)):
            if len(payload) != len(names):
                raise ValueError(
                    f"{cls.variant_tag()} expects {len(names)} fields "
                    f"({', '.join(names)}), got {len(payload)}"
                )
            return dict(zip(names, payload))
        raise ValueError(
            f"{cls.variant_tag()} expects a sequence or mapping, got {type(payload).__name__}"
        )


def untag(variants: Sequence[Type[Variant]]) -> Callable[[Any], Any]:
    """Build a before-validator that rewrites external tags into ``kind`` fields.

    Accepted inputs:
        "Universal"                     unit variant
        {"Tag": "body"}                 single field
        {"And": [f1, f2]}               positional fields
        {"Element": {"tag": "p", ...}}  named fields
    Typed instances and mappings that already carry ``kind`` pass through.
    """
    # filled on first use; recursive variants are incomplete at import time
    by_tag: Dict[str, Type[Variant]] = {}

    def _untag(value: Any) -> Any:
        if not by_tag:
            by_tag.update((variant.variant_tag(), variant) for variant in variants)
        expected = ", ".join(by_tag)
        if isinstance(value, BaseModel):
            return value
        if isinstance(value, str):
            if value not in by_tag:
                raise ValueError(f"unknown variant {value!r}, expected one of: {expected}")
            return {"kind": value, **by_tag[value].unpack(None)}
        if isinstance(value, Mapping) and "kind" not in value:
            if len(value) != 1:
                raise ValueError(
                    f"expected a single-key variant mapping, got keys {sorted(value)}"
                )
            tag, payload = next(iter(value.items()))
            variant = by_tag.get(tag)
            if variant is None:
                raise ValueError(f"unknown variant {tag!r}, expected one of: {expected}")
            return {"kind": tag, **variant.unpack(payload)}
        return value

    return _untag
