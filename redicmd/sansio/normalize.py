"""Canonicalization of the argument shapes accepted by the command builders.

Every builder funnels its operands through these helpers first, so that each
accepted input shape maps onto exactly one token sequence.
"""

from __future__ import annotations

import collections.abc
import decimal
import math
from typing import Any, Iterable, Iterator

from redicmd.sansio.constants import NEGATIVE_INFINITY, NOTSET, POSITIVE_INFINITY
from redicmd.sansio.exceptions import ArgumentShapeError
from redicmd.sansio.types import (
    EncodableT,
    KeysT,
    NumberT,
    OptionsT,
    PairsT,
    TokenT,
)

__all__ = (
    "format_number",
    "iterkeysargs",
    "iteroptions",
    "iterpairs",
    "token",
    "tokens",
)

_SCALARS = (str, bytes, bytearray, memoryview, int, float, decimal.Decimal)
_BYTES_LIKE = (bytearray, memoryview)


def token(value: EncodableT) -> TokenT:
    """Render a single operand as a canonical token.

    Text and bytes are passed through (buffers are copied to ``bytes``) and
    numbers are rendered as plain decimal text.

    Raises:
        :py:class:`~redicmd.sansio.exceptions.ArgumentShapeError` for anything
        which is not a scalar token.
    """
    cls = value.__class__
    if cls in _converters:
        return _converters[cls](value)
    # Subclasses (str enums, int flags, ...) are rendered via their base type.
    # bool is an int subclass but never a valid token.
    if isinstance(value, bool) or not isinstance(value, _SCALARS):
        raise ArgumentShapeError(
            f"Invalid token type: {cls.__name__!r}. "
            f"Convert to one of {(*(t.__name__ for t in _SCALARS),)} first."
        )
    for base, conv in _converters.items():
        if isinstance(value, base):
            return conv(base(value)) if base is not str else str.__str__(value)


def tokens(values: Iterable[EncodableT]) -> tuple[TokenT, ...]:
    return tuple(token(v) for v in values)


def format_number(value: NumberT) -> str:
    """Render a number as plain decimal text.

    Floats use their shortest round-tripping form, written out positionally
    (never in scientific notation), without trailing fractional zeros:

        >>> format_number(1.5)
        '1.5'
        >>> format_number(5000.0)
        '5000'
        >>> format_number(1e-07)
        '0.0000001'
        >>> format_number(float("-inf"))
        '-inf'
    """
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        if math.isinf(value):
            return POSITIVE_INFINITY if value > 0 else NEGATIVE_INFINITY
        if math.isnan(value):
            return "nan"
        value = decimal.Decimal(repr(value))
    if value.is_infinite():
        return POSITIVE_INFINITY if value > 0 else NEGATIVE_INFINITY
    if value.is_nan():
        return "nan"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def is_scalar(value: Any) -> bool:
    return isinstance(value, _SCALARS) and not isinstance(value, bool)


def itercollection(values: Any, *, what: str = "values") -> Iterator[Any]:
    """Iterate an ordered collection, refusing unordered or keyed ones."""
    if isinstance(values, (collections.abc.Mapping, collections.abc.Set)):
        raise ArgumentShapeError(
            f"Expected a scalar or an ordered collection of {what}, "
            f"got {values.__class__.__name__!r}."
        )
    if not isinstance(values, collections.abc.Iterable):
        raise ArgumentShapeError(
            f"Expected a scalar or an ordered collection of {what}, "
            f"got {values.__class__.__name__!r}."
        )
    return iter(values)


def iterkeysargs(keys: KeysT, args: Iterable[EncodableT] = ()) -> Iterator[TokenT]:
    """Flatten a "one or more" operand, followed by any extra positional args.

    ``keys`` may be a single scalar or an ordered collection of scalars; both
    produce the same tokens.
    """
    if is_scalar(keys):
        yield token(keys)
    else:
        for key in itercollection(keys, what="keys"):
            yield token(key)
    for arg in args:
        yield token(arg)


def iterpairs(pairs: PairsT | EncodableT, value: Any = NOTSET) -> Iterator[TokenT]:
    """Flatten pairs into an alternating token sequence, in input order.

    Accepted shapes:

        1. a flat alternating sequence: ``["k1", "v1", "k2", "v2"]``
        2. a sequence of 2-tuples: ``[("k1", "v1"), ("k2", "v2")]``
        3. a single pair as two arguments: ``iterpairs("k1", "v1")``

    The number of items is not checked, the server rejects odd counts.
    """
    if value is not NOTSET:
        yield token(pairs)
        yield token(value)
        return
    if is_scalar(pairs):
        raise ArgumentShapeError(
            "A single pair must be given as two arguments, "
            f"got only {pairs!r}."
        )
    if isinstance(pairs, collections.abc.Mapping):
        raise ArgumentShapeError(
            "Pairs must be a flat sequence or a sequence of 2-tuples, "
            f"not a {pairs.__class__.__name__!r}. "
            "Pass `list(mapping.items())` to keep its order explicit."
        )
    nested = None
    for item in itercollection(pairs, what="pairs"):
        is_pair = isinstance(item, tuple)
        if nested is None:
            nested = is_pair
        elif nested is not is_pair:
            raise ArgumentShapeError(
                "Pairs must be all flat values or all 2-tuples, not a mix of both."
            )
        if not is_pair:
            yield token(item)
            continue
        if len(item) != 2:
            raise ArgumentShapeError(
                f"Expected a 2-tuple pair, got a tuple of length {len(item)}."
            )
        yield token(item[0])
        yield token(item[1])


def iteroptions(options: OptionsT) -> Iterator[TokenT]:
    """Trailing modifiers, appended verbatim in the order given."""
    if options is None:
        return iter(())
    return iterkeysargs(options)


_converters = {
    str: lambda val: val,
    bytes: lambda val: val,
    bytearray: bytes,
    memoryview: bytes,
    int: format_number,
    float: format_number,
    decimal.Decimal: format_number,
}
