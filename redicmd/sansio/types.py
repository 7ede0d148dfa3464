from __future__ import annotations

import decimal
from typing import Any, Iterable, List, Sequence, Tuple, Union

from . import exceptions

EncodedT = Union[bytes, bytearray, memoryview]
NumberT = Union[int, float, decimal.Decimal]
EncodableT = Union[EncodedT, str, NumberT]
TokenT = Union[str, bytes]
"""A canonical token: text or binary-safe bytes."""
TokensT = Tuple[TokenT, ...]
_StringLikeT = Union[bytes, str, memoryview]
KeyT = _StringLikeT  # Main redis key space
KeysT = Union[KeyT, Iterable[KeyT]]
"""One key, or an ordered collection of keys."""
ValuesT = Union[EncodableT, Iterable[EncodableT]]
PairsT = Union[Sequence[EncodableT], Iterable[Tuple[EncodableT, EncodableT]]]
"""Either a flat alternating sequence, or a sequence of 2-tuples."""
OptionsT = Union[EncodableT, Iterable[EncodableT]]
ReplyT = Union[
    bytes, str, int, float, None, List[Any], exceptions.ServerReplyError
]
