from __future__ import annotations

from typing import Any, Union

from redicmd.sansio.commands.base import CommandsProtocol
from redicmd.sansio.constants import NOTSET, RANGE_END, RANGE_START
from redicmd.sansio.normalize import iterkeysargs, iteroptions, iterpairs
from redicmd.sansio.types import (
    EncodableT,
    KeysT,
    KeyT,
    NumberT,
    OptionsT,
    PairsT,
    ValuesT,
)

ScoreBoundT = Union[NumberT, str]  # e.g. 1, 1.5, "(1", "-inf"


class SortedSetCommands(CommandsProtocol):
    """
    Redis commands for Sorted Sets data type.
    see: https://redis.io/topics/data-types-intro#redis-sorted-sets
    """

    def zadd(self, key: KeyT, pairs: PairsT | NumberT, member: Any = NOTSET):
        """
        Add score/member pairs to the sorted set ``key``. Pairs are given
        score first, either as a flat ``[s1, m1, s2, m2]`` sequence or as a
        ``[(s1, m1), (s2, m2)]`` sequence. A single pair may also be given as
        ``zadd(key, score, member)``.

        Scores are sent as plain decimal text.

        See: https://redis.io/commands/ZADD
        """
        return self.execute_command("ZADD", key, *iterpairs(pairs, member))

    def zcard(self, key: KeyT):
        """
        Return the number of elements in the sorted set ``key``

        For more information check https://redis.io/commands/zcard
        """
        return self.execute_command("ZCARD", key)

    def zcount(self, key: KeyT, min: ScoreBoundT, max: ScoreBoundT):
        """
        Returns the number of elements in the sorted set at key ``key`` with
        a score between ``min`` and ``max``.

        For more information check https://redis.io/commands/zcount
        """
        return self.execute_command("ZCOUNT", key, min, max)

    def zincrby(self, key: KeyT, amount: NumberT, value: EncodableT):
        """
        Increment the score of ``value`` in sorted set ``key`` by ``amount``

        For more information check https://redis.io/commands/zincrby
        """
        return self.execute_command("ZINCRBY", key, amount, value)

    def zinterstore(self, dest: KeyT, keys: KeysT, options: OptionsT = ()):
        """
        Intersect multiple sorted sets specified by ``keys`` into a new
        sorted set, ``dest``. ``options`` (``WEIGHTS``, ``AGGREGATE``) are
        appended after the keys, as given.

        For more information check https://redis.io/commands/zinterstore
        """
        return self._zaggregate("ZINTERSTORE", dest, keys, options)

    def zlexcount(self, key: KeyT, min: EncodableT, max: EncodableT):
        """
        Return the number of items in the sorted set ``key`` between the
        lexicographical range ``min`` and ``max``.

        For more information check https://redis.io/commands/zlexcount
        """
        return self.execute_command("ZLEXCOUNT", key, min, max)

    def zrange(
        self,
        key: KeyT,
        start: int = RANGE_START,
        end: int = RANGE_END,
        options: OptionsT = (),
    ):
        """
        Return a range of values from sorted set ``key`` between
        ``start`` and ``end`` sorted in ascending order. The whole set by
        default.

        ``options`` are appended as given, e.g. ``["WITHSCORES"]``.

        For more information check https://redis.io/commands/zrange
        """
        return self.execute_command("ZRANGE", key, start, end, *iteroptions(options))

    def zrangebylex(
        self, key: KeyT, min: EncodableT, max: EncodableT, options: OptionsT = ()
    ):
        """
        Return the lexicographical range of values from sorted set ``key``
        between ``min`` and ``max``.

        ``options`` are appended as given, e.g. ``["LIMIT", 0, 10]``.

        For more information check https://redis.io/commands/zrangebylex
        """
        return self.execute_command(
            "ZRANGEBYLEX", key, min, max, *iteroptions(options)
        )

    def zrangebyscore(
        self, key: KeyT, min: ScoreBoundT, max: ScoreBoundT, options: OptionsT = ()
    ):
        """
        Return a range of values from the sorted set ``key`` with scores
        between ``min`` and ``max``.

        ``options`` are appended as given, e.g. ``["WITHSCORES", "LIMIT", 0, 2]``.

        For more information check https://redis.io/commands/zrangebyscore
        """
        return self.execute_command(
            "ZRANGEBYSCORE", key, min, max, *iteroptions(options)
        )

    def zrank(self, key: KeyT, value: EncodableT):
        """
        Returns a 0-based value indicating the rank of ``value`` in sorted set
        ``key``

        For more information check https://redis.io/commands/zrank
        """
        return self.execute_command("ZRANK", key, value)

    def zrem(self, key: KeyT, values: ValuesT):
        """
        Remove member ``values`` from sorted set ``key``

        For more information check https://redis.io/commands/zrem
        """
        return self.execute_command("ZREM", key, *iterkeysargs(values))

    def zremrangebylex(self, key: KeyT, min: EncodableT, max: EncodableT):
        """
        Remove all elements in the sorted set ``key`` between the
        lexicographical range specified by ``min`` and ``max``.

        Returns the number of elements removed.

        For more information check https://redis.io/commands/zremrangebylex
        """
        return self.execute_command("ZREMRANGEBYLEX", key, min, max)

    def zremrangebyrank(self, key: KeyT, start: int, end: int):
        """
        Remove all elements in the sorted set ``key`` with ranks between
        ``start`` and ``end``. Values are 0-based, ordered from smallest score
        to largest. Values can be negative indicating the highest scores.
        Returns the number of elements removed

        For more information check https://redis.io/commands/zremrangebyrank
        """
        return self.execute_command("ZREMRANGEBYRANK", key, start, end)

    def zremrangebyscore(self, key: KeyT, min: ScoreBoundT, max: ScoreBoundT):
        """
        Remove all elements in the sorted set ``key`` with scores
        between ``min`` and ``max``. Returns the number of elements removed.

        For more information check https://redis.io/commands/zremrangebyscore
        """
        return self.execute_command("ZREMRANGEBYSCORE", key, min, max)

    def zrevrange(
        self,
        key: KeyT,
        start: int = RANGE_START,
        end: int = RANGE_END,
        options: OptionsT = (),
    ):
        """
        Return a range of values from sorted set ``key`` between
        ``start`` and ``end`` sorted in descending order. The whole set by
        default.

        For more information check https://redis.io/commands/zrevrange
        """
        return self.execute_command(
            "ZREVRANGE", key, start, end, *iteroptions(options)
        )

    def zrevrangebylex(
        self, key: KeyT, max: EncodableT, min: EncodableT, options: OptionsT = ()
    ):
        """
        Return the reversed lexicographical range of values from sorted set
        ``key`` between ``max`` and ``min``.

        For more information check https://redis.io/commands/zrevrangebylex
        """
        return self.execute_command(
            "ZREVRANGEBYLEX", key, max, min, *iteroptions(options)
        )

    def zrevrangebyscore(
        self, key: KeyT, max: ScoreBoundT, min: ScoreBoundT, options: OptionsT = ()
    ):
        """
        Return a range of values from the sorted set ``key`` with scores
        between ``max`` and ``min`` in descending order.

        For more information check https://redis.io/commands/zrevrangebyscore
        """
        return self.execute_command(
            "ZREVRANGEBYSCORE", key, max, min, *iteroptions(options)
        )

    def zrevrank(self, key: KeyT, value: EncodableT):
        """
        Returns a 0-based value indicating the descending rank of
        ``value`` in sorted set ``key``

        For more information check https://redis.io/commands/zrevrank
        """
        return self.execute_command("ZREVRANK", key, value)

    def zscan(self, key: KeyT, cursor: int = 0, options: OptionsT = ()):
        """
        Incrementally return lists of elements in a sorted set. ``options``
        are appended as given.

        For more information check https://redis.io/commands/zscan
        """
        return self.execute_command("ZSCAN", key, cursor, *iteroptions(options))

    def zscore(self, key: KeyT, value: EncodableT):
        """
        Return the score of element ``value`` in sorted set ``key``

        For more information check https://redis.io/commands/zscore
        """
        return self.execute_command("ZSCORE", key, value)

    def zunionstore(self, dest: KeyT, keys: KeysT, options: OptionsT = ()):
        """
        Union multiple sorted sets specified by ``keys`` into
        a new sorted set, ``dest``. ``options`` (``WEIGHTS``, ``AGGREGATE``)
        are appended after the keys, as given.

        For more information check https://redis.io/commands/zunionstore
        """
        return self._zaggregate("ZUNIONSTORE", dest, keys, options)

    def _zaggregate(self, command: str, dest: KeyT, keys: KeysT, options: OptionsT):
        keys = [*iterkeysargs(keys)]
        return self.execute_command(
            command, dest, len(keys), *keys, *iteroptions(options)
        )
