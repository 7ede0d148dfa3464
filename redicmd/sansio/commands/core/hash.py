from __future__ import annotations

from typing import Any

from redicmd.sansio.commands.base import CommandsProtocol
from redicmd.sansio.constants import NOTSET
from redicmd.sansio.normalize import iterkeysargs, iteroptions, iterpairs
from redicmd.sansio.types import EncodableT, KeysT, KeyT, OptionsT, PairsT


class HashCommands(CommandsProtocol):
    """
    Redis commands for Hash data type.
    see: https://redis.io/topics/data-types-intro#redis-hashes
    """

    def hdel(self, key: KeyT, fields: KeysT):
        """
        Delete ``fields`` from hash ``key``

        For more information check https://redis.io/commands/hdel
        """
        return self.execute_command("HDEL", key, *iterkeysargs(fields))

    def hexists(self, key: KeyT, field: KeyT):
        """
        Returns whether ``field`` exists within hash ``key``

        For more information check https://redis.io/commands/hexists
        """
        return self.execute_command("HEXISTS", key, field)

    def hget(self, key: KeyT, field: KeyT):
        """
        Return the value of ``field`` within the hash ``key``

        For more information check https://redis.io/commands/hget
        """
        return self.execute_command("HGET", key, field)

    def hgetall(self, key: KeyT):
        """
        Return the hash's field/value pairs as a flat list

        For more information check https://redis.io/commands/hgetall
        """
        return self.execute_command("HGETALL", key)

    def hincrby(self, key: KeyT, field: KeyT, amount: int = 1):
        """
        Increment the value of ``field`` in hash ``key`` by ``amount``

        For more information check https://redis.io/commands/hincrby
        """
        return self.execute_command("HINCRBY", key, field, amount)

    def hincrbyfloat(self, key: KeyT, field: KeyT, amount: float = 1.0):
        """
        Increment the value of ``field`` in hash ``key`` by floating ``amount``

        For more information check https://redis.io/commands/hincrbyfloat
        """
        return self.execute_command("HINCRBYFLOAT", key, field, amount)

    def hkeys(self, key: KeyT):
        """
        Return the list of fields within hash ``key``

        For more information check https://redis.io/commands/hkeys
        """
        return self.execute_command("HKEYS", key)

    def hlen(self, key: KeyT):
        """
        Return the number of elements in hash ``key``

        For more information check https://redis.io/commands/hlen
        """
        return self.execute_command("HLEN", key)

    def hmget(self, key: KeyT, fields: KeysT):
        """
        Returns a list of values ordered identically to ``fields``

        For more information check https://redis.io/commands/hmget
        """
        return self.execute_command("HMGET", key, *iterkeysargs(fields))

    def hset(self, key: KeyT, pairs: PairsT | KeyT, value: Any = NOTSET):
        """
        Set field/value pairs in hash ``key``. ``pairs`` is either a flat
        ``[f1, v1, f2, v2]`` sequence or a ``[(f1, v1), (f2, v2)]`` sequence.
        A single pair may also be given as ``hset(key, field, value)``.

        Returns the number of fields that were added.

        For more information check https://redis.io/commands/hset
        """
        return self.execute_command("HSET", key, *iterpairs(pairs, value))

    def hsetnx(self, key: KeyT, field: KeyT, value: EncodableT):
        """
        Set ``field`` to ``value`` within hash ``key`` if ``field`` does not
        exist.  Returns 1 if HSETNX created a field, otherwise 0.

        For more information check https://redis.io/commands/hsetnx
        """
        return self.execute_command("HSETNX", key, field, value)

    def hstrlen(self, key: KeyT, field: KeyT):
        """
        Return the number of bytes stored in the value of ``field``
        within hash ``key``

        For more information check https://redis.io/commands/hstrlen
        """
        return self.execute_command("HSTRLEN", key, field)

    def hvals(self, key: KeyT):
        """
        Return the list of values within hash ``key``

        For more information check https://redis.io/commands/hvals
        """
        return self.execute_command("HVALS", key)

    def hscan(self, key: KeyT, cursor: int = 0, options: OptionsT = ()):
        """
        Incrementally return field/value slices in a hash. ``options`` are
        appended as given.

        For more information check https://redis.io/commands/hscan
        """
        return self.execute_command("HSCAN", key, cursor, *iteroptions(options))
