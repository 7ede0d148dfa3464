from __future__ import annotations

from typing import Any

from redicmd.sansio.commands.base import CommandsProtocol
from redicmd.sansio.constants import NOTSET, RANGE_END, RANGE_START
from redicmd.sansio.normalize import iterkeysargs, iterpairs
from redicmd.sansio.types import EncodableT, KeysT, KeyT, PairsT


class StringCommands(CommandsProtocol):
    """
    Redis commands for String data type.
    see: https://redis.io/topics/data-types#strings
    """

    def append(self, key: KeyT, value: EncodableT):
        """
        Appends the string ``value`` to the value at ``key``. If ``key``
        doesn't already exist, create it with a value of ``value``.
        Returns the new length of the value at ``key``.

        For more information check https://redis.io/commands/append
        """
        return self.execute_command("APPEND", key, value)

    def bitcount(
        self, key: KeyT, start: int | str = RANGE_START, end: int | str = RANGE_END
    ):
        """
        Returns the count of set bits in the value of ``key``. ``start`` and
        ``end`` select a byte range and default to the whole string.

        For more information check https://redis.io/commands/bitcount
        """
        return self.execute_command("BITCOUNT", key, start, end)

    def bitop(self, operation: str, dest: KeyT, keys: KeysT):
        """
        Perform a bitwise operation using ``operation`` between ``keys`` and
        store the result in ``dest``.

        For more information check https://redis.io/commands/bitop
        """
        return self.execute_command("BITOP", operation, dest, *iterkeysargs(keys))

    def bitpos(
        self,
        key: KeyT,
        bit: int,
        start: int | str = RANGE_START,
        end: int | str = RANGE_END,
    ):
        """
        Return the position of the first bit set to 1 or 0 in a string.
        ``start`` and ``end`` define the searched byte range and default to
        the whole string.

        For more information check https://redis.io/commands/bitpos
        """
        return self.execute_command("BITPOS", key, bit, start, end)

    def decr(self, key: KeyT):
        """
        Decrements the integer value of ``key`` by one.

        For more information check https://redis.io/commands/decr
        """
        return self.execute_command("DECR", key)

    def decrby(self, key: KeyT, amount: int):
        """
        Decrements the value of ``key`` by ``amount``.  If no key exists,
        the value will be initialized as 0 - ``amount``

        For more information check https://redis.io/commands/decrby
        """
        return self.execute_command("DECRBY", key, amount)

    def get(self, key: KeyT):
        """
        Return the value at key ``key``, or None if the key doesn't exist

        For more information check https://redis.io/commands/get
        """
        return self.execute_command("GET", key)

    def getbit(self, key: KeyT, offset: int):
        """
        Returns a boolean indicating the value of ``offset`` in ``key``

        For more information check https://redis.io/commands/getbit
        """
        return self.execute_command("GETBIT", key, offset)

    def getrange(self, key: KeyT, start: int, end: int):
        """
        Returns the substring of the string value stored at ``key``,
        determined by the offsets ``start`` and ``end`` (both are inclusive)

        For more information check https://redis.io/commands/getrange
        """
        return self.execute_command("GETRANGE", key, start, end)

    def getset(self, key: KeyT, value: EncodableT):
        """
        Sets the value at key ``key`` to ``value``
        and returns the old value at key ``key`` atomically.

        For more information check https://redis.io/commands/getset
        """
        return self.execute_command("GETSET", key, value)

    def incr(self, key: KeyT):
        """
        Increments the integer value of ``key`` by one.

        For more information check https://redis.io/commands/incr
        """
        return self.execute_command("INCR", key)

    def incrby(self, key: KeyT, amount: int):
        """
        Increments the value of ``key`` by ``amount``.  If no key exists,
        the value will be initialized as ``amount``

        For more information check https://redis.io/commands/incrby
        """
        return self.execute_command("INCRBY", key, amount)

    def incrbyfloat(self, key: KeyT, amount: float):
        """
        Increments the value at key ``key`` by floating ``amount``.
        ``amount`` is sent as plain decimal text, never in exponent form.

        For more information check https://redis.io/commands/incrbyfloat
        """
        return self.execute_command("INCRBYFLOAT", key, amount)

    def mget(self, keys: KeysT):
        """
        Returns a list of values ordered identically to ``keys``

        For more information check https://redis.io/commands/mget
        """
        return self.execute_command("MGET", *iterkeysargs(keys))

    def mset(self, pairs: PairsT | KeyT, value: Any = NOTSET):
        """
        Sets key/values based on ``pairs``. ``pairs`` is either a flat
        ``[k1, v1, k2, v2]`` sequence or a ``[(k1, v1), (k2, v2)]`` sequence.
        A single pair may also be given as ``mset(key, value)``.

        For more information check https://redis.io/commands/mset
        """
        return self.execute_command("MSET", *iterpairs(pairs, value))

    def msetnx(self, pairs: PairsT | KeyT, value: Any = NOTSET):
        """
        Sets key/values based on ``pairs`` if none of the keys are already set.
        Accepts the same shapes as :py:meth:`mset`.

        For more information check https://redis.io/commands/msetnx
        """
        return self.execute_command("MSETNX", *iterpairs(pairs, value))

    def psetex(self, key: KeyT, milliseconds: int, value: EncodableT):
        """
        Set the value of key ``key`` to ``value`` that expires in
        ``milliseconds`` milliseconds.

        For more information check https://redis.io/commands/psetex
        """
        return self.execute_command("PSETEX", key, milliseconds, value)

    def set(self, key: KeyT, value: EncodableT):
        """
        Set the value at key ``key`` to ``value``

        For more information check https://redis.io/commands/set
        """
        return self.execute_command("SET", key, value)

    def setbit(self, key: KeyT, offset: int, value: int):
        """
        Flag the ``offset`` in ``key`` as ``value``. Returns the original bit.

        For more information check https://redis.io/commands/setbit
        """
        return self.execute_command("SETBIT", key, offset, value)

    def setex(self, key: KeyT, seconds: int, value: EncodableT):
        """
        Set the value of key ``key`` to ``value`` that expires in ``seconds``
        seconds.

        For more information check https://redis.io/commands/setex
        """
        return self.execute_command("SETEX", key, seconds, value)

    def setnx(self, key: KeyT, value: EncodableT):
        """
        Set the value of key ``key`` to ``value`` if key doesn't exist

        For more information check https://redis.io/commands/setnx
        """
        return self.execute_command("SETNX", key, value)

    def setrange(self, key: KeyT, offset: int, value: EncodableT):
        """
        Overwrite bytes in the value of ``key`` starting at ``offset`` with
        ``value``. Returns the length of the new string.

        For more information check https://redis.io/commands/setrange
        """
        return self.execute_command("SETRANGE", key, offset, value)

    def strlen(self, key: KeyT):
        """
        Return the number of bytes stored in the value of ``key``

        For more information check https://redis.io/commands/strlen
        """
        return self.execute_command("STRLEN", key)
