from __future__ import annotations

from redicmd.sansio.commands.base import CommandsProtocol
from redicmd.sansio.constants import RANGE_END, RANGE_START
from redicmd.sansio.normalize import iterkeysargs
from redicmd.sansio.types import EncodableT, KeysT, KeyT, ValuesT


class ListCommands(CommandsProtocol):
    """
    Redis commands for List data type.
    see: https://redis.io/topics/data-types#lists
    """

    def blpop(self, keys: KeysT, timeout: int = 0):
        """
        LPOP a value off of the first non-empty list
        named in the ``keys`` list.

        If none of the lists in ``keys`` has a value to LPOP, then block
        for ``timeout`` seconds, or until a value gets pushed on to one
        of the lists.

        If timeout is 0, then block indefinitely.

        For more information check https://redis.io/commands/blpop
        """
        return self.execute_command("BLPOP", *iterkeysargs(keys, (timeout,)))

    def brpop(self, keys: KeysT, timeout: int = 0):
        """
        RPOP a value off of the first non-empty list
        named in the ``keys`` list.

        If none of the lists in ``keys`` has a value to RPOP, then block
        for ``timeout`` seconds, or until a value gets pushed on to one
        of the lists.

        If timeout is 0, then block indefinitely.

        For more information check https://redis.io/commands/brpop
        """
        return self.execute_command("BRPOP", *iterkeysargs(keys, (timeout,)))

    def brpoplpush(self, src: KeyT, dst: KeyT, timeout: int = 0):
        """
        Pop a value off the tail of ``src``, push it on the head of ``dst``
        and then return it.

        This command blocks until a value is in ``src`` or until ``timeout``
        seconds elapse, whichever is first. A ``timeout`` value of 0 blocks
        forever.

        For more information check https://redis.io/commands/brpoplpush
        """
        return self.execute_command("BRPOPLPUSH", src, dst, timeout)

    def lindex(self, key: KeyT, index: int):
        """
        Return the item from list ``key`` at position ``index``

        Negative indexes are supported and will return an item at the
        end of the list

        For more information check https://redis.io/commands/lindex
        """
        return self.execute_command("LINDEX", key, index)

    def linsert(self, key: KeyT, where: str, refvalue: EncodableT, value: EncodableT):
        """
        Insert ``value`` in list ``key`` either immediately before or after
        [``where``] ``refvalue``

        Returns the new length of the list on success or -1 if ``refvalue``
        is not in the list.

        For more information check https://redis.io/commands/linsert
        """
        return self.execute_command("LINSERT", key, where, refvalue, value)

    def llen(self, key: KeyT):
        """
        Return the length of the list ``key``

        For more information check https://redis.io/commands/llen
        """
        return self.execute_command("LLEN", key)

    def lpop(self, key: KeyT):
        """
        Removes and returns the first element of the list ``key``.

        For more information check https://redis.io/commands/lpop
        """
        return self.execute_command("LPOP", key)

    def lpush(self, key: KeyT, values: ValuesT):
        """
        Push ``values`` onto the head of the list ``key``

        For more information check https://redis.io/commands/lpush
        """
        return self.execute_command("LPUSH", key, *iterkeysargs(values))

    def lpushx(self, key: KeyT, value: EncodableT):
        """
        Push ``value`` onto the head of the list ``key`` if ``key`` exists

        For more information check https://redis.io/commands/lpushx
        """
        return self.execute_command("LPUSHX", key, value)

    def lrange(self, key: KeyT, start: int = RANGE_START, end: int = RANGE_END):
        """
        Return a slice of the list ``key`` between
        position ``start`` and ``end``. The whole list by default.

        ``start`` and ``end`` can be negative numbers just like
        Python slicing notation

        For more information check https://redis.io/commands/lrange
        """
        return self.execute_command("LRANGE", key, start, end)

    def lrem(self, key: KeyT, count: int, value: EncodableT):
        """
        Remove the first ``count`` occurrences of elements equal to ``value``
        from the list stored at ``key``.

        The count argument influences the operation in the following ways:
            count > 0: Remove elements equal to value moving from head to tail.
            count < 0: Remove elements equal to value moving from tail to head.
            count = 0: Remove all elements equal to value.

        For more information check https://redis.io/commands/lrem
        """
        return self.execute_command("LREM", key, count, value)

    def lset(self, key: KeyT, index: int, value: EncodableT):
        """
        Set element at ``index`` of list ``key`` to ``value``

        For more information check https://redis.io/commands/lset
        """
        return self.execute_command("LSET", key, index, value)

    def ltrim(self, key: KeyT, start: int, end: int):
        """
        Trim the list ``key``, removing all values not within the slice
        between ``start`` and ``end``

        ``start`` and ``end`` can be negative numbers just like
        Python slicing notation

        For more information check https://redis.io/commands/ltrim
        """
        return self.execute_command("LTRIM", key, start, end)

    def rpop(self, key: KeyT):
        """
        Removes and returns the last element of the list ``key``.

        For more information check https://redis.io/commands/rpop
        """
        return self.execute_command("RPOP", key)

    def rpoplpush(self, src: KeyT, dst: KeyT):
        """
        RPOP a value off of the ``src`` list and atomically LPUSH it
        on to the ``dst`` list.  Returns the value.

        For more information check https://redis.io/commands/rpoplpush
        """
        return self.execute_command("RPOPLPUSH", src, dst)

    def rpush(self, key: KeyT, values: ValuesT):
        """
        Push ``values`` onto the tail of the list ``key``

        For more information check https://redis.io/commands/rpush
        """
        return self.execute_command("RPUSH", key, *iterkeysargs(values))

    def rpushx(self, key: KeyT, value: EncodableT):
        """
        Push ``value`` onto the tail of the list ``key`` if ``key`` exists

        For more information check https://redis.io/commands/rpushx
        """
        return self.execute_command("RPUSHX", key, value)
