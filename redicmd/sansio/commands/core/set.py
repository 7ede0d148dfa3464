from __future__ import annotations

from redicmd.sansio.commands.base import CommandsProtocol
from redicmd.sansio.normalize import iterkeysargs, iteroptions
from redicmd.sansio.types import EncodableT, KeysT, KeyT, OptionsT, ValuesT


class SetCommands(CommandsProtocol):
    """
    Redis commands for Set data type.
    see: https://redis.io/topics/data-types#sets
    """

    def sadd(self, key: KeyT, values: ValuesT):
        """
        Add ``value(s)`` to set ``key``

        For more information check https://redis.io/commands/sadd
        """
        return self.execute_command("SADD", key, *iterkeysargs(values))

    def scard(self, key: KeyT):
        """
        Return the number of elements in set ``key``

        For more information check https://redis.io/commands/scard
        """
        return self.execute_command("SCARD", key)

    def sdiff(self, key: KeyT, keys: KeysT = ()):
        """
        Return the difference of the set ``key`` and the sets in ``keys``

        For more information check https://redis.io/commands/sdiff
        """
        return self.execute_command("SDIFF", key, *iterkeysargs(keys))

    def sdiffstore(self, dest: KeyT, key: KeyT, keys: KeysT = ()):
        """
        Store the difference of the set ``key`` and the sets in ``keys`` into
        a new set named ``dest``.  Returns the number of keys in the new set.

        For more information check https://redis.io/commands/sdiffstore
        """
        return self.execute_command("SDIFFSTORE", dest, key, *iterkeysargs(keys))

    def sinter(self, key: KeyT, keys: KeysT = ()):
        """
        Return the intersection of the set ``key`` and the sets in ``keys``

        For more information check https://redis.io/commands/sinter
        """
        return self.execute_command("SINTER", key, *iterkeysargs(keys))

    def sinterstore(self, dest: KeyT, key: KeyT, keys: KeysT = ()):
        """
        Store the intersection of the set ``key`` and the sets in ``keys`` into
        a new set named ``dest``.  Returns the number of keys in the new set.

        For more information check https://redis.io/commands/sinterstore
        """
        return self.execute_command("SINTERSTORE", dest, key, *iterkeysargs(keys))

    def sismember(self, key: KeyT, value: EncodableT):
        """
        Return whether ``value`` is a member of set ``key``

        For more information check https://redis.io/commands/sismember
        """
        return self.execute_command("SISMEMBER", key, value)

    def smembers(self, key: KeyT):
        """
        Return all members of the set ``key``

        For more information check https://redis.io/commands/smembers
        """
        return self.execute_command("SMEMBERS", key)

    def smove(self, src: KeyT, dst: KeyT, value: EncodableT):
        """
        Move ``value`` from set ``src`` to set ``dst`` atomically

        For more information check https://redis.io/commands/smove
        """
        return self.execute_command("SMOVE", src, dst, value)

    def spop(self, key: KeyT):
        """
        Remove and return a random member of set ``key``

        For more information check https://redis.io/commands/spop
        """
        return self.execute_command("SPOP", key)

    def srandmember(self, key: KeyT, count: int = 1):
        """
        Return a list of ``count`` random members of set ``key``, without
        removing them. A negative ``count`` allows repeated members.

        For more information check https://redis.io/commands/srandmember
        """
        return self.execute_command("SRANDMEMBER", key, count)

    def srem(self, key: KeyT, values: ValuesT):
        """
        Remove ``values`` from set ``key``

        For more information check https://redis.io/commands/srem
        """
        return self.execute_command("SREM", key, *iterkeysargs(values))

    def sscan(self, key: KeyT, cursor: int = 0, options: OptionsT = ()):
        """
        Incrementally return lists of elements in a set. ``options`` are
        appended as given, e.g. ``["MATCH", "a*", "COUNT", 10]``.

        For more information check https://redis.io/commands/sscan
        """
        return self.execute_command("SSCAN", key, cursor, *iteroptions(options))

    def sunion(self, key: KeyT, keys: KeysT = ()):
        """
        Return the union of the set ``key`` and the sets in ``keys``

        For more information check https://redis.io/commands/sunion
        """
        return self.execute_command("SUNION", key, *iterkeysargs(keys))

    def sunionstore(self, dest: KeyT, key: KeyT, keys: KeysT = ()):
        """
        Store the union of the set ``key`` and the sets in ``keys`` into a new
        set named ``dest``.  Returns the number of keys in the new set.

        For more information check https://redis.io/commands/sunionstore
        """
        return self.execute_command("SUNIONSTORE", dest, key, *iterkeysargs(keys))
