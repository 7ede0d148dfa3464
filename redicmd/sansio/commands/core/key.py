from __future__ import annotations

from redicmd.sansio.commands.base import CommandsProtocol
from redicmd.sansio.normalize import iterkeysargs, iteroptions
from redicmd.sansio.types import KeysT, KeyT, OptionsT


class BasicKeyCommands(CommandsProtocol):
    """
    Redis basic key-based commands
    """

    def delete(self, keys: KeysT):
        """
        Delete one or more keys specified by ``keys``. A single key or an
        ordered collection of keys are equivalent.

        For more information check https://redis.io/commands/del
        """
        return self.execute_command("DEL", *iterkeysargs(keys))

    def dump(self, key: KeyT):
        """
        Return a serialized version of the value stored at ``key``.

        For more information check https://redis.io/commands/dump
        """
        return self.execute_command("DUMP", key)

    def exists(self, keys: KeysT):
        """
        Returns the number of ``keys`` that exist

        For more information check https://redis.io/commands/exists
        """
        return self.execute_command("EXISTS", *iterkeysargs(keys))

    def expire(self, key: KeyT, seconds: int):
        """
        Set an expire flag on ``key`` for ``seconds`` seconds.

        For more information check https://redis.io/commands/expire
        """
        return self.execute_command("EXPIRE", key, seconds)

    def expireat(self, key: KeyT, timestamp: int):
        """
        Set an expire flag on ``key``. ``timestamp`` is a Unix timestamp
        in seconds.

        For more information check https://redis.io/commands/expireat
        """
        return self.execute_command("EXPIREAT", key, timestamp)

    def keys(self, pattern: str = "*"):
        """
        Returns a list of keys matching ``pattern``

        For more information check https://redis.io/commands/keys
        """
        return self.execute_command("KEYS", pattern)

    def move(self, key: KeyT, db: int):
        """
        Moves the key ``key`` to a different Redis database ``db``

        For more information check https://redis.io/commands/move
        """
        return self.execute_command("MOVE", key, db)

    def object(self, subcommand: str, key: KeyT):
        """
        Return the encoding, idletime, or refcount about the key

        For more information check https://redis.io/commands/object
        """
        return self.execute_command("OBJECT", subcommand, key)

    def persist(self, key: KeyT):
        """
        Removes an expiration on ``key``

        For more information check https://redis.io/commands/persist
        """
        return self.execute_command("PERSIST", key)

    def pexpire(self, key: KeyT, milliseconds: int):
        """
        Set an expire flag on ``key`` for ``milliseconds`` milliseconds.

        For more information check https://redis.io/commands/pexpire
        """
        return self.execute_command("PEXPIRE", key, milliseconds)

    def pexpireat(self, key: KeyT, timestamp: int):
        """
        Set an expire flag on ``key``. ``timestamp`` is a Unix timestamp
        in milliseconds.

        For more information check https://redis.io/commands/pexpireat
        """
        return self.execute_command("PEXPIREAT", key, timestamp)

    def pttl(self, key: KeyT):
        """
        Returns the number of milliseconds until ``key`` will expire

        For more information check https://redis.io/commands/pttl
        """
        return self.execute_command("PTTL", key)

    def randomkey(self):
        """
        Returns the name of a random key

        For more information check https://redis.io/commands/randomkey
        """
        return self.execute_command("RANDOMKEY")

    def rename(self, src: KeyT, dst: KeyT):
        """
        Rename key ``src`` to ``dst``

        For more information check https://redis.io/commands/rename
        """
        return self.execute_command("RENAME", src, dst)

    def renamenx(self, src: KeyT, dst: KeyT):
        """
        Rename key ``src`` to ``dst`` if ``dst`` doesn't already exist

        For more information check https://redis.io/commands/renamenx
        """
        return self.execute_command("RENAMENX", src, dst)

    def restore(self, key: KeyT, ttl: int, value: bytes):
        """
        Create a key using the provided serialized value, previously obtained
        using DUMP. A ``ttl`` of 0 creates the key without an expire.

        For more information check https://redis.io/commands/restore
        """
        return self.execute_command("RESTORE", key, ttl, value)

    def scan(self, cursor: int = 0, options: OptionsT = ()):
        """
        Incrementally return lists of key names. ``options`` are appended
        as given, e.g. ``["MATCH", "user:*", "COUNT", 100]``.

        For more information check https://redis.io/commands/scan
        """
        return self.execute_command("SCAN", cursor, *iteroptions(options))

    def sort(self, key: KeyT, options: OptionsT = ()):
        """
        Sort and return the list, set or sorted set at ``key``.

        ``options`` are the raw SORT modifiers (``BY``, ``LIMIT``, ``GET``,
        ``ASC``/``DESC``, ``ALPHA``, ``STORE``), appended in the order given.

        For more information check https://redis.io/commands/sort
        """
        return self.execute_command("SORT", key, *iteroptions(options))

    def ttl(self, key: KeyT):
        """
        Returns the number of seconds until ``key`` will expire

        For more information check https://redis.io/commands/ttl
        """
        return self.execute_command("TTL", key)

    def type(self, key: KeyT):
        """
        Returns the type of ``key``

        For more information check https://redis.io/commands/type
        """
        return self.execute_command("TYPE", key)
