from __future__ import annotations

from redicmd.sansio.commands.core.hash import HashCommands
from redicmd.sansio.commands.core.key import BasicKeyCommands
from redicmd.sansio.commands.core.list import ListCommands
from redicmd.sansio.commands.core.set import SetCommands
from redicmd.sansio.commands.core.string import StringCommands
from redicmd.sansio.commands.core.zset import SortedSetCommands


class CoreCommands(
    BasicKeyCommands,
    StringCommands,
    HashCommands,
    ListCommands,
    SetCommands,
    SortedSetCommands,
):
    """
    A class containing all of the implemented data access redis commands.
    This class is to be used as a mixin.
    """
