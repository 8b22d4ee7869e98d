"""Role definitions and assignment logic."""

import random
from enum import Enum

from .player import Player


class Role(str, Enum):
    """Player roles in a round."""

    MASTER = "master"
    INSIDER = "insider"
    COMMON = "common"


def assign_roles(players: list[Player], rng: random.Random | None = None) -> list[Player]:
    """Randomly assign roles to players.

    The players are shuffled; the first becomes the Master, the second the
    Insider and everyone else a Commoner. The lobby's players are left
    untouched, role-tagged copies are returned in shuffled order.

    Args:
        players: Lobby players in join order
        rng: Random generator to shuffle with, the module generator if omitted

    Returns:
        Role-tagged copies of the players

    Raises:
        ValueError: If fewer than 2 players are given
    """
    if len(players) < 2:
        raise ValueError("Minimum 2 players required")

    shuffled = list(players)
    (rng or random).shuffle(shuffled)

    assigned = [shuffled[0].with_role(Role.MASTER.value), shuffled[1].with_role(Role.INSIDER.value)]
    assigned.extend(p.with_role(Role.COMMON.value) for p in shuffled[2:])
    return assigned
