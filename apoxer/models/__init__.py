"""
Models package

One model per module:
- user.py (login identity)
- game.py, community.py, guide.py, playguide.py, gameversion.py, event.py
- player.py (per-game presence)
- profile.py, follow.py, playergame.py, lfgpost.py (social)
- usergame.py (library)
"""

from .user import User
from .game import Game
from .community import Community, CommunityMembership
from .guide import Guide
from .playguide import PlayGuide
from .gameversion import GameVersion
from .event import Event, EventParticipant
from .player import Player
from .profile import Profile
from .follow import Follow
from .playergame import PlayerGame
from .lfgpost import LfgPost
from .usergame import UserGame

__all__ = [
    "User",
    "Game",
    "Community",
    "CommunityMembership",
    "Guide",
    "PlayGuide",
    "GameVersion",
    "Event",
    "EventParticipant",
    "Player",
    "Profile",
    "Follow",
    "PlayerGame",
    "LfgPost",
    "UserGame",
]
