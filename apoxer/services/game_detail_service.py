"""
Game detail page aggregation
"""

from dataclasses import dataclass
from typing import Dict, Optional

import structlog

from apoxer.exceptions import NotFoundException
from apoxer.repositories.communities_repository import CommunitiesRepository
from apoxer.repositories.events_repository import EventsRepository, GameVersionsRepository
from apoxer.repositories.games_repository import GamesRepository
from apoxer.repositories.guides_repository import GuidesRepository, PlayGuidesRepository
from apoxer.repositories.players_repository import PlayersRepository
from apoxer.repositories.usergames_repository import UserGamesRepository
from apoxer.services.aggregation import SliceResult, gather_slices
from apoxer.settings import get_setting
from apoxer.viewmodels import GameView, PlayGuideView, camel_case

logger = structlog.get_logger("games")


@dataclass
class GameDetail:
    game: GameView
    sections: Dict[str, SliceResult]

    def section(self, name) -> Optional[SliceResult]:
        return self.sections.get(name)

    @property
    def failed_sections(self):
        return [name for name, result in self.sections.items() if not result.ok]

    def to_dict(self):
        data = {"game": self.game.to_dict()}
        for name, result in self.sections.items():
            data[camel_case(name)] = result.to_dict()
        return data


def get_game_detail(slug, user_id=None) -> Optional[GameDetail]:
    """
    Resolve the game and fetch every section of its page concurrently.

    Returns None for an unknown slug. Section failures are kept on the
    matching ``SliceResult``; only the game lookup itself can raise.
    """
    game = GamesRepository.get_by_slug(slug)
    if game is None:
        return None

    similar_limit = int(get_setting("games", "similar_limit", 8))
    tasks = {
        "communities": lambda: CommunitiesRepository.get_by_game(game.id),
        "guides": lambda: GuidesRepository.get_by_game(game.id),
        "play_guides": lambda: PlayGuidesRepository.get_by_game(game.id),
        "players": lambda: PlayersRepository.get_by_game(game.id),
        "similar_games": lambda: GamesRepository.get_similar(game, limit=similar_limit),
        "events": lambda: EventsRepository.get_active_by_game(game.id),
        "versions": lambda: GameVersionsRepository.get_by_game(game.id),
    }
    if user_id:
        tasks["in_library"] = lambda: UserGamesRepository.in_library(user_id, game.id)

    sections = gather_slices(tasks)
    detail = GameDetail(game=game, sections=sections)
    if detail.failed_sections:
        logger.warning("game_detail_partial", slug=slug, failed=detail.failed_sections)
    return detail


def get_play_guide(slug, play_guide_id) -> tuple[GameView, PlayGuideView]:
    game = GamesRepository.get_by_slug(slug)
    if game is None:
        raise NotFoundException(f"Game '{slug}' not found")
    play_guide = PlayGuidesRepository.get_for_game(game.id, play_guide_id)
    if play_guide is None:
        raise NotFoundException(f"Guide '{play_guide_id}' not found for {game.title}")
    return game, play_guide
