"""
View models handed from the data access layer to routes and templates.

Attribute names are snake_case; ``to_dict()`` emits the camelCase keys used
by the JSON API. Mapped fields have no defaults, so a mapper that forgets a
column fails at construction time instead of rendering a blank.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from datetime import date, datetime
from typing import Dict, List, Optional

from apoxer.utils import player_display_name


def camel_case(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


def serialize(value):
    if is_dataclass(value) and not isinstance(value, type):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class ViewModel:
    def to_dict(self) -> Dict:
        return {camel_case(f.name): serialize(getattr(self, f.name)) for f in fields(self)}


@dataclass
class GameRef(ViewModel):
    id: str
    title: str
    slug: str
    cover_url: Optional[str]


@dataclass
class GameView(ViewModel):
    id: str
    slug: str
    title: str
    description: Optional[str]
    cover_url: str
    hero_url: Optional[str]
    platforms: List[str]
    genres: List[str]
    tags: List[str]
    created_at: Optional[datetime]


@dataclass
class CommunityView(ViewModel):
    id: str
    game_id: str
    name: str
    invite_url: str
    category: Optional[str]
    language: Optional[str]
    online_count: int
    description: Optional[str]
    tags: List[str]
    member_count: int
    region: Optional[str]
    voice_required: bool
    created_at: Optional[datetime]


@dataclass
class GuideView(ViewModel):
    id: str
    game_id: str
    title: str
    content: str
    created_by: Optional[str]
    upvotes: int
    created_at: Optional[datetime]


@dataclass
class GameVersionView(ViewModel):
    id: str
    game_id: str
    version_name: str
    created_by: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


@dataclass
class PlayGuideView(ViewModel):
    id: str
    game_id: str
    title: str
    summary: str
    from_platform: Optional[str]
    to_platform: Optional[str]
    steps: str
    platform: Optional[str]
    game_version_id: Optional[str]
    last_updated: Optional[datetime]
    game_version: Optional[GameVersionView]

    @property
    def step_lines(self) -> List[str]:
        return [line for line in self.steps.split('\n') if line.strip()]


@dataclass
class PlayerView(ViewModel):
    id: str
    user_id: str
    game_id: str
    platform: Optional[str]
    status: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    username: Optional[str]
    email: Optional[str]
    game: Optional[GameRef]

    @property
    def display_name(self) -> str:
        return player_display_name(self.user_id, self.username, self.email)

    def to_dict(self) -> Dict:
        data = super().to_dict()
        data['displayName'] = self.display_name
        return data


@dataclass
class ParticipantView(ViewModel):
    id: str
    user_id: str
    joined_at: Optional[datetime]


@dataclass
class EventView(ViewModel):
    id: str
    game_id: str
    game_version_id: Optional[str]
    created_by: Optional[str]
    description: Optional[str]
    tags: List[str]
    players_needed: int
    players_have: int
    start_date: Optional[str]
    start_time: Optional[str]
    start_datetime: Optional[datetime]
    language: Optional[str]
    platform: Optional[str]
    status: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    game_version: Optional[GameVersionView]
    game: Optional[GameRef]
    participants: List[ParticipantView]

    @property
    def creator_name(self) -> str:
        return player_display_name(self.created_by)

    @property
    def slots_left(self) -> int:
        return max(self.players_needed - self.players_have, 0)


@dataclass
class PlayerSummaryView(ViewModel):
    id: str
    username: str
    display_name: str
    avatar_url: Optional[str]


@dataclass
class ProfileView(ViewModel):
    id: str
    user_id: str
    username: str
    display_name: str
    bio: Optional[str]
    avatar_url: Optional[str]
    banner_url: Optional[str]
    timezone: Optional[str]
    location: Optional[str]
    website: Optional[str]
    created_at: Optional[datetime]


@dataclass
class ProfileGameView(ViewModel):
    id: str
    game_id: str
    title: str
    slug: str
    cover_url: str
    platforms: List[str]
    status: str
    hours_played: Optional[int]
    platform: Optional[str]
    skill_level: Optional[str]
    is_featured: bool


@dataclass
class ProfileCommunityView(ViewModel):
    id: str
    name: str
    game_slug: str
    game_title: str
    members_count: int
    role: str
    primary_platform: str
    link: str


@dataclass
class ProfileGuideView(ViewModel):
    id: str
    title: str
    game_slug: str
    game_title: str
    created_at: Optional[datetime]
    upvotes: int


@dataclass
class ProfileEventView(ViewModel):
    id: str
    game_title: str
    game_slug: str
    description: Optional[str]
    start_datetime: Optional[datetime]
    time_label: str
    platform: Optional[str]
    slots_total: int
    slots_taken: int
    status: str


@dataclass
class FeedPostView(ViewModel):
    id: str
    player_id: str
    game_id: str
    title: str
    description: Optional[str]
    platform: Optional[str]
    scheduled_at: Optional[datetime]
    max_players: Optional[int]
    current_players: Optional[int]
    voice_required: Optional[bool]
    external_link: Optional[str]
    is_pinned: bool
    created_at: Optional[datetime]
    player: PlayerSummaryView
    game: GameRef


@dataclass
class ProfileStats(ViewModel):
    games_count: Optional[int]
    communities_count: Optional[int]
    guides_count: Optional[int]
    events_count: Optional[int]
    followers_count: Optional[int]
    following_count: Optional[int]


@dataclass
class UserProfileView(ViewModel):
    """
    Aggregated public profile.

    List sections are ``None`` when the fetch behind them failed; the reason
    is kept in ``errors`` under the section name.
    """
    id: str
    user_id: str
    username: str
    display_name: str
    avatar_url: Optional[str]
    banner_url: Optional[str]
    bio: Optional[str]
    timezone: Optional[str]
    location: Optional[str]
    website: Optional[str]
    created_at: Optional[datetime]
    stats: ProfileStats
    favorite_games: Optional[List[ProfileGameView]]
    games: Optional[List[ProfileGameView]]
    communities: Optional[List[ProfileCommunityView]]
    guides: Optional[List[ProfileGuideView]]
    events: Optional[List[ProfileEventView]]
    pinned_post: Optional[FeedPostView]
    errors: Dict[str, str] = field(default_factory=dict)


@dataclass
class FeedView(ViewModel):
    player_id: str
    following_count: int
    posts: List[FeedPostView]

    @property
    def is_empty(self) -> bool:
        return not self.posts
