"""
Row to view model mappers.

One function per entity. Each one assigns every view model field by keyword
from the ORM row; missing array columns become empty lists and missing
counters become 0 so templates never see ``None`` where a list or number is
expected.
"""

from apoxer.utils import player_display_name
from apoxer.viewmodels import (
    CommunityView,
    EventView,
    FeedPostView,
    GameRef,
    GameVersionView,
    GameView,
    GuideView,
    ParticipantView,
    PlayGuideView,
    PlayerSummaryView,
    PlayerView,
    ProfileCommunityView,
    ProfileEventView,
    ProfileGameView,
    ProfileGuideView,
    ProfileView,
)


def _list(value):
    return list(value) if value else []


def map_game_ref(game):
    if game is None:
        return None
    return GameRef(
        id=game.id,
        title=game.title,
        slug=game.slug,
        cover_url=game.cover_url,
    )


def map_game(game):
    return GameView(
        id=game.id,
        slug=game.slug,
        title=game.title,
        description=game.description,
        cover_url=game.cover_url or '',
        hero_url=game.hero_url,
        platforms=_list(game.platforms),
        genres=_list(game.genres),
        tags=_list(game.tags),
        created_at=game.created_at,
    )


def map_community(community):
    return CommunityView(
        id=community.id,
        game_id=community.game_id,
        name=community.name,
        invite_url=community.invite_url,
        category=community.category,
        language=community.language,
        online_count=community.online_count or 0,
        description=community.description,
        tags=_list(community.tags),
        member_count=community.member_count or 0,
        region=community.region,
        voice_required=bool(community.voice_required),
        created_at=community.created_at,
    )


def map_guide(guide):
    return GuideView(
        id=guide.id,
        game_id=guide.game_id,
        title=guide.title,
        content=guide.content or '',
        created_by=guide.created_by,
        upvotes=guide.upvotes or 0,
        created_at=guide.created_at,
    )


def map_game_version(version):
    if version is None:
        return None
    return GameVersionView(
        id=version.id,
        game_id=version.game_id,
        version_name=version.version_name,
        created_by=version.created_by,
        created_at=version.created_at,
        updated_at=version.updated_at,
    )


def map_play_guide(play_guide):
    return PlayGuideView(
        id=play_guide.id,
        game_id=play_guide.game_id,
        title=play_guide.title,
        summary=play_guide.summary or '',
        from_platform=play_guide.from_platform,
        to_platform=play_guide.to_platform,
        steps=play_guide.steps or '',
        platform=play_guide.platform,
        game_version_id=play_guide.game_version_id,
        last_updated=play_guide.last_updated,
        game_version=map_game_version(play_guide.game_version),
    )


def map_player(player, user=None, game=None):
    """``user`` and ``game`` are the joined rows, when the query loaded them."""
    return PlayerView(
        id=player.id,
        user_id=player.user_id,
        game_id=player.game_id,
        platform=player.platform,
        status=player.status,
        created_at=player.created_at,
        updated_at=player.updated_at,
        username=user.username if user is not None else None,
        email=user.email if user is not None else None,
        game=map_game_ref(game),
    )


def map_participant(participant):
    return ParticipantView(
        id=participant.id,
        user_id=participant.user_id,
        joined_at=participant.joined_at,
    )


def map_event(event):
    return EventView(
        id=event.id,
        game_id=event.game_id,
        game_version_id=event.game_version_id,
        created_by=event.created_by,
        description=event.description,
        tags=_list(event.tags),
        players_needed=event.players_needed or 0,
        players_have=event.players_have or 0,
        start_date=event.start_date,
        start_time=event.start_time,
        start_datetime=event.start_datetime,
        language=event.language,
        platform=event.platform,
        status=event.status,
        created_at=event.created_at,
        updated_at=event.updated_at,
        game_version=map_game_version(event.game_version),
        game=map_game_ref(event.game),
        participants=[map_participant(p) for p in event.participants],
    )


def map_profile(profile):
    return ProfileView(
        id=profile.id,
        user_id=profile.user_id,
        username=profile.username,
        display_name=profile.display_name,
        bio=profile.bio,
        avatar_url=profile.avatar_url,
        banner_url=profile.banner_url,
        timezone=profile.timezone,
        location=profile.location,
        website=profile.website,
        created_at=profile.created_at,
    )


def map_player_summary(profile):
    return PlayerSummaryView(
        id=profile.id,
        username=profile.username,
        display_name=profile.display_name or player_display_name(profile.user_id, profile.username),
        avatar_url=profile.avatar_url,
    )


def map_profile_game(player_game):
    game = player_game.game
    return ProfileGameView(
        id=player_game.id,
        game_id=player_game.game_id,
        title=game.title,
        slug=game.slug,
        cover_url=game.cover_url or '',
        platforms=_list(game.platforms),
        status=player_game.status,
        hours_played=player_game.hours_played,
        platform=player_game.platform,
        skill_level=player_game.skill_level,
        is_featured=bool(player_game.is_featured),
    )


def map_profile_community(membership):
    community = membership.community
    game = community.game
    platforms = _list(game.platforms)
    return ProfileCommunityView(
        id=community.id,
        name=community.name,
        game_slug=game.slug,
        game_title=game.title,
        members_count=community.member_count or 0,
        role=membership.role,
        primary_platform=platforms[0] if platforms else 'PC',
        link=community.invite_url,
    )


def map_profile_guide(guide):
    return ProfileGuideView(
        id=guide.id,
        title=guide.title,
        game_slug=guide.game.slug,
        game_title=guide.game.title,
        created_at=guide.created_at,
        upvotes=guide.upvotes or 0,
    )


def map_profile_event(event):
    start = event.start_datetime
    return ProfileEventView(
        id=event.id,
        game_title=event.game.title,
        game_slug=event.game.slug,
        description=event.description,
        start_datetime=start,
        time_label=start.strftime('%a %d %b, %H:%M UTC') if start else 'TBA',
        platform=event.platform,
        slots_total=event.players_needed or 0,
        slots_taken=event.players_have or 0,
        status=event.status,
    )


def map_feed_post(post):
    return FeedPostView(
        id=post.id,
        player_id=post.profile_id,
        game_id=post.game_id,
        title=post.title,
        description=post.description,
        platform=post.platform,
        scheduled_at=post.scheduled_at,
        max_players=post.max_players,
        current_players=post.current_players,
        voice_required=post.voice_required,
        external_link=post.external_link,
        is_pinned=bool(post.is_pinned),
        created_at=post.created_at,
        player=map_player_summary(post.profile),
        game=map_game_ref(post.game),
    )
