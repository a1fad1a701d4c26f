"""
Public profile aggregation
"""

import structlog

from apoxer.exceptions import NotFoundException
from apoxer.repositories.communities_repository import CommunitiesRepository
from apoxer.repositories.events_repository import EventsRepository
from apoxer.repositories.follows_repository import FollowsRepository
from apoxer.repositories.guides_repository import GuidesRepository
from apoxer.repositories.lfgposts_repository import LfgPostsRepository
from apoxer.repositories.profiles_repository import ProfilesRepository
from apoxer.services.aggregation import gather_slices
from apoxer.settings import get_setting
from apoxer.viewmodels import ProfileStats, UserProfileView

logger = structlog.get_logger("profiles")


def _value(result, errors):
    if result.ok:
        return result.value
    errors[result.name] = result.error
    return None


def _length(items):
    return len(items) if items is not None else None


def get_user_profile(username):
    """
    The aggregated profile for ``username``, None when no such profile.

    Stats are counted from the fetched lists. A failed section leaves its
    list and its stat as None and records the error.
    """
    profile = ProfilesRepository.get_by_username(username)
    if profile is None:
        return None

    slices = gather_slices({
        "games": lambda: ProfilesRepository.get_player_games(profile.id),
        "communities": lambda: CommunitiesRepository.get_memberships(profile.id),
        "guides": lambda: GuidesRepository.get_by_author(profile.user_id),
        "events": lambda: EventsRepository.get_by_creator(profile.user_id),
        "followers_count": lambda: FollowsRepository.count_followers(profile.id),
        "following_count": lambda: FollowsRepository.count_following(profile.id),
        "pinned_post": lambda: LfgPostsRepository.get_pinned(profile.id),
    })

    errors = {}
    games = _value(slices["games"], errors)
    communities = _value(slices["communities"], errors)
    guides = _value(slices["guides"], errors)
    events = _value(slices["events"], errors)
    followers_count = _value(slices["followers_count"], errors)
    following_count = _value(slices["following_count"], errors)
    pinned_post = _value(slices["pinned_post"], errors)

    featured_limit = int(get_setting("profiles", "featured_limit", 6))
    favorite_games = None
    if games is not None:
        favorite_games = [game for game in games if game.is_featured][:featured_limit]

    if errors:
        logger.warning("profile_partial", username=username, failed=sorted(errors))

    return UserProfileView(
        id=profile.id,
        user_id=profile.user_id,
        username=profile.username,
        display_name=profile.display_name,
        avatar_url=profile.avatar_url,
        banner_url=profile.banner_url,
        bio=profile.bio,
        timezone=profile.timezone,
        location=profile.location,
        website=profile.website,
        created_at=profile.created_at,
        stats=ProfileStats(
            games_count=_length(games),
            communities_count=_length(communities),
            guides_count=_length(guides),
            events_count=_length(events),
            followers_count=followers_count,
            following_count=following_count,
        ),
        favorite_games=favorite_games,
        games=games,
        communities=communities,
        guides=guides,
        events=events,
        pinned_post=pinned_post,
        errors=errors,
    )


def _require_profile(username):
    profile = ProfilesRepository.get_by_username(username)
    if profile is None:
        raise NotFoundException(f"Player '{username}' not found")
    return profile


def get_followers(username):
    profile = _require_profile(username)
    return profile, FollowsRepository.get_followers(profile.id)


def get_following(username):
    profile = _require_profile(username)
    return profile, FollowsRepository.get_following(profile.id)


def set_following(follower, username, following):
    """Follow or unfollow ``username``; returns the resulting state"""
    target = _require_profile(username)
    if following:
        FollowsRepository.follow(follower.id, target.id)
    else:
        FollowsRepository.unfollow(follower.id, target.id)
    logger.info("follow_changed", follower=follower.username, followed=target.username, following=following)
    return following
