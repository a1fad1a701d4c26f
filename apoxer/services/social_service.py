"""
Social profile bootstrap and the activity feed
"""

import random
import string

import structlog

from apoxer.exceptions import ApoxerException, ConflictException, ProfileCreationError
from apoxer.repositories.follows_repository import FollowsRepository
from apoxer.repositories.lfgposts_repository import LfgPostsRepository
from apoxer.repositories.profiles_repository import ProfilesRepository
from apoxer.settings import get_setting
from apoxer.utils import username_from_email
from apoxer.viewmodels import FeedView

logger = structlog.get_logger("social")

USERNAME_MIN_LENGTH = 3
USERNAME_ATTEMPTS = 10


def _random_username():
    return "user" + "".join(random.choices(string.ascii_lowercase + string.digits, k=6))


def pick_username(email):
    """
    Username derived from the email local part.

    Short results are replaced by ``user`` plus a random suffix; taken names
    get a random numeric suffix, retried up to ``USERNAME_ATTEMPTS`` times.
    """
    base = username_from_email(email)
    if len(base) < USERNAME_MIN_LENGTH:
        base = _random_username()

    candidate = base
    for _ in range(USERNAME_ATTEMPTS):
        if not ProfilesRepository.username_taken(candidate):
            return candidate
        candidate = f"{base}{random.randint(0, 999)}"
    raise ProfileCreationError(f"No free username derived from '{base}' after {USERNAME_ATTEMPTS} attempts")


def pick_display_name(identity):
    if identity.display_name:
        return identity.display_name
    local_part = (identity.email or "").split("@")[0]
    return local_part or "User"


def ensure_profile(identity):
    """The identity's profile, created on first use"""
    profile = ProfilesRepository.get_by_user_id(identity.user_id)
    if profile:
        return profile

    try:
        username = pick_username(identity.email)
        profile = ProfilesRepository.create(
            user_id=identity.user_id,
            username=username,
            display_name=pick_display_name(identity),
        )
    except ProfileCreationError:
        raise
    except ConflictException as e:
        # A concurrent first visit may have created it already
        profile = ProfilesRepository.get_by_user_id(identity.user_id)
        if profile is None:
            raise ProfileCreationError(e.message) from e
        return profile
    except ApoxerException as e:
        raise ProfileCreationError(e.message) from e

    logger.info("profile_created", user_id=identity.user_id, username=profile.username)
    return profile


def get_feed(identity):
    """
    Newest LFG posts from the profiles the identity follows.

    Read failures propagate; an empty ``posts`` list only ever means there
    is no activity.
    """
    profile = ensure_profile(identity)
    followed_ids = FollowsRepository.get_followed_ids(profile.id)
    page_size = int(get_setting("feed", "page_size", 20))
    posts = LfgPostsRepository.get_by_profiles(followed_ids, limit=page_size)
    return FeedView(player_id=profile.id, following_count=len(followed_ids), posts=posts)
