"""
Profile Routes - public player profiles and follow lists
"""

from flask import Blueprint, redirect, render_template, url_for

from apoxer.exceptions import NotFoundException
from apoxer.middleware.auth import current_identity, identity_required
from apoxer.repositories.follows_repository import FollowsRepository
from apoxer.repositories.profiles_repository import ProfilesRepository
from apoxer.services.profile_service import get_followers, get_following, get_user_profile
from apoxer.services.social_service import ensure_profile

profile_bp = Blueprint("profile", __name__)


def _not_found(username):
    return render_template("profile/not_found.html", title="Player not found", username=username), 404


@profile_bp.route("/profile")
@identity_required
def my_profile():
    """Own profile, created on first visit"""
    profile = ensure_profile(current_identity())
    return redirect(url_for("profile.profile_page", username=profile.username))


@profile_bp.route("/profile/<username>")
def profile_page(username):
    profile = get_user_profile(username)
    if profile is None:
        return _not_found(username)

    identity = current_identity()
    viewer = ProfilesRepository.get_by_user_id(identity.user_id) if identity else None
    is_own = viewer is not None and viewer.id == profile.id
    is_following = viewer is not None and not is_own and FollowsRepository.is_following(viewer.id, profile.id)
    return render_template(
        "profile/detail.html",
        title=profile.display_name,
        profile=profile,
        is_own=is_own,
        is_following=is_following,
    )


def _people_page(username, loader, heading):
    try:
        profile, people = loader(username)
    except NotFoundException:
        return _not_found(username)
    return render_template(
        "profile/people.html", title=f"{profile.display_name} - {heading}", profile=profile, people=people, heading=heading
    )


@profile_bp.route("/profile/<username>/followers")
def followers(username):
    return _people_page(username, get_followers, "Followers")


@profile_bp.route("/profile/<username>/following")
def following(username):
    return _people_page(username, get_following, "Following")
