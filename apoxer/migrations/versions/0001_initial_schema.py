"""Initial schema: games, communities, guides, players, events and social tables

Revision ID: 0001_initial_schema
Revises:

"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Text

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

PLAYER_STATUS = sa.Enum("online", "looking", "offline", name="player_status", create_constraint=True)
EVENT_STATUS = sa.Enum("active", "full", "cancelled", "completed", name="event_status", create_constraint=True)
PLAYER_GAME_STATUS = sa.Enum(
    "playing", "completed", "wishlist", "added", name="player_game_status", create_constraint=True
)
COMMUNITY_ROLE = sa.Enum("member", "mod", "owner", name="community_role", create_constraint=True)


def upgrade():
    op.create_table(
        "users",
        Column("id", String(36), primary_key=True),
        Column("email", String(255), nullable=False, unique=True),
        Column("password", String(255), nullable=False),
        Column("username", String(100)),
        Column("display_name", String(100)),
        Column("created_at", DateTime),
    )
    op.create_index("ix_users_email", "users", ["email"])

    op.create_table(
        "games",
        Column("id", String(36), primary_key=True),
        Column("slug", String(120), nullable=False, unique=True),
        Column("title", String(255), nullable=False),
        Column("description", Text),
        Column("cover_url", String),
        Column("hero_url", String),
        Column("platforms", JSON),
        Column("genres", JSON),
        Column("tags", JSON),
        Column("created_at", DateTime),
    )
    op.create_index("ix_games_slug", "games", ["slug"])
    op.create_index("ix_games_created_at", "games", ["created_at"])

    op.create_table(
        "communities",
        Column("id", String(36), primary_key=True),
        Column("game_id", String(36), ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
        Column("name", String(255), nullable=False),
        Column("invite_url", String, nullable=False),
        Column("category", String(50)),
        Column("language", String(50)),
        Column("online_count", Integer, nullable=False),
        Column("description", Text),
        Column("tags", JSON),
        Column("member_count", Integer),
        Column("region", String(50)),
        Column("voice_required", Boolean),
        Column("created_at", DateTime),
        sa.CheckConstraint("online_count >= 0", name="ck_communities_online_count_non_negative"),
        sa.UniqueConstraint("game_id", "name", name="uq_communities_game_name"),
    )
    op.create_index("ix_communities_game_id", "communities", ["game_id"])

    op.create_table(
        "game_versions",
        Column("id", String(36), primary_key=True),
        Column("game_id", String(36), ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
        Column("version_name", String(100), nullable=False),
        Column("created_by", String(36), ForeignKey("users.id", ondelete="SET NULL")),
        Column("created_at", DateTime),
        Column("updated_at", DateTime),
        sa.UniqueConstraint("game_id", "version_name", name="uq_game_versions_game_name"),
    )
    op.create_index("ix_game_versions_game_id", "game_versions", ["game_id"])

    op.create_table(
        "guides",
        Column("id", String(36), primary_key=True),
        Column("game_id", String(36), ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
        Column("title", String(255), nullable=False),
        Column("content", Text, nullable=False),
        Column("created_by", String(36), ForeignKey("users.id", ondelete="SET NULL")),
        Column("upvotes", Integer),
        Column("created_at", DateTime),
    )
    op.create_index("ix_guides_game_id", "guides", ["game_id"])
    op.create_index("ix_guides_created_by", "guides", ["created_by"])

    op.create_table(
        "play_guides",
        Column("id", String(36), primary_key=True),
        Column("game_id", String(36), ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
        Column("game_version_id", String(36), ForeignKey("game_versions.id", ondelete="SET NULL")),
        Column("title", String(255), nullable=False),
        Column("summary", Text),
        Column("from_platform", String(50)),
        Column("to_platform", String(50)),
        Column("platform", String(50)),
        Column("steps", Text),
        Column("last_updated", DateTime),
    )
    op.create_index("ix_play_guides_game_id", "play_guides", ["game_id"])

    op.create_table(
        "players",
        Column("id", String(36), primary_key=True),
        Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        Column("game_id", String(36), ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
        Column("platform", String(50)),
        Column("status", PLAYER_STATUS, nullable=False),
        Column("created_at", DateTime),
        Column("updated_at", DateTime),
        sa.UniqueConstraint("user_id", "game_id", name="uq_players_user_game"),
    )
    op.create_index("ix_players_user_id", "players", ["user_id"])
    op.create_index("ix_players_game_id", "players", ["game_id"])
    op.create_index("ix_players_updated_at", "players", ["updated_at"])

    op.create_table(
        "events",
        Column("id", String(36), primary_key=True),
        Column("game_id", String(36), ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
        Column("game_version_id", String(36), ForeignKey("game_versions.id", ondelete="SET NULL")),
        Column("created_by", String(36), ForeignKey("users.id", ondelete="SET NULL")),
        Column("description", Text),
        Column("tags", JSON),
        Column("players_needed", Integer, nullable=False),
        Column("players_have", Integer, nullable=False),
        Column("start_date", String(10)),
        Column("start_time", String(5)),
        Column("start_datetime", DateTime),
        Column("language", String(50)),
        Column("platform", String(50)),
        Column("status", EVENT_STATUS, nullable=False),
        Column("created_at", DateTime),
        Column("updated_at", DateTime),
    )
    op.create_index("ix_events_game_id", "events", ["game_id"])
    op.create_index("ix_events_created_by", "events", ["created_by"])
    op.create_index("ix_events_start_datetime", "events", ["start_datetime"])
    op.create_index("ix_events_status", "events", ["status"])

    op.create_table(
        "event_participants",
        Column("id", String(36), primary_key=True),
        Column("event_id", String(36), ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
        Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        Column("joined_at", DateTime),
        sa.UniqueConstraint("event_id", "user_id", name="uq_event_participants_event_user"),
    )
    op.create_index("ix_event_participants_event_id", "event_participants", ["event_id"])

    op.create_table(
        "profiles",
        Column("id", String(36), primary_key=True),
        Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        Column("username", String(50), nullable=False, unique=True),
        Column("display_name", String(100), nullable=False),
        Column("bio", Text),
        Column("avatar_url", String),
        Column("banner_url", String),
        Column("timezone", String(50)),
        Column("location", String(100)),
        Column("website", String),
        Column("created_at", DateTime),
    )
    op.create_index("ix_profiles_username", "profiles", ["username"])

    op.create_table(
        "player_follows",
        Column("id", String(36), primary_key=True),
        Column("follower_id", String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        Column("followed_id", String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        Column("created_at", DateTime),
        sa.UniqueConstraint("follower_id", "followed_id", name="uq_player_follows_pair"),
        sa.CheckConstraint("follower_id <> followed_id", name="ck_player_follows_not_self"),
    )
    op.create_index("ix_player_follows_follower_id", "player_follows", ["follower_id"])
    op.create_index("ix_player_follows_followed_id", "player_follows", ["followed_id"])

    op.create_table(
        "player_games",
        Column("id", String(36), primary_key=True),
        Column("profile_id", String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        Column("game_id", String(36), ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
        Column("platform", String(50)),
        Column("skill_level", String(50)),
        Column("status", PLAYER_GAME_STATUS, nullable=False),
        Column("hours_played", Integer),
        Column("is_featured", Boolean),
        Column("created_at", DateTime),
        sa.UniqueConstraint("profile_id", "game_id", name="uq_player_games_profile_game"),
    )
    op.create_index("ix_player_games_profile_id", "player_games", ["profile_id"])

    op.create_table(
        "community_memberships",
        Column("id", String(36), primary_key=True),
        Column("profile_id", String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        Column("community_id", String(36), ForeignKey("communities.id", ondelete="CASCADE"), nullable=False),
        Column("role", COMMUNITY_ROLE, nullable=False),
        Column("joined_at", DateTime),
        sa.UniqueConstraint("profile_id", "community_id", name="uq_memberships_profile_community"),
    )
    op.create_index("ix_community_memberships_profile_id", "community_memberships", ["profile_id"])

    op.create_table(
        "player_lfg_posts",
        Column("id", String(36), primary_key=True),
        Column("profile_id", String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        Column("game_id", String(36), ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
        Column("title", String(255), nullable=False),
        Column("description", Text),
        Column("platform", String(50)),
        Column("scheduled_at", DateTime),
        Column("max_players", Integer),
        Column("current_players", Integer),
        Column("voice_required", Boolean),
        Column("external_link", String),
        Column("is_pinned", Boolean),
        Column("created_at", DateTime),
    )
    op.create_index("ix_player_lfg_posts_profile_id", "player_lfg_posts", ["profile_id"])
    op.create_index("ix_player_lfg_posts_created_at", "player_lfg_posts", ["created_at"])

    op.create_table(
        "user_games",
        Column("id", String(36), primary_key=True),
        Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        Column("game_id", String(36), ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
        Column("created_at", DateTime),
        sa.UniqueConstraint("user_id", "game_id", name="uq_user_games_user_game"),
    )
    op.create_index("ix_user_games_user_id", "user_games", ["user_id"])


def downgrade():
    # Drop tables in reverse dependency order
    for table in (
        "user_games",
        "player_lfg_posts",
        "community_memberships",
        "player_games",
        "player_follows",
        "profiles",
        "event_participants",
        "events",
        "players",
        "play_guides",
        "guides",
        "game_versions",
        "communities",
        "games",
        "users",
    ):
        op.drop_table(table)
