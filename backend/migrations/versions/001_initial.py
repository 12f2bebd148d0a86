"""initial schema: with v1

Revision ID: 001_initial
Create Date: 19/10/2026
"""
from alembic import op
import sqlalchemy as sa

revision = '001_initial'
down_revision = None


def upgrade() -> None:
    # ── 1. IDENTITÉ ──
    op.create_table("accounts",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("email", sa.String, nullable=False, unique=True),
        sa.Column("hashed_password", sa.String, nullable=False),
        sa.Column("signup_nickname", sa.String, nullable=True),
        sa.Column("is_active", sa.Boolean, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_accounts_email", "accounts", ["email"])

    op.create_table("profiles",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("account_id", sa.Integer, sa.ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("email", sa.String, nullable=False, unique=True),
        sa.Column("nickname", sa.String, nullable=False),
        sa.Column("affiliation", sa.String, nullable=False),
        sa.Column("is_admin", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("affiliation", "nickname", name="uq_profiles_affiliation_nickname"),
    )
    op.create_index("ix_profiles_affiliation", "profiles", ["affiliation"])

    # ── 2. QUESTIONS ──
    op.create_table("questions",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("content", sa.String, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_questions_order_index", "questions", ["order_index"])
    # Au plus une question active
    op.create_index(
        "uq_questions_single_active", "questions", ["is_active"],
        unique=True,
        postgresql_where=sa.text("is_active"),
        sqlite_where=sa.text("is_active = 1"),
    )

    # ── 3. VOTES ──
    op.create_table("votes",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("voter_id", sa.Integer, sa.ForeignKey("profiles.id"), nullable=False),
        sa.Column("candidate_id", sa.Integer, sa.ForeignKey("profiles.id"), nullable=False),
        sa.Column("question_id", sa.Integer, sa.ForeignKey("questions.id", ondelete="SET NULL"), nullable=True),
        sa.Column("question_content", sa.String, nullable=False),
        sa.Column("vote_date", sa.Date, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("voter_id", "vote_date", name="uq_votes_voter_day"),
        sa.CheckConstraint("voter_id <> candidate_id", name="ck_votes_no_self_vote"),
    )
    op.create_index("ix_votes_voter_id", "votes", ["voter_id"])
    op.create_index("ix_votes_candidate_id", "votes", ["candidate_id"])
    op.create_index("ix_votes_vote_date", "votes", ["vote_date"])

    # ── 4. NOTIFICATIONS ──
    op.create_table("notifications",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("recipient_id", sa.Integer, sa.ForeignKey("profiles.id"), nullable=False),
        sa.Column("type", sa.String, nullable=False),
        sa.Column("message", sa.String, nullable=False),
        sa.Column("is_read", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("metadata", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_notifications_recipient_unread", "notifications", ["recipient_id", "is_read"])

    # ── 5. TABLEAU ──
    op.create_table("board_posts",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("author_id", sa.Integer, sa.ForeignKey("profiles.id"), nullable=False),
        sa.Column("type", sa.String, nullable=False),
        sa.Column("content", sa.String, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_board_posts_author_id", "board_posts", ["author_id"])
    op.create_index("ix_board_posts_type", "board_posts", ["type"])


def downgrade() -> None:
    op.drop_table("board_posts")
    op.drop_table("notifications")
    op.drop_table("votes")
    op.drop_index("uq_questions_single_active", table_name="questions")
    op.drop_table("questions")
    op.drop_table("profiles")
    op.drop_table("accounts")
