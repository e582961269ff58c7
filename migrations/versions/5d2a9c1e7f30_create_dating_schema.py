"""create_dating_schema

Revision ID: 5d2a9c1e7f30
Revises:
Create Date: 2026-10-19 09:12:44.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '5d2a9c1e7f30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profiles, photos, swipes, matches, messages, blocks and reports."""
    op.create_table('profiles',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('user_id', sa.UUID(), nullable=False),
        sa.Column('display_name', sa.String(length=100), nullable=False),
        sa.Column('account_type', sa.String(length=20), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('gender', sa.String(length=20), nullable=True),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('state', sa.String(length=100), nullable=True),
        sa.Column('country', sa.String(length=100), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('seeking_genders', postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default='[]'),
        sa.Column('seeking_account_types', postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default='[]'),
        sa.Column('interests', postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default='[]'),
        sa.Column('verification_status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('membership_type', sa.String(length=20), nullable=False, server_default='free'),
        sa.Column('is_visible', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_profile_complete', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('age_range_min', sa.Integer(), nullable=True),
        sa.Column('age_range_max', sa.Integer(), nullable=True),
        sa.Column('max_distance', sa.Integer(), nullable=True),
        sa.Column('show_only_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('show_only_with_photos', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("account_type IN ('single', 'couple')", name='ck_profiles_account_type'),
        sa.CheckConstraint("verification_status IN ('pending', 'verified', 'rejected')", name='ck_profiles_verification_status'),
        sa.CheckConstraint("membership_type IN ('free', 'premium', 'vip')", name='ck_profiles_membership_type'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )
    # Base filter of every discovery query
    op.create_index('ix_profiles_discovery', 'profiles', ['is_visible', 'is_profile_complete'], unique=False)

    op.create_table('profile_photos',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('profile_id', sa.UUID(), nullable=False),
        sa.Column('url', sa.Text(), nullable=False),
        sa.Column('storage_path', sa.Text(), nullable=True),
        sa.Column('is_primary', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['profile_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_profile_photos_profile_id'), 'profile_photos', ['profile_id'], unique=False)

    op.create_table('swipes',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('swiper_id', sa.UUID(), nullable=False),
        sa.Column('swiped_id', sa.UUID(), nullable=False),
        sa.Column('action', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("action IN ('like', 'pass', 'superlike')", name='ck_swipes_action'),
        sa.ForeignKeyConstraint(['swiper_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['swiped_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('swiper_id', 'swiped_id', name='uq_swipes_pair'),
    )
    op.create_index(op.f('ix_swipes_swiper_id'), 'swipes', ['swiper_id'], unique=False)
    # Reverse lookups: reciprocal like check and "who liked me"
    op.create_index('ix_swipes_swiped_action', 'swipes', ['swiped_id', 'action'], unique=False)

    op.create_table('matches',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('profile_a_id', sa.UUID(), nullable=False),
        sa.Column('profile_b_id', sa.UUID(), nullable=False),
        sa.Column('pair_key', sa.String(length=80), nullable=False),
        sa.Column('matched_at', sa.DateTime(), nullable=False),
        sa.Column('last_message_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['profile_a_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['profile_b_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('pair_key'),
    )
    op.create_index(op.f('ix_matches_profile_a_id'), 'matches', ['profile_a_id'], unique=False)
    op.create_index(op.f('ix_matches_profile_b_id'), 'matches', ['profile_b_id'], unique=False)

    op.create_table('messages',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('match_id', sa.UUID(), nullable=False),
        sa.Column('sender_id', sa.UUID(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False, server_default='text'),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("type IN ('text', 'image')", name='ck_messages_type'),
        sa.ForeignKeyConstraint(['match_id'], ['matches.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['sender_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_messages_match_created', 'messages', ['match_id', 'created_at'], unique=False)

    op.create_table('blocks',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('blocker_id', sa.UUID(), nullable=False),
        sa.Column('blocked_id', sa.UUID(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['blocker_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['blocked_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('blocker_id', 'blocked_id', name='uq_blocks_pair'),
    )
    op.create_index(op.f('ix_blocks_blocker_id'), 'blocks', ['blocker_id'], unique=False)
    op.create_index(op.f('ix_blocks_blocked_id'), 'blocks', ['blocked_id'], unique=False)

    op.create_table('reports',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('reporter_id', sa.UUID(), nullable=False),
        sa.Column('reported_id', sa.UUID(), nullable=False),
        sa.Column('reason', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("status IN ('pending', 'reviewed', 'dismissed')", name='ck_reports_status'),
        sa.ForeignKeyConstraint(['reporter_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['reported_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_reports_reporter_id'), 'reports', ['reporter_id'], unique=False)
    op.create_index(op.f('ix_reports_reported_id'), 'reports', ['reported_id'], unique=False)


def downgrade() -> None:
    """Drop every table in reverse dependency order."""
    op.drop_index(op.f('ix_reports_reported_id'), table_name='reports')
    op.drop_index(op.f('ix_reports_reporter_id'), table_name='reports')
    op.drop_table('reports')
    op.drop_index(op.f('ix_blocks_blocked_id'), table_name='blocks')
    op.drop_index(op.f('ix_blocks_blocker_id'), table_name='blocks')
    op.drop_table('blocks')
    op.drop_index('ix_messages_match_created', table_name='messages')
    op.drop_table('messages')
    op.drop_index(op.f('ix_matches_profile_b_id'), table_name='matches')
    op.drop_index(op.f('ix_matches_profile_a_id'), table_name='matches')
    op.drop_table('matches')
    op.drop_index('ix_swipes_swiped_action', table_name='swipes')
    op.drop_index(op.f('ix_swipes_swiper_id'), table_name='swipes')
    op.drop_table('swipes')
    op.drop_index(op.f('ix_profile_photos_profile_id'), table_name='profile_photos')
    op.drop_table('profile_photos')
    op.drop_index('ix_profiles_discovery', table_name='profiles')
    op.drop_table('profiles')
