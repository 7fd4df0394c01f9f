"""create_mood_and_recommendation_tables

Revision ID: 7c1e0a9d4b21
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, UUID


# revision identifiers, used by Alembic.
revision: str = '7c1e0a9d4b21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'mood_entries',
        sa.Column('id', UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('user_id', UUID(as_uuid=True), nullable=False),
        sa.Column('mood', sa.String(20), nullable=False),
        sa.Column('energy_level', sa.String(20), nullable=False),
        sa.Column('note', sa.Text, nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('client_ref', sa.String(64), nullable=True),
    )
    op.create_index('ix_mood_entries_user_created', 'mood_entries', ['user_id', 'created_at'])

    op.create_table(
        'recommendations',
        sa.Column('id', UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=False),
        sa.Column('category', sa.String(32), nullable=False),
        sa.Column('mood_types', ARRAY(sa.String(20)), server_default='{}', nullable=False),
        sa.Column('energy_levels', ARRAY(sa.String(20)), server_default='{}', nullable=False),
        sa.Column('image_url', sa.String(512), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    # GIN indexes back the @> containment filters
    op.create_index('ix_recommendations_mood_types', 'recommendations', ['mood_types'], postgresql_using='gin')
    op.create_index('ix_recommendations_energy_levels', 'recommendations', ['energy_levels'], postgresql_using='gin')

    op.create_table(
        'recommendation_ratings',
        sa.Column('id', UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('user_id', UUID(as_uuid=True), nullable=False),
        sa.Column('recommendation_id', UUID(as_uuid=True),
                  sa.ForeignKey('recommendations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('rating', sa.Integer, nullable=True),
        sa.Column('completed', sa.Boolean, server_default=sa.false(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.CheckConstraint('rating IS NULL OR rating BETWEEN 1 AND 5', name='ck_recommendation_ratings_rating'),
    )
    op.create_unique_constraint(
        'uq_recommendation_ratings_user_rec', 'recommendation_ratings', ['user_id', 'recommendation_id']
    )
    op.create_index('ix_recommendation_ratings_user_id', 'recommendation_ratings', ['user_id'])

    op.create_table(
        'health_profiles',
        sa.Column('user_id', UUID(as_uuid=True), primary_key=True),
        sa.Column('display_name', sa.String(255), nullable=True),
        sa.Column('height_cm', sa.Float, nullable=True),
        sa.Column('weight_kg', sa.Float, nullable=True),
        sa.Column('activity_level', sa.String(50), nullable=True),
        sa.Column('sleep_goal', sa.String(50), nullable=True),
        sa.Column('health_goals', ARRAY(sa.Text), server_default='{}', nullable=False),
        sa.Column('medical_conditions', ARRAY(sa.Text), server_default='{}', nullable=False),
        sa.Column('current_medications', ARRAY(sa.Text), server_default='{}', nullable=False),
        sa.Column('allergies', ARRAY(sa.Text), server_default='{}', nullable=False),
        sa.Column('dietary_preferences', ARRAY(sa.Text), server_default='{}', nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('health_profiles')
    op.drop_table('recommendation_ratings')
    op.drop_index('ix_recommendations_energy_levels', table_name='recommendations')
    op.drop_index('ix_recommendations_mood_types', table_name='recommendations')
    op.drop_table('recommendations')
    op.drop_index('ix_mood_entries_user_created', table_name='mood_entries')
    op.drop_table('mood_entries')
