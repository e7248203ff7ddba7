"""create_scheduling_tables

Revision ID: 5a1f0c2e9b7d
Revises:
Create Date: 2024-05-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5a1f0c2e9b7d'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'meetings',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('access_token', sa.String(length=50), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_meetings_access_token', 'meetings', ['access_token'], unique=True)

    op.create_table(
        'slots',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('meeting_id', sa.Integer(),
                  sa.ForeignKey('meetings.id', ondelete='CASCADE'), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('idx_slots_meeting_start', 'slots', ['meeting_id', 'start_time'])

    op.create_table(
        'participants',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('meeting_id', sa.Integer(),
                  sa.ForeignKey('meetings.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=6), nullable=False),
        sa.Column('comment', sa.String(length=40), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('idx_participants_meeting', 'participants', ['meeting_id', 'created_at'])

    op.create_table(
        'responses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('slot_id', sa.Integer(),
                  sa.ForeignKey('slots.id', ondelete='CASCADE'), nullable=False),
        sa.Column('participant_id', sa.Integer(),
                  sa.ForeignKey('participants.id', ondelete='CASCADE'), nullable=False),
        sa.Column('availability', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('participant_id', 'slot_id', name='uq_participant_slot'),
        sa.CheckConstraint('availability IN (0, 1, 3)', name='ck_response_availability'),
    )
    op.create_index('idx_responses_participant', 'responses', ['participant_id'])
    op.create_index('idx_responses_slot', 'responses', ['slot_id'])


def downgrade():
    op.drop_table('responses')
    op.drop_table('participants')
    op.drop_table('slots')
    op.drop_table('meetings')
