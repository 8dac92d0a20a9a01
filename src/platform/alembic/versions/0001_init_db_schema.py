"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- event: Event catalog, unique slug derived from the title
- booking: One row per (event, normalized email)
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create event and booking tables."""

    op.create_table(
        'event',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('slug', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('time', sa.String(length=20), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('venue', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('image', sa.String(length=500), nullable=False, server_default=''),
        sa.Column('price', sa.Float(), nullable=False, server_default='0'),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('attendees', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('organizer', sa.String(length=255), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_event_slug'), 'event', ['slug'], unique=True)
    op.create_index(op.f('ix_event_date'), 'event', ['date'], unique=False)
    op.create_index(op.f('ix_event_category'), 'event', ['category'], unique=False)

    op.create_table(
        'booking',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('event_id', sa.String(length=36), nullable=False),
        sa.Column('user_email', sa.String(length=255), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['event_id'], ['event.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('event_id', 'user_email', name='uq_booking_event_id_user_email'),
    )
    op.create_index(op.f('ix_booking_event_id'), 'booking', ['event_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_booking_event_id'), table_name='booking')
    op.drop_table('booking')
    op.drop_index(op.f('ix_event_category'), table_name='event')
    op.drop_index(op.f('ix_event_date'), table_name='event')
    op.drop_index(op.f('ix_event_slug'), table_name='event')
    op.drop_table('event')
