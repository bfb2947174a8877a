"""cinema system

Creates the six cinema tables: movies, show rooms, seat types, the seats of
each room, scheduled displays and bookings.

Revision ID: 9c1f2d7e4a10
Revises:
Create Date: 2022-09-22 20:16:53.247000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9c1f2d7e4a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SEAT_TYPES = ('VIP', 'Couple', 'Super', 'Normal')


def _audit_columns():
    return [
        sa.Column('createdAt', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updatedAt', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
    ]


def _reference(table):
    return sa.ForeignKey(f'{table}.id', ondelete='CASCADE')


def upgrade() -> None:
    op.create_table(
        'Movie',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=True),
        *_audit_columns(),
    )

    # rooms the cinema runs shows in
    op.create_table(
        'ShowRoom',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'SeatType',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('seat_type', sa.Enum(*SEAT_TYPES, name='seat_type_enum', create_constraint=True), nullable=True),
        sa.Column('premium_percentage', sa.Integer(), nullable=True),
        *_audit_columns(),
    )

    # which showroom has which seats, configured once rather than per show
    op.create_table(
        'ShowRoomSeat',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('seat_number', sa.String(), nullable=True),
        sa.Column('seat_type_id', sa.Integer(), _reference('SeatType'), nullable=True),
        sa.Column('show_room_id', sa.Integer(), _reference('ShowRoom'), nullable=True),
        *_audit_columns(),
    )

    # which movie is displayed in which room at which time
    op.create_table(
        'ShowsDisplay',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('time', sa.TIMESTAMP(), nullable=True),
        sa.Column('show_room_id', sa.Integer(), _reference('ShowRoom'), nullable=True),
        sa.Column('movie_id', sa.Integer(), _reference('Movie'), nullable=True),
        *_audit_columns(),
    )

    # one seat for one display; joins back to room, seat type and movie for the ticket
    op.create_table(
        'Booking',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('payment_method', sa.String(), nullable=True),
        sa.Column('paid', sa.Boolean(), nullable=True),
        sa.Column('show_display_id', sa.Integer(), _reference('ShowsDisplay'), nullable=True),
        sa.Column('show_room_seat_id', sa.Integer(), _reference('ShowRoomSeat'), nullable=True),
        *_audit_columns(),
    )


def downgrade() -> None:
    op.drop_table('Booking')
    op.drop_table('ShowsDisplay')
    op.drop_table('ShowRoomSeat')
    op.drop_table('SeatType')
    op.drop_table('ShowRoom')
    op.drop_table('Movie')

    # postgres keeps the enum type around after its table is gone
    if op.get_bind().dialect.name == 'postgresql':
        op.execute('DROP TYPE IF EXISTS seat_type_enum')
