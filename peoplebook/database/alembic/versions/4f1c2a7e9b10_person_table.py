"""person table

Revision ID: 4f1c2a7e9b10
Revises:
Create Date: 2025-10-12 10:04:31.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from peoplebook.common.settings import get_settings

# revision identifiers, used by Alembic.
revision: str = '4f1c2a7e9b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = get_settings().db_schema


def upgrade() -> None:
    op.create_table(
        'person',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
        sa.Column('meta_data', sa.JSON(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('hobby', sa.String(length=255), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('year_of_birthday', sa.Integer(), nullable=True),
        sa.Column('month_of_birthday', sa.Integer(), nullable=True),
        sa.Column('day_of_birthday', sa.Integer(), nullable=True),
        sa.Column('job', sa.String(length=255), nullable=True),
        sa.Column('phone_number', sa.String(length=32), nullable=True),
        sa.Column('deleted', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.CheckConstraint(
            '(year_of_birthday IS NULL AND month_of_birthday IS NULL AND day_of_birthday IS NULL)'
            ' OR (year_of_birthday IS NOT NULL AND month_of_birthday IS NOT NULL AND day_of_birthday IS NOT NULL)',
            name=op.f('ck_person_birthday_all_or_none')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_person')),
        schema=SCHEMA,
    )
    op.create_index('ix_person_name', 'person', ['name'], unique=False, schema=SCHEMA)
    op.create_index('ix_person_month_of_birthday', 'person', ['month_of_birthday'], unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index('ix_person_month_of_birthday', table_name='person', schema=SCHEMA)
    op.drop_index('ix_person_name', table_name='person', schema=SCHEMA)
    op.drop_table('person', schema=SCHEMA)
