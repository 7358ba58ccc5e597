"""create_categories_and_breeds

Revision ID: 3f1c9a27d5b4
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a27d5b4'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'categories',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column(
            'name',
            sa.String(length=100),
            nullable=False,
            comment="Category name (e.g., 'Herding', 'Toy')"
        ),
        sa.Column(
            'description',
            sa.Text(),
            nullable=True,
            comment='Description of the breeds in this category'
        ),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_categories_name'), 'categories', ['name'], unique=True)

    op.create_table(
        'breeds',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False, comment='Breed name'),
        sa.Column('common_names', sa.JSON(), nullable=True, comment='Other names the breed is known by'),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('history', sa.Text(), nullable=False),
        sa.Column('fun_fact', sa.Text(), nullable=True),
        sa.Column('health', sa.Text(), nullable=False),
        sa.Column('origin', sa.String(length=200), nullable=False),
        sa.Column('colors', sa.JSON(), nullable=False, comment='Recognised coat colors'),
        sa.Column('average_height', sa.Float(), nullable=False, comment='Average height in cm'),
        sa.Column('average_weight', sa.Float(), nullable=False, comment='Average weight in kg'),
        sa.Column(
            'average_life_expectancy',
            sa.Float(),
            nullable=False,
            comment='Average life expectancy in years'
        ),
        sa.Column('exercise_required', sa.Integer(), nullable=False),
        sa.Column('ease_of_training', sa.Integer(), nullable=False),
        sa.Column('affection', sa.Integer(), nullable=False),
        sa.Column('playfulness', sa.Integer(), nullable=False),
        sa.Column('good_with_children', sa.Integer(), nullable=False),
        sa.Column('good_with_dogs', sa.Integer(), nullable=False),
        sa.Column('grooming_required', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.String(length=36), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_breeds_name'), 'breeds', ['name'], unique=True)
    op.create_index(op.f('ix_breeds_category_id'), 'breeds', ['category_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_breeds_category_id'), table_name='breeds')
    op.drop_index(op.f('ix_breeds_name'), table_name='breeds')
    op.drop_table('breeds')
    op.drop_index(op.f('ix_categories_name'), table_name='categories')
    op.drop_table('categories')
