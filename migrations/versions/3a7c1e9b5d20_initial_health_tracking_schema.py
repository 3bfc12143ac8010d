"""initial health tracking schema

Revision ID: 3a7c1e9b5d20
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c1e9b5d20'
down_revision = None
branch_labels = None
depends_on = None


def _owner_column():
    return sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'food_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        _owner_column(),
        sa.Column('food_name', sa.String(length=200), nullable=False),
        sa.Column('calories', sa.Float(), nullable=False),
        sa.Column('protein', sa.Float(), nullable=True),
        sa.Column('carbs', sa.Float(), nullable=True),
        sa.Column('fat', sa.Float(), nullable=True),
        sa.Column('fiber', sa.Float(), nullable=True),
        sa.Column('meal_type', sa.String(length=20), nullable=False),
        sa.Column('serving_size', sa.String(length=100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('logged_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_food_logs_user_logged_at', 'food_logs', ['user_id', 'logged_at'])

    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        _owner_column(),
        sa.Column('exercise_name', sa.String(length=200), nullable=False),
        sa.Column('exercise_type', sa.String(length=20), nullable=False),
        sa.Column('duration', sa.Float(), nullable=False),
        sa.Column('calories', sa.Float(), nullable=True),
        sa.Column('distance', sa.Float(), nullable=True),
        sa.Column('intensity', sa.String(length=20), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('logged_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_exercises_user_logged_at', 'exercises', ['user_id', 'logged_at'])

    op.create_table(
        'sleep_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        _owner_column(),
        sa.Column('sleep_start', sa.DateTime(), nullable=False),
        sa.Column('sleep_end', sa.DateTime(), nullable=False),
        sa.Column('duration', sa.Float(), nullable=False),
        sa.Column('quality', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_sleep_logs_user_sleep_start', 'sleep_logs', ['user_id', 'sleep_start'])

    op.create_table(
        'mood_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        _owner_column(),
        sa.Column('mood', sa.Integer(), nullable=False),
        sa.Column('energy', sa.Integer(), nullable=True),
        sa.Column('stress', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('logged_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_mood_logs_user_logged_at', 'mood_logs', ['user_id', 'logged_at'])

    op.create_table(
        'meal_plans',
        sa.Column('id', sa.Integer(), primary_key=True),
        _owner_column(),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('diet_type', sa.String(length=20), nullable=True),
        sa.Column('target_calories', sa.Float(), nullable=True),
        sa.Column('target_protein', sa.Float(), nullable=True),
        sa.Column('target_carbs', sa.Float(), nullable=True),
        sa.Column('target_fat', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_meal_plans_user_date', 'meal_plans', ['user_id', 'date'])

    op.create_table(
        'meals',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('meal_plan_id', sa.Integer(), sa.ForeignKey('meal_plans.id', ondelete='CASCADE'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('meal_type', sa.String(length=20), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('calories', sa.Float(), nullable=True),
        sa.Column('protein', sa.Float(), nullable=True),
        sa.Column('carbs', sa.Float(), nullable=True),
        sa.Column('fat', sa.Float(), nullable=True),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_meals_meal_plan_id', 'meals', ['meal_plan_id'])

    op.create_table(
        'shopping_lists',
        sa.Column('id', sa.Integer(), primary_key=True),
        _owner_column(),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_shopping_lists_user_id', 'shopping_lists', ['user_id'])

    op.create_table(
        'shopping_list_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('shopping_list_id', sa.Integer(), sa.ForeignKey('shopping_lists.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('quantity', sa.String(length=50), nullable=True),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('checked', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_shopping_list_items_shopping_list_id', 'shopping_list_items', ['shopping_list_id'])


def downgrade():
    # Drop in reverse dependency order
    for tbl in (
        'shopping_list_items',
        'shopping_lists',
        'meals',
        'meal_plans',
        'mood_logs',
        'sleep_logs',
        'exercises',
        'food_logs',
        'users',
    ):
        op.drop_table(tbl)
