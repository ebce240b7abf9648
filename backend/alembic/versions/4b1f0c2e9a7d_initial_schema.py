"""initial schema: users, exercises, workout logs, sessions, supersets

Revision ID: 4b1f0c2e9a7d
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# define the enum types once so we can create/drop them explicitly
user_role = sa.Enum('user', 'admin', name='user_role')
exercise_status = sa.Enum('pending', 'approved', 'rejected', name='exercise_status')


# revision identifiers, used by Alembic.
revision: str = '4b1f0c2e9a7d'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) users
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', user_role, nullable=False, server_default='user'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # 2) exercise catalog
    op.create_table(
        'exercises',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=False),
        sa.Column('muscle_groups', sa.JSON(), nullable=False),
        sa.Column('created_by', sa.String(length=36), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('status', exercise_status, nullable=False, server_default='pending'),
        sa.Column('approved_by', sa.String(length=36), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_exercises_name', 'exercises', ['name'])

    # 3) flat workout logs
    op.create_table(
        'workout_logs',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('exercise_id', sa.String(length=36), sa.ForeignKey('exercises.id'), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('sets', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('logged_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint('weight > 0', name='ck_workout_logs_weight'),
        sa.CheckConstraint('reps >= 1 AND reps <= 100', name='ck_workout_logs_reps'),
        sa.CheckConstraint('sets >= 1', name='ck_workout_logs_sets'),
    )
    op.create_index('ix_workout_logs_user_id', 'workout_logs', ['user_id'])
    op.create_index('ix_workout_logs_exercise_id', 'workout_logs', ['exercise_id'])
    op.create_index('ix_workout_logs_user_logged_at', 'workout_logs', ['user_id', 'logged_at'])

    # 4) sessions, supersets, session exercises, sets
    op.create_table(
        'workout_sessions',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('logged_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_workout_sessions_user_id', 'workout_sessions', ['user_id'])
    op.create_index('ix_workout_sessions_user_logged_at', 'workout_sessions', ['user_id', 'logged_at'])

    op.create_table(
        'supersets',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('session_id', sa.String(length=36), sa.ForeignKey('workout_sessions.id', ondelete='CASCADE'), nullable=False),
        sa.Column('exercise_ids', sa.JSON(), nullable=False),
        sa.Column('rest_time', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_supersets_session_id', 'supersets', ['session_id'])

    op.create_table(
        'superset_sets',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('superset_id', sa.String(length=36), sa.ForeignKey('supersets.id', ondelete='CASCADE'), nullable=False),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('exercises', sa.JSON(), nullable=False),
    )
    op.create_index('ix_superset_sets_superset_id', 'superset_sets', ['superset_id'])

    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('session_id', sa.String(length=36), sa.ForeignKey('workout_sessions.id', ondelete='CASCADE'), nullable=False),
        sa.Column('exercise_id', sa.String(length=36), nullable=False),
        sa.Column('exercise_name', sa.String(length=100), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.Column('is_superset', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('superset_id', sa.String(length=36), sa.ForeignKey('supersets.id', ondelete='CASCADE'), nullable=True),
        sa.Column('machine_settings', sa.JSON(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
    )
    op.create_index('ix_workout_exercises_session_id', 'workout_exercises', ['session_id'])
    op.create_index('ix_workout_exercises_superset_id', 'workout_exercises', ['superset_id'])

    op.create_table(
        'exercise_sets',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('workout_exercise_id', sa.String(length=36), sa.ForeignKey('workout_exercises.id', ondelete='CASCADE'), nullable=False),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('rpe', sa.Float(), nullable=True),
        sa.Column('rest_time', sa.Integer(), nullable=True),
        sa.Column('percentage', sa.Float(), nullable=True),
        sa.Column('is_warmup', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.CheckConstraint('weight > 0', name='ck_exercise_sets_weight'),
        sa.CheckConstraint('reps >= 1 AND reps <= 100', name='ck_exercise_sets_reps'),
    )
    op.create_index('ix_exercise_sets_workout_exercise_id', 'exercise_sets', ['workout_exercise_id'])


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('exercise_sets')
    op.drop_table('workout_exercises')
    op.drop_table('superset_sets')
    op.drop_table('supersets')
    op.drop_table('workout_sessions')
    op.drop_table('workout_logs')
    op.drop_table('exercises')
    op.drop_table('users')

    # finally drop enum types (no-op on backends without named enums)
    exercise_status.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
