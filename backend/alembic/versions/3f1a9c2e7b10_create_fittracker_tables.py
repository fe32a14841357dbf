"""create users, workouts, nutrition_entries and progress_samples

Revision ID: 3f1a9c2e7b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "3f1a9c2e7b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("height", sa.Float(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("fitness_goal", sa.String(length=100), nullable=True),
        sa.Column("activity_level", sa.String(length=100), nullable=True),
        sa.Column("created_at", sa.String(length=40), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "workouts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.Column("date", sa.String(length=10), nullable=False),
        sa.Column("duration", sa.Float(), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("calories_burned", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("exercises", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workouts")),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f("ix_workouts_user_id"), "workouts", ["user_id"])
    op.create_index(op.f("ix_workouts_date"), "workouts", ["date"])

    op.create_table(
        "nutrition_entries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.String(length=10), nullable=False),
        sa.Column("meal", sa.String(length=100), nullable=True),
        sa.Column("foods", sa.JSON(), nullable=False),
        sa.Column("total_calories", sa.Float(), nullable=True),
        sa.Column("total_protein", sa.Float(), nullable=True),
        sa.Column("total_carbs", sa.Float(), nullable=True),
        sa.Column("total_fat", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_nutrition_entries")),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f("ix_nutrition_entries_user_id"), "nutrition_entries", ["user_id"])
    op.create_index(op.f("ix_nutrition_entries_date"), "nutrition_entries", ["date"])

    op.create_table(
        "progress_samples",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.String(length=10), nullable=False),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("body_fat", sa.Float(), nullable=True),
        sa.Column("muscle", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_progress_samples")),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f("ix_progress_samples_user_id"), "progress_samples", ["user_id"])
    op.create_index(op.f("ix_progress_samples_date"), "progress_samples", ["date"])


def downgrade() -> None:
    op.drop_table("progress_samples")
    op.drop_table("nutrition_entries")
    op.drop_table("workouts")
    op.drop_table("users")
