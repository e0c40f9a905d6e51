"""Keep updated_at current on permissions and roles.

Revision ID: 002
Revises: 001
Create Date: 2026-10-16

"""

from collections.abc import Sequence

from alembic import op

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

TABLES = ("permissions", "roles")


def upgrade() -> None:
    op.execute("""
        CREATE OR REPLACE FUNCTION rolegate_touch_updated_at()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = now();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)
    for table in TABLES:
        op.execute(f"""
            CREATE TRIGGER {table}_touch_updated_at
            BEFORE UPDATE ON {table}
            FOR EACH ROW EXECUTE FUNCTION rolegate_touch_updated_at()
        """)


def downgrade() -> None:
    for table in TABLES:
        op.execute(f"DROP TRIGGER IF EXISTS {table}_touch_updated_at ON {table}")
    op.execute("DROP FUNCTION IF EXISTS rolegate_touch_updated_at()")
