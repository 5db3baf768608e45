"""add account_sessions table"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "c2d8f15e4a93"
down_revision = "9b4e6d2a7c10"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "account_sessions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("jti", sa.String(length=64), nullable=False),
        sa.Column(
            "account_id",
            sa.Integer(),
            sa.ForeignKey("accounts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("revoked_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_account_sessions_jti", "account_sessions", ["jti"], unique=True)
    op.create_index("ix_account_sessions_account_id", "account_sessions", ["account_id"])


def downgrade():
    op.drop_index("ix_account_sessions_account_id", table_name="account_sessions")
    op.drop_index("ix_account_sessions_jti", table_name="account_sessions")
    op.drop_table("account_sessions")
