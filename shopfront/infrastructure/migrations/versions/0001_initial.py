"""users, languages, products and blog posts with their translations

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "languages",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(10), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False),
    )
    op.create_index("ix_languages_code", "languages", ["code"], unique=True)

    op.create_table(
        "products",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("sku", sa.String(100), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("main_image_url", sa.String(1024), nullable=True),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("status", sa.String(50), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_products_sku", "products", ["sku"])

    op.create_table(
        "product_translations",
        sa.Column(
            "product_id", sa.String(36),
            sa.ForeignKey("products.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "language_id", sa.Integer,
            sa.ForeignKey("languages.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("slug", sa.String(255), nullable=True),
    )
    op.create_index("ix_product_translations_slug", "product_translations", ["slug"])

    op.create_table(
        "blog_posts",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "author_id", sa.String(36),
            sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("main_image_url", sa.String(1024), nullable=True),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_published", sa.Boolean, nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_blog_posts_published_at", "blog_posts", ["published_at"])

    op.create_table(
        "blog_post_translations",
        sa.Column(
            "blog_post_id", sa.String(36),
            sa.ForeignKey("blog_posts.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "language_id", sa.Integer,
            sa.ForeignKey("languages.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("content", sa.Text, nullable=True),
        sa.Column("slug", sa.String(255), nullable=True),
    )
    op.create_index("ix_blog_post_translations_slug", "blog_post_translations", ["slug"])


def downgrade():
    op.drop_index("ix_blog_post_translations_slug", table_name="blog_post_translations")
    op.drop_table("blog_post_translations")
    op.drop_index("ix_blog_posts_published_at", table_name="blog_posts")
    op.drop_table("blog_posts")
    op.drop_index("ix_product_translations_slug", table_name="product_translations")
    op.drop_table("product_translations")
    op.drop_index("ix_products_sku", table_name="products")
    op.drop_table("products")
    op.drop_index("ix_languages_code", table_name="languages")
    op.drop_table("languages")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
