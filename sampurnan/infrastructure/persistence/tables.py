"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import Boolean, Column, DateTime, Index, MetaData, String, Table, Text, false

from sampurnan.domain.manuscript.model.schema import MANUSCRIPT_SCHEMA
from sampurnan.infrastructure.persistence.column_mapper import map_column

metadata = MetaData()

# ============================================================================
# MANUSCRIPTS TABLE (columns generated from the manuscript field schema)
# ============================================================================
manuscripts_table = Table(
    "manuscripts",
    metadata,
    Column("id", String, primary_key=True),  # UUID as string
    Column("created_at", DateTime(timezone=True), nullable=False),
    *(map_column(spec) for spec in MANUSCRIPT_SCHEMA.fields),
)

Index("idx_manuscripts_created_at", manuscripts_table.c.created_at)
Index("idx_manuscripts_kategori_kailani", manuscripts_table.c.kategori_kailani)


# ============================================================================
# BLOG ARTICLES TABLE
# ============================================================================
blog_articles_table = Table(
    "blog_articles",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", Text, nullable=False),
    Column("author", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column("image_url", Text, nullable=False),
    Column("excerpt", Text, nullable=False),
    Column("published_at", DateTime(timezone=True), nullable=False),
)

Index("idx_blog_articles_published_at", blog_articles_table.c.published_at)


# ============================================================================
# GUESTBOOK ENTRIES TABLE
# ============================================================================
guestbook_entries_table = Table(
    "guestbook_entries",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", Text, nullable=False),
    Column("origin", Text, nullable=False),
    Column("message", Text, nullable=False),
    Column("is_approved", Boolean, nullable=False, server_default=false()),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("idx_guestbook_entries_created_at", guestbook_entries_table.c.created_at)
