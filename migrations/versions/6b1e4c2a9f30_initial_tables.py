"""initial_tables

Revision ID: 6b1e4c2a9f30
Revises:
Create Date: 2026-10-19 09:12:41.208337

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "6b1e4c2a9f30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # MANUSCRIPTS
    op.create_table(
        "manuscripts",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("afiliasi", sa.Text(), nullable=True),
        sa.Column("link_digital_afiliasi", sa.Text(), nullable=True),
        sa.Column("nama_koleksi", sa.Text(), nullable=True),
        sa.Column("nomor_digitalisasi", sa.Text(), nullable=True),
        sa.Column("kode_inventarisasi", sa.Text(), nullable=True),
        sa.Column("link_kover", sa.Text(), nullable=True),
        sa.Column("link_konten", sa.JSON(), nullable=True),
        sa.Column("link_digital_tppkp", sa.Text(), nullable=True),
        sa.Column("nomor_koleksi", sa.Text(), nullable=True),
        sa.Column("judul_dari_afiliasi", sa.Text(), nullable=True),
        sa.Column("judul_dari_tim", sa.Text(), nullable=False),
        sa.Column("halaman_pemisah", sa.Text(), nullable=True),
        sa.Column("kategori_kailani", sa.Text(), nullable=True),
        sa.Column("kategori_ilmu_pesantren", sa.Text(), nullable=True),
        sa.Column("pengarang", sa.Text(), nullable=True),
        sa.Column("penyalin", sa.Text(), nullable=True),
        sa.Column("tahun_penulisan_teks", sa.Text(), nullable=True),
        sa.Column("konversi_masehi", sa.Integer(), nullable=True),
        sa.Column("lokasi_penyalinan", sa.Text(), nullable=True),
        sa.Column("asal_usul_naskah", sa.Text(), nullable=True),
        sa.Column("bahasa", sa.Text(), nullable=True),
        sa.Column("aksara", sa.Text(), nullable=True),
        sa.Column("watermark", sa.Text(), nullable=True),
        sa.Column("countermark", sa.Text(), nullable=True),
        sa.Column("kover", sa.Text(), nullable=True),
        sa.Column("ukuran_kover", sa.Text(), nullable=True),
        sa.Column("jilid", sa.Text(), nullable=True),
        sa.Column("ukuran_kertas", sa.Text(), nullable=True),
        sa.Column("ukuran_dimensi", sa.Text(), nullable=True),
        sa.Column("jumlah_halaman", sa.Integer(), nullable=True),
        sa.Column("halaman_kosong", sa.Text(), nullable=True),
        sa.Column("jumlah_baris_per_halaman", sa.Text(), nullable=True),
        sa.Column("catatan_pinggir", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("catatan_makna", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("rubrikasi", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("iluminasi", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("ilustrasi", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("tinta", sa.Text(), nullable=True),
        sa.Column("kondisi_fisik_naskah", sa.Text(), nullable=True),
        sa.Column("keterbacaan", sa.Text(), nullable=True),
        sa.Column("kelengkapan_naskah", sa.Text(), nullable=True),
        sa.Column("kolofon", sa.Text(), nullable=True),
        sa.Column("catatan_marginal", sa.Text(), nullable=True),
        sa.Column("deskripsi_umum", sa.Text(), nullable=True),
        sa.Column("catatan_catatan", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_manuscripts_created_at", "manuscripts", ["created_at"])
    op.create_index("idx_manuscripts_kategori_kailani", "manuscripts", ["kategori_kailani"])

    # BLOG ARTICLES
    op.create_table(
        "blog_articles",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("author", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_blog_articles_published_at", "blog_articles", ["published_at"])

    # GUESTBOOK ENTRIES
    op.create_table(
        "guestbook_entries",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("origin", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("is_approved", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_guestbook_entries_created_at", "guestbook_entries", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_guestbook_entries_created_at", table_name="guestbook_entries")
    op.drop_table("guestbook_entries")
    op.drop_index("idx_blog_articles_published_at", table_name="blog_articles")
    op.drop_table("blog_articles")
    op.drop_index("idx_manuscripts_kategori_kailani", table_name="manuscripts")
    op.drop_index("idx_manuscripts_created_at", table_name="manuscripts")
    op.drop_table("manuscripts")
