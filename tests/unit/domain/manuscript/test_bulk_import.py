"""Unit tests for the bulk import pipeline state machine."""

import csv
import io
import zipfile
from unittest.mock import AsyncMock

import pytest

from sampurnan.domain.manuscript.model.schema import MANUSCRIPT_SCHEMA
from sampurnan.domain.manuscript.port.spreadsheet import SpreadsheetCodecs, SpreadsheetFormat
from sampurnan.domain.manuscript.service.bulk_import import BulkImportPipeline, ImportState
from sampurnan.domain.shared.error import StoreError
from sampurnan.infrastructure.persistence.adapter.spreadsheet import CsvSpreadsheetCodec, XlsxSpreadsheetCodec


def csv_upload(*rows: dict) -> bytes:
    buf = io.StringIO(newline="")
    writer = csv.DictWriter(buf, fieldnames=MANUSCRIPT_SCHEMA.names)
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return buf.getvalue().encode("utf-8")


def truncate_sheet(workbook: bytes) -> bytes:
    """Rewrite the workbook with the first sheet cut off halfway."""
    out = io.BytesIO()
    with zipfile.ZipFile(io.BytesIO(workbook)) as src, zipfile.ZipFile(out, "w") as dst:
        for item in src.infolist():
            data = src.read(item.filename)
            if item.filename == "xl/worksheets/sheet1.xml":
                data = data[: len(data) // 2]
            dst.writestr(item, data)
    return out.getvalue()


@pytest.fixture
def repo():
    repo = AsyncMock()
    repo.insert_many.side_effect = lambda records: len(records)
    return repo


@pytest.fixture
def pipeline(repo) -> BulkImportPipeline:
    codecs = SpreadsheetCodecs(
        {
            SpreadsheetFormat.CSV: CsvSpreadsheetCodec(),
            SpreadsheetFormat.XLSX: XlsxSpreadsheetCodec(),
        }
    )
    return BulkImportPipeline(manuscript_repo=repo, codecs=codecs)


class TestBulkImportPipeline:
    async def test_valid_file_is_written_in_one_batch(self, pipeline, repo):
        content = csv_upload(
            {"title": "Serat Centhini", "category": "Sastra", "image_urls": "a.jpg;b.jpg"},
            {"title": "Babad Diponegoro", "category": "Sejarah"},
        )

        outcome = await pipeline.run("naskah.csv", content)

        assert outcome.succeeded
        assert outcome.written == 2
        assert outcome.refresh_catalog
        assert outcome.transitions == [
            ImportState.DECODING,
            ImportState.VALIDATING,
            ImportState.PERSISTING,
            ImportState.SUCCEEDED,
        ]
        repo.insert_many.assert_awaited_once()
        records = repo.insert_many.await_args.args[0]
        assert [r["title"] for r in records] == ["Serat Centhini", "Babad Diponegoro"]
        assert records[0]["thumbnail_url"] == "a.jpg"

    async def test_invalid_row_writes_nothing(self, pipeline, repo):
        content = csv_upload({"title": "Serat Centhini"}, {"title": "", "language": "Latin"})

        outcome = await pipeline.run("naskah.csv", content)

        assert outcome.state == ImportState.FAILED
        assert outcome.transitions[-2:] == [ImportState.VALIDATING, ImportState.FAILED]
        assert outcome.errors == [
            "Row 2: title must not be empty.",
            'Row 2: invalid language: "Latin".',
        ]
        assert outcome.message == "\n".join(outcome.errors)
        assert not outcome.refresh_catalog
        repo.insert_many.assert_not_awaited()

    async def test_header_mismatch_fails_while_decoding(self, pipeline, repo):
        outcome = await pipeline.run("naskah.csv", b"judul,pengarang\nSerat,Ronggowarsito\n")

        assert outcome.transitions == [ImportState.DECODING, ImportState.FAILED]
        assert outcome.message.startswith("Header mismatch in column 1")
        repo.insert_many.assert_not_awaited()

    async def test_unsupported_file_type(self, pipeline):
        outcome = await pipeline.run("naskah.txt", b"hello")

        assert outcome.state == ImportState.FAILED
        assert outcome.message == "Unsupported file type: naskah.txt"

    async def test_store_rejection_is_a_failed_outcome(self, pipeline, repo):
        repo.insert_many.side_effect = StoreError('null value in column "judul_dari_tim"')

        outcome = await pipeline.run("naskah.csv", csv_upload({"title": "Serat"}))

        assert outcome.transitions[-2:] == [ImportState.PERSISTING, ImportState.FAILED]
        assert outcome.message == 'null value in column "judul_dari_tim"'
        assert outcome.written == 0

    async def test_pipeline_returns_to_idle(self, pipeline):
        await pipeline.run("naskah.csv", csv_upload({"title": "Serat"}))
        assert pipeline.state == ImportState.IDLE

        await pipeline.run("naskah.csv", b"")
        assert pipeline.state == ImportState.IDLE

    async def test_corrupt_workbook_fails_while_decoding(self, pipeline, repo):
        template = XlsxSpreadsheetCodec().encode_template(MANUSCRIPT_SCHEMA.fields)

        outcome = await pipeline.run("naskah.xlsx", truncate_sheet(template))

        assert outcome.transitions == [ImportState.DECODING, ImportState.FAILED]
        assert outcome.message.startswith("Could not read workbook")
        repo.insert_many.assert_not_awaited()

    async def test_oversized_integer_is_a_row_error(self, pipeline, repo):
        content = csv_upload({"title": "Serat", "gregorian_year": "99999999999999999999"})

        outcome = await pipeline.run("naskah.csv", content)

        assert outcome.errors == ["Row 1: gregorian_year is out of range."]
        repo.insert_many.assert_not_awaited()
