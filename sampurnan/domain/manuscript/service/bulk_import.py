"""Bulk manuscript import: decode, validate, then one batch insert."""

import logging
from dataclasses import field
from enum import StrEnum

from pydantic import BaseModel

from sampurnan.domain.manuscript.model.schema import MANUSCRIPT_SCHEMA
from sampurnan.domain.manuscript.port.repository import ManuscriptRepository
from sampurnan.domain.manuscript.port.spreadsheet import SpreadsheetCodecs, SpreadsheetFormat
from sampurnan.domain.manuscript.service.import_validator import validate_rows
from sampurnan.domain.shared.error import FormatError, StoreError
from sampurnan.domain.shared.service import Service

logger = logging.getLogger(__name__)


class ImportState(StrEnum):
    IDLE = "idle"
    DECODING = "decoding"
    VALIDATING = "validating"
    PERSISTING = "persisting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ImportOutcome(BaseModel):
    """Terminal result of one pipeline run.

    ``message`` is the format/store message, or the newline-joined validation
    errors. ``refresh_catalog`` tells callers their catalog view is stale.
    """

    state: ImportState
    transitions: list[ImportState]
    written: int = 0
    errors: list[str] = []
    message: str | None = None
    refresh_catalog: bool = False

    @property
    def succeeded(self) -> bool:
        return self.state == ImportState.SUCCEEDED


class BulkImportPipeline(Service):
    """Idle -> Decoding -> Validating -> Persisting -> Succeeded | Failed.

    Failed is reachable from every working state. The instance returns to Idle
    when a run finishes, whatever the outcome.
    """

    manuscript_repo: ManuscriptRepository
    codecs: SpreadsheetCodecs
    state: ImportState = field(default=ImportState.IDLE, init=False)
    _transitions: list[ImportState] = field(default_factory=list, init=False, repr=False)

    async def run(self, filename: str | None, content: bytes) -> ImportOutcome:
        self._transitions = []
        try:
            self._enter(ImportState.DECODING)
            fmt = SpreadsheetFormat.detect(filename, content)
            rows = self.codecs.for_format(fmt).decode(content, MANUSCRIPT_SCHEMA.names)

            self._enter(ImportState.VALIDATING)
            report = validate_rows(rows)
            if not report.ok:
                logger.info("Import rejected: %d row error(s)", len(report.errors))
                return self._fail("\n".join(report.errors), errors=report.errors)

            self._enter(ImportState.PERSISTING)
            written = await self.manuscript_repo.insert_many(report.records)

            self._enter(ImportState.SUCCEEDED)
            logger.info("Imported %d manuscript(s) from %s", written, filename or "upload")
            return ImportOutcome(
                state=ImportState.SUCCEEDED,
                transitions=list(self._transitions),
                written=written,
                message=f"Imported {written} manuscript(s).",
                refresh_catalog=True,
            )
        except FormatError as e:
            return self._fail(e.message)
        except StoreError as e:
            logger.error("Import batch insert rejected by store: %s", e.message)
            return self._fail(e.message)
        finally:
            self.state = ImportState.IDLE

    def _enter(self, state: ImportState) -> None:
        logger.debug("Import pipeline: %s -> %s", self.state, state)
        self.state = state
        self._transitions.append(state)

    def _fail(self, message: str, errors: list[str] | None = None) -> ImportOutcome:
        self._enter(ImportState.FAILED)
        return ImportOutcome(
            state=ImportState.FAILED,
            transitions=list(self._transitions),
            errors=errors or [],
            message=message,
        )
