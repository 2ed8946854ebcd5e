from pathlib import Path

import httpx

from sampurnan.cli.client import admin_headers, api_url, error_message, fail, server_errors
from sampurnan.cli.console import console


def _report_failed_import(error: httpx.HTTPStatusError) -> None:
    if error.response.status_code != 422:
        return
    outcome = error.response.json()
    errors = outcome.get("errors") or []
    if errors:
        console.error(f"Import rejected: {len(errors)} problem(s), nothing was written")
        for line in errors:
            console.print(f"  {line}", markup=False)
    else:
        console.error(f"Import failed: {outcome.get('message') or error_message(error.response)}")
    raise SystemExit(1)


def import_file(file: Path, /) -> None:
    """Bulk-import manuscripts from a CSV or XLSX file.

    The import is all-or-nothing: any invalid row rejects the whole file.

    Args:
        file: Spreadsheet with the template's header row.
    """
    if not file.is_file():
        fail(f"No such file: {file}")

    with server_errors(on_status=_report_failed_import):
        with file.open("rb") as fh:
            response = httpx.post(
                api_url("/admin/manuscripts/import"),
                files={"file": (file.name, fh)},
                headers=admin_headers(),
                timeout=httpx.Timeout(connect=5.0, read=60.0, write=60.0, pool=5.0),
            )
        response.raise_for_status()

    outcome = response.json()
    console.success(f"Imported {outcome['written']} manuscript(s) from {file.name}")
