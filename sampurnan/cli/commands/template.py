from pathlib import Path
from typing import Literal

import httpx

from sampurnan.cli.client import admin_headers, api_url, server_errors
from sampurnan.cli.console import console


def template(format: Literal["xlsx", "csv"] = "xlsx", output: Path | None = None) -> None:
    """Download the header-only bulk import template.

    Args:
        format: Spreadsheet format.
        output: Destination file (default: manuscript_import_template.<format>).
    """
    destination = output or Path(f"manuscript_import_template.{format}")
    with server_errors():
        response = httpx.get(
            api_url("/admin/manuscripts/template"),
            params={"format": format},
            headers=admin_headers(),
        )
        response.raise_for_status()

    destination.write_bytes(response.content)
    console.success(f"Template saved to {destination}")
