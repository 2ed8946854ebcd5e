import httpx

from sampurnan.cli.client import api_url, server_errors
from sampurnan.cli.console import console


def catalog(
    query: str = "",
    *,
    category: str | None = None,
    language: str | None = None,
    page: int = 1,
) -> None:
    """List one page of the public catalog.

    Args:
        query: Case-insensitive match on title, author or inventory code.
        category: Exact category filter.
        language: Exact language filter.
        page: Page number; pages past the end show the last page.
    """
    params: dict[str, str | int] = {"q": query, "page": page}
    if category:
        params["category"] = category
    if language:
        params["language"] = language

    with server_errors():
        response = httpx.get(api_url("/manuscripts"), params=params)
        response.raise_for_status()

    result = response.json()["page"]
    if result["empty"]:
        console.warning("No manuscripts match these filters")
        return

    console.table(
        result["items"],
        [
            ("inventory_code", "Code"),
            ("title", "Title"),
            ("author", "Author"),
            ("category", "Category"),
            ("language", "Language"),
            ("id", "ID"),
        ],
        title="Catalog",
        caption=f"Page {result['page']} of {result['total_pages']} ({result['total']} manuscripts)",
    )
