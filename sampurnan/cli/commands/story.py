import httpx

from sampurnan.cli.client import api_url, error_message, fail, server_errors
from sampurnan.cli.console import console


def story(manuscript_id: str, /) -> None:
    """Stream an imaginative story inspired by a manuscript.

    Args:
        manuscript_id: Manuscript UUID as shown by `sampurnan catalog`.
    """
    buffer: list[str] = []
    with server_errors():
        with httpx.stream(
            "POST",
            api_url(f"/manuscripts/{manuscript_id}/story"),
            timeout=httpx.Timeout(connect=5.0, read=60.0, write=5.0, pool=5.0),
        ) as response:
            if response.is_error:
                response.read()
                fail(f"{response.status_code} - {error_message(response)}")
            for chunk in response.iter_text():
                buffer.append(chunk)
                console.stream(chunk)

    console.print()
    if not "".join(buffer).strip():
        console.warning("The story came back empty")
