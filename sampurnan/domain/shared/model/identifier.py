from uuid import UUID

from sampurnan.domain.shared.error import NotFoundError


def parse_uuid(raw: str, kind: str) -> UUID:
    """Parse a path identifier. Malformed identifiers are reported as not found."""
    try:
        return UUID(raw)
    except ValueError as e:
        raise NotFoundError(f"{kind} not found: {raw}") from e
