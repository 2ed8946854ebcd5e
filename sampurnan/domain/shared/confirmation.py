from sampurnan.domain.shared.error import InvalidStateError


def require_confirmation(confirmed: bool, what: str) -> None:
    """Deletes are two-step: an unconfirmed request never reaches the store."""
    if not confirmed:
        raise InvalidStateError(f"Deleting {what} requires confirmation", code="confirmation_required")
