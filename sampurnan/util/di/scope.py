"""Dishka scopes for Sampurnan."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Hierarchy: APP -> UOW.

    - APP: application lifetime (engine, HTTP clients, codecs)
    - UOW: one HTTP request or one CLI-driven operation (session, handlers)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
