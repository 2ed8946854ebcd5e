from dishka import provide

from sampurnan.domain.guestbook.command.moderate import DeleteEntryHandler, ToggleApprovalHandler
from sampurnan.domain.guestbook.command.sign import SignGuestbookHandler
from sampurnan.domain.guestbook.query.list_entries import ListAllEntriesHandler, ListApprovedEntriesHandler
from sampurnan.domain.guestbook.service.guestbook import GuestbookService
from sampurnan.util.di.base import Provider
from sampurnan.util.di.scope import Scope


class GuestbookProvider(Provider):
    guestbook_service = provide(GuestbookService, scope=Scope.UOW)

    # Command Handlers
    sign_handler = provide(SignGuestbookHandler, scope=Scope.UOW)
    toggle_handler = provide(ToggleApprovalHandler, scope=Scope.UOW)
    delete_handler = provide(DeleteEntryHandler, scope=Scope.UOW)

    # Query Handlers
    list_approved_handler = provide(ListApprovedEntriesHandler, scope=Scope.UOW)
    list_all_handler = provide(ListAllEntriesHandler, scope=Scope.UOW)
