from sampurnan.domain.guestbook.util.di.provider import GuestbookProvider

__all__ = ["GuestbookProvider"]
