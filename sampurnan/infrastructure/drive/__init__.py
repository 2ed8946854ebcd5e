from sampurnan.infrastructure.drive.di import DriveProvider

__all__ = ["DriveProvider"]
