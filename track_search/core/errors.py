from __future__ import annotations


class TrackSearchError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class ShapeMismatchError(TrackSearchError):
    def __init__(self, message: str = "Search response did not match the expected shape"):
        super().__init__("SHAPE_MISMATCH", message)


class UnauthorizedError(TrackSearchError):
    def __init__(self, message: str = "Access token is invalid or expired"):
        super().__init__("UNAUTHORIZED", message)


class UnexpectedStatusError(TrackSearchError):
    def __init__(self, status: int, message: str | None = None):
        super().__init__("UNEXPECTED_STATUS", message or f"Unexpected search response status: {status}")
        self.status = status


class TransportError(TrackSearchError):
    def __init__(self, message: str):
        super().__init__("TRANSPORT_FAILED", message)


class StorageOpenError(TrackSearchError):
    def __init__(self, message: str):
        super().__init__("STORAGE_OPEN_FAILED", message)


class StorageWriteError(TrackSearchError):
    def __init__(self, message: str):
        super().__init__("STORAGE_WRITE_FAILED", message)


class StorageReadError(TrackSearchError):
    def __init__(self, message: str):
        super().__init__("STORAGE_READ_FAILED", message)


class MissingArgumentError(TrackSearchError):
    def __init__(self, name: str):
        super().__init__("MISSING_ARGUMENT", f"Missing required argument: {name}")
        self.name = name
