from __future__ import annotations


class CharBlocksError(RuntimeError):
    pass


class BlockTableError(CharBlocksError):
    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class TextTooLargeError(CharBlocksError):
    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"text has {length} characters, limit is {limit}")
        self.length = length
        self.limit = limit
