from typing import Any, Optional


class LsLensException(Exception):
    """Base exception for lslens"""
    def __init__(self, detail: Any = None, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code or "LSLENS_ERROR"

    def __str__(self) -> str:
        return str(self.detail)


class InvalidRecordError(LsLensException):
    """Raised when an input record cannot be turned into a FileRecord"""
    def __init__(self, detail: str = "Invalid file record", index: Optional[int] = None):
        if index is not None:
            detail = f"record {index}: {detail}"
        super().__init__(detail=detail, error_code="INVALID_RECORD")
        self.index = index
