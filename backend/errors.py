from __future__ import annotations


class AnalysisError(ValueError):
    """Request-level failure reported to the client with ``status_code`` and ``code``."""

    status_code = 400
    code = "BAD_REQUEST"


class NoDocumentsError(AnalysisError):
    code = "NO_DOCUMENTS"

    def __init__(self) -> None:
        super().__init__("No documents provided")


class NotEnoughDocumentsError(AnalysisError):
    code = "NOT_ENOUGH_DOCUMENTS"

    def __init__(self, count: int, minimum: int) -> None:
        super().__init__(
            f"Not enough documents: minimum {minimum} required for comparison, got {count}"
        )


class TooManyDocumentsError(AnalysisError):
    code = "TOO_MANY_DOCUMENTS"

    def __init__(self, count: int, maximum: int) -> None:
        super().__init__(f"Too many documents: {count}, maximum allowed is {maximum}")


class EmptyDocumentError(AnalysisError):
    code = "EMPTY_DOCUMENT"

    def __init__(self, index: int) -> None:
        super().__init__(f"Empty document at index {index}")


class DocumentTooLongError(AnalysisError):
    code = "DOCUMENT_TOO_LONG"

    def __init__(self, index: int, maximum: int) -> None:
        super().__init__(f"Document at index {index} exceeds maximum length of {maximum} characters")


class NotEnoughFilesError(AnalysisError):
    code = "NOT_ENOUGH_FILES"

    def __init__(self, minimum: int) -> None:
        super().__init__(f"Not enough files. Minimum required: {minimum}")


class TooManyFilesError(AnalysisError):
    code = "TOO_MANY_FILES"

    def __init__(self, maximum: int) -> None:
        super().__init__(f"Too many files. Maximum allowed: {maximum}")


class MissingFilenameError(AnalysisError):
    code = "MISSING_FILENAME"

    def __init__(self) -> None:
        super().__init__("File is missing filename")


class FileTooLargeError(AnalysisError):
    status_code = 413
    code = "FILE_TOO_LARGE"

    def __init__(self, filename: str, maximum: int) -> None:
        super().__init__(f"File '{filename}' exceeds maximum size of {maximum} bytes")


class TotalSizeTooLargeError(AnalysisError):
    status_code = 413
    code = "TOTAL_SIZE_TOO_LARGE"

    def __init__(self, maximum: int) -> None:
        super().__init__(f"Total upload size exceeds maximum of {maximum} bytes")


class UnsupportedFileTypeError(AnalysisError):
    code = "UNSUPPORTED_FILE_TYPE"

    def __init__(self, filename: str) -> None:
        super().__init__(f"Unsupported file type: {filename}. Allowed: PDF, DOCX, TXT")


class FileExtractionError(AnalysisError):
    status_code = 422
    code = "EXTRACTION_ERROR"

    def __init__(self, filename: str, error: str) -> None:
        super().__init__(f"Failed to extract text from '{filename}': {error}")


class EmptyFileDocumentError(AnalysisError):
    code = "EMPTY_DOCUMENT"

    def __init__(self, filename: str) -> None:
        super().__init__(f"Document '{filename}' contains no text or sentences")


class InvalidThresholdError(AnalysisError):
    code = "INVALID_THRESHOLD"

    def __init__(self, raw: str) -> None:
        super().__init__(
            f"Invalid threshold value: '{raw}'. Must be a number between 0.0 and 1.0"
        )


class ThresholdRangeError(AnalysisError):
    code = "INVALID_THRESHOLD_RANGE"

    def __init__(self, value: float) -> None:
        super().__init__(f"Threshold {value} out of range. Must be between 0.0 and 1.0")
