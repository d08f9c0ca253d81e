"""Custom exceptions for PageQuill."""

from typing import Optional


class PageQuillError(Exception):
    """Base exception for PageQuill errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class LayoutError(PageQuillError):
    """Exception raised during layout calculation."""

    pass


class LayoutContractError(LayoutError):
    """Exception raised when the measure/render protocol is misused."""

    pass


class PipeContractError(LayoutContractError):
    """Exception raised when a block pipe is driven into an undefined state."""

    pass


class RenderingError(PageQuillError):
    """Exception raised during rendering of placed blocks."""

    pass


class RunawayLayoutError(LayoutError):
    """Exception raised when a document exceeds its maximum page count.

    Content that can never finish (for example a frame that is always rejected
    and always reappears unchanged) ends here instead of looping forever.
    """

    def __init__(self, max_page_count: int, page_count: int):
        super().__init__(
            f"Have exceeded maximum page count of {max_page_count}",
            f"page {page_count} requested",
        )
        self.max_page_count = max_page_count
        self.page_count = page_count
