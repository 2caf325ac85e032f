"""Request schemas shared by the catalog apps."""

from pydantic import BaseModel, Field

from server.config import Settings


class PaginationSchema(BaseModel):
    """1-indexed page request."""

    page_number: int = Field(1, ge=1, description="Page number, starting at 1")
    page_item_count: int = Field(
        20,
        ge=1,
        le=Settings.page_max_limit,
        description="Number of items per page",
    )

    @property
    def skip(self) -> int:
        """Number of records before the first one of the page."""
        return (self.page_number - 1) * self.page_item_count

    @property
    def limit(self) -> int:
        """Maximum number of records on the page."""
        return self.page_item_count
