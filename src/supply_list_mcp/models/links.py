"""Pydantic models for supply-list discovery operations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ScrapedLink(BaseModel):
    """A discovered supply-list document."""

    model_config = ConfigDict(populate_by_name=True)

    label: str = Field(description="Grade/level label or an 'Archivo N' placeholder")
    href: str = Field(description="Absolute URL of the document (direct download for cloud links)")
    course_name: str = Field(
        alias="courseName",
        description="Course the document belongs to (currently the label)",
    )

    @classmethod
    def labeled(cls, label: str, href: str) -> ScrapedLink:
        """Build a link whose course name mirrors its label."""
        label = label.strip()
        return cls(label=label, href=href, course_name=label)

    def relabel(self, label: str) -> None:
        """Overwrite both the label and the course name."""
        self.label = label
        self.course_name = label


class SupplyListResponse(BaseModel):
    """Response model for supply-list discovery."""

    success: bool = Field(description="Whether the discovery was successful")
    data: list[ScrapedLink] = Field(
        default_factory=list, description="Discovered documents in grade order"
    )
    count: int = Field(default=0, description="Number of documents found")
    error: str | None = Field(default=None, description="Error message if failed")
    status_code: int = Field(
        default=200, exclude=True, description="HTTP status for the JSON endpoint"
    )

    def to_payload(self) -> dict:
        """Serialize to the public JSON envelope."""
        if self.success:
            return self.model_dump(by_alias=True, include={"success", "data", "count"})
        return {"success": False, "error": self.error}


class SupplyListResultItem(BaseModel):
    """Individual result item for batch discovery."""

    url: str = Field(description="The URL that was requested")
    success: bool = Field(description="Whether the discovery was successful")
    data: SupplyListResponse | None = Field(
        default=None, description="Discovered documents if successful"
    )
    error: str | None = Field(default=None, description="Error message if failed")


class BatchSupplyListResponse(BaseModel):
    """Response model for batch discovery operations."""

    total: int = Field(description="Total number of URLs processed")
    successful: int = Field(description="Number of successful discoveries")
    failed: int = Field(description="Number of failed discoveries")
    results: list[SupplyListResultItem] = Field(description="Results for each URL")


class CourseLevel(BaseModel):
    """Course descriptor parsed from a document label."""

    course_name: str = Field(description="Normalized course name, optionally with year")
    level: str = Field(description="'Basica' or 'Media'")
    grade: int = Field(description="Grade number within the level (0 for preschool)")
