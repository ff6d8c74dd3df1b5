"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field, model_validator

from todo_mapper.core import Language


# ============== Request Schemas ==============


class ScanRequest(BaseModel):
    """Request to scan a piece of source code."""

    source_code: str = Field(
        ...,
        description="Source text to scan",
        examples=["namespace App { class C { void M() { // TODO: fix\n } } }"],
    )
    language: Language | None = Field(
        None,
        description="Source language; inferred from file_path when omitted",
    )
    file_path: str | None = Field(
        None,
        description="Path used for reporting and language inference",
        examples=["src/App/Service.cs"],
        max_length=1024,
    )

    @model_validator(mode="after")
    def require_language_or_path(self) -> "ScanRequest":
        if self.language is None and not self.file_path:
            raise ValueError("either language or file_path is required")
        return self


# ============== Response Schemas ==============


class CommentResponse(BaseModel):
    """A TODO comment with its enclosing scopes."""

    content: str
    line: int = Field(..., description="0-indexed line of the comment start")
    member: str | None = None
    type: str | None = None
    namespace: str | None = None


class ScanResponse(BaseModel):
    """Result of scanning one source."""

    file_path: str
    language: Language
    content_hash: str
    comments: list[CommentResponse]
    total_comments: int
    errors: list[str] = []


class LanguagesResponse(BaseModel):
    """Languages and file extensions the service can scan."""

    languages: list[str]
    extensions: list[str]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    languages: list[str]


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str
