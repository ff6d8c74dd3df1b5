"""TODO comment scanning endpoints."""

import asyncio
from functools import partial

from fastapi import APIRouter, HTTPException, status

from todo_mapper.api.dependencies import Registry, ScanService
from todo_mapper.api.schemas import (
    CommentResponse,
    ErrorResponse,
    LanguagesResponse,
    ScanRequest,
    ScanResponse,
)
from todo_mapper.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["comments"])

_DEFAULT_FILE_NAMES = {
    "csharp": "source.cs",
    "java": "Source.java",
    "python": "source.py",
}


@router.post(
    "/comments/scan",
    response_model=ScanResponse,
    responses={400: {"model": ErrorResponse}},
)
async def scan_comments(request: ScanRequest, service: ScanService) -> ScanResponse:
    """
    Scan source code for TODO comments.

    Each comment is returned with the names of its enclosing member,
    type and namespace.
    """
    file_path = request.file_path or _DEFAULT_FILE_NAMES[request.language.value]
    # Parsing is CPU-bound; keep it off the event loop
    loop = asyncio.get_running_loop()
    try:
        result = await loop.run_in_executor(
            None,
            partial(
                service.scan_source,
                request.source_code,
                file_path,
                language=request.language,
            ),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    comments = []
    for record in result.comments:
        context = result.describe(record)
        comments.append(
            CommentResponse(
                content=context.content,
                line=context.line,
                member=context.member_name,
                type=context.type_name,
                namespace=context.namespace_name,
            )
        )

    logger.info(
        "source_scanned",
        file_path=file_path,
        language=result.language.value,
        comment_count=len(comments),
    )

    return ScanResponse(
        file_path=file_path,
        language=result.language,
        content_hash=result.content_hash,
        comments=comments,
        total_comments=len(comments),
        errors=list(result.errors),
    )


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages(registry: Registry) -> LanguagesResponse:
    """List the languages and file extensions that can be scanned."""
    return LanguagesResponse(
        languages=[lang.value for lang in registry.supported_languages],
        extensions=sorted(registry.supported_extensions),
    )
