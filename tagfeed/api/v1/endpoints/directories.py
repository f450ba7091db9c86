"""Directory tag feed API: sample content items for all categories of a directory.

The result is a feed of one content item per category in the given
directory, usable as a preview of the kinds of content in the system.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from tagfeed.api.v1.dependencies import get_directory_feed_service
from tagfeed.api.v1.request_options import parse_resource_path, parse_selectors
from tagfeed.application.use_cases import DirectoryFeedService
from tagfeed.core.constants import FEED_EXTENSION, SELECTOR_TAGGED
from tagfeed.core.limiter import limit_feed
from tagfeed.domain.exceptions import ResourceNotFoundException
from tagfeed.schemas.error import ErrorResponse

router = APIRouter()


@router.get(
    "/{resource:path}",
    response_class=Response,
    responses={
        200: {
            "description": "Feed keyed by category name; each value holds the "
            "category properties plus a 'content' object (empty when no item).",
            "content": {"application/json": {}},
        },
        404: {"description": "Not a tagged JSON request for a directory", "model": ErrorResponse},
        500: {"description": "Failure to retrieve tags or files", "model": ErrorResponse},
    },
)
@limit_feed
async def get_directory_tag_feed(
    request: Request,
    resource: str,
    feed_svc: Annotated[DirectoryFeedService, Depends(get_directory_feed_service)],
) -> Response:
    """Get one sample content item for every category of a directory.

    Address the directory with the 'tagged' selector and json extension,
    e.g. /api/v1/directories/tags/directory.tagged.json. Add 'tidy' for
    pretty output and a number or 'infinity' for property depth.
    """
    parsed = parse_resource_path(resource)
    if parsed.extension != FEED_EXTENSION or SELECTOR_TAGGED not in parsed.selectors:
        raise ResourceNotFoundException("directory feed", resource)
    options = parse_selectors(parsed.selectors)
    body = await feed_svc.build_feed(parsed.path, options)
    return Response(content=body, media_type="application/json; charset=utf-8")
