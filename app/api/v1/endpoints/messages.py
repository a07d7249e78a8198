"""Bot messaging endpoint: receives activities from the channel and answers extension queries."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import get_messaging_extension
from app.application.use_cases.messaging_extension import MessagingExtension
from app.schemas.messaging_extension import InvokeActivity, MessagingExtensionResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=None,
    responses={
        200: {"description": "Search results", "model": MessagingExtensionResponse},
        202: {"description": "Activity accepted; no response body expected"},
    },
)
async def post_activity(
    activity: InvokeActivity,
    extension: Annotated[MessagingExtension, Depends(get_messaging_extension)],
) -> Response:
    """Answer composeExtension/query activities; accept everything else with 202."""
    invoke_response = await extension.handle_query(activity)
    if invoke_response is None:
        logger.debug("Ignoring activity type=%s name=%s", activity.type, activity.name)
        return Response(status_code=status.HTTP_202_ACCEPTED)
    return JSONResponse(
        status_code=invoke_response.status,
        content=invoke_response.body.model_dump(
            mode="json", by_alias=True, exclude_none=True
        ),
    )
