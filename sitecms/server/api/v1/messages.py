"""
Contact Message Endpoints.

Visitors submit the contact form publicly; admins triage the inbox.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from sitecms.core.database.entities.content import MessageStatus
from sitecms.core.logging_config import get_logger
from sitecms.core.models.io.common import ApiResponse
from sitecms.core.models.io.content import MessageCreate, MessageRead, MessageStatusUpdate
from sitecms.server.services.deps import AdminDep, MessageServiceDep

from .params import PageDep

logger = get_logger(__name__)

router = APIRouter(tags=["messages"])


@router.post(
    "/messages",
    response_model=ApiResponse[MessageRead],
    status_code=status.HTTP_201_CREATED,
    summary="Submit Contact Message",
    description="Store a contact-form submission. New messages start as `unread`.",
    responses={400: {"description": "Missing name/message or invalid email"}},
)
async def submit_message(body: MessageCreate, service: MessageServiceDep) -> ApiResponse[MessageRead]:
    """
    Submit the public contact form.

    - **name**, **email** and **message** are required.
    - **phone** is optional.
    """
    message = await service.submit(body)
    logger.info(f"Contact message {message.id} received")
    return ApiResponse[MessageRead](
        code=status.HTTP_201_CREATED,
        message="Message sent successfully",
        data=MessageRead.model_validate(message),
    )


@router.get(
    "/admin/messages",
    response_model=ApiResponse[List[MessageRead]],
    summary="List Messages",
    description="Paginated inbox, newest first, optionally filtered by status.",
)
async def list_messages(
    _: AdminDep,
    service: MessageServiceDep,
    paging: PageDep,
    message_status: Optional[MessageStatus] = Query(None, alias="status", description="unread, read or replied"),
) -> ApiResponse[List[MessageRead]]:
    filters = {"status": message_status.value} if message_status is not None else None
    items, pagination = await service.list_page(paging.page, paging.page_size, filters)
    return ApiResponse[List[MessageRead]](
        data=[MessageRead.model_validate(m) for m in items],
        pagination=pagination,
    )


@router.put(
    "/admin/messages/{message_id}",
    response_model=ApiResponse[MessageRead],
    summary="Update Message Status",
    responses={404: {"description": "Message not found"}},
)
@router.put(
    "/messages/{message_id}",
    response_model=ApiResponse[MessageRead],
    summary="Update Message Status (legacy path)",
    description="Same as `PUT /admin/messages/{id}`; kept for dashboards that call the short path.",
    responses={404: {"description": "Message not found"}},
)
async def update_message_status(
    message_id: str, body: MessageStatusUpdate, _: AdminDep, service: MessageServiceDep
) -> ApiResponse[MessageRead]:
    message = await service.set_status(message_id, body.status)
    return ApiResponse[MessageRead](message="Message updated successfully", data=MessageRead.model_validate(message))


@router.delete(
    "/admin/messages/{message_id}",
    response_model=ApiResponse[None],
    summary="Delete Message",
    responses={404: {"description": "Message not found"}},
)
async def delete_message(message_id: str, _: AdminDep, service: MessageServiceDep) -> ApiResponse[None]:
    await service.delete(message_id)
    return ApiResponse[None](message="Message deleted successfully")
