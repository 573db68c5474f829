"""
Topic request routes. Prefix: /api/topic-requests

- Any signed-in user can request a topic and list their own requests
- Admins see every request and approve/reject them
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from genie.models.topic_request import TopicRequest, TopicRequestStatus
from genie.models.user import Principal
from genie.services.topic_request_store import TopicRequestStore
from .auth_deps import get_current_principal, require_admin


router = APIRouter(prefix="/api/topic-requests", tags=["topic-requests"])


class TopicRequestCreate(BaseModel):
    topic: str
    description: str = ""


class TopicRequestStatusUpdate(BaseModel):
    status: TopicRequestStatus


def get_topic_store(request: Request) -> TopicRequestStore:
    return request.app.state.topic_store


@router.post("", response_model=TopicRequest, status_code=status.HTTP_201_CREATED)
async def create_topic_request(
    body: TopicRequestCreate,
    current_user: Principal = Depends(get_current_principal),
    store: TopicRequestStore = Depends(get_topic_store),
) -> TopicRequest:
    return await run_in_threadpool(store.create, body.topic, body.description, current_user)


@router.get("", response_model=List[TopicRequest])
async def list_topic_requests(
    current_user: Principal = Depends(get_current_principal),
    store: TopicRequestStore = Depends(get_topic_store),
) -> List[TopicRequest]:
    return await run_in_threadpool(store.list_for, current_user)


@router.patch("/{request_id}", response_model=TopicRequest)
async def update_topic_request(
    request_id: str,
    body: TopicRequestStatusUpdate,
    admin: Principal = Depends(require_admin),
    store: TopicRequestStore = Depends(get_topic_store),
) -> TopicRequest:
    return await run_in_threadpool(store.update_status, request_id, body.status, admin)
