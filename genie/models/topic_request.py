"""Topic request models (sample-question topics asked for by users)"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field


class TopicRequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TopicRequest(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    topic: str
    description: str = ""
    status: TopicRequestStatus = TopicRequestStatus.PENDING
    requested_by: str  # user id
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None
