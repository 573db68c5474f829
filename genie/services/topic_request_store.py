"""Topic request storage (data/topic_requests.json)."""

import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from ..models.topic_request import TopicRequest, TopicRequestStatus
from ..models.user import Principal
from ..utils.exceptions import (
    InvalidTopicRequest,
    PermissionDenied,
    StorageError,
    TopicRequestNotFound,
)
from ..utils.logger import get_logger
from .json_store import atomic_write, read_json

logger = get_logger(__name__)

TOPIC_REQUESTS_FILENAME = "topic_requests.json"


class TopicRequestStore:
    """Requests for new sample-question topics, reviewed by admins"""

    def __init__(self, data_dir: Path):
        self.path = Path(data_dir) / TOPIC_REQUESTS_FILENAME
        self._lock = threading.Lock()

    def _load(self) -> List[TopicRequest]:
        data = read_json(self.path)
        try:
            return [TopicRequest(**item) for item in data.get("requests", [])]
        except (TypeError, ValueError) as e:
            raise StorageError(f"Failed to load topic requests from {self.path}: {e}")

    def _save(self, requests: List[TopicRequest]) -> None:
        atomic_write(self.path, {"requests": [r.model_dump(mode="json") for r in requests]})

    def create(self, topic: str, description: str, requested_by: Principal) -> TopicRequest:
        if not topic or not topic.strip():
            raise InvalidTopicRequest()
        request = TopicRequest(
            topic=topic.strip(),
            description=description.strip(),
            requested_by=requested_by.user_id or requested_by.email,
        )
        with self._lock:
            requests = self._load()
            requests.append(request)
            self._save(requests)
        logger.info("Topic request created", request_id=request.id, topic=request.topic)
        return request

    def list_for(self, principal: Principal) -> List[TopicRequest]:
        """Admins see every request; users only their own."""
        requests = self._load()
        if principal.is_admin:
            return requests
        owner = principal.user_id or principal.email
        return [r for r in requests if r.requested_by == owner]

    def update_status(
        self, request_id: str, status: TopicRequestStatus, reviewer: Principal
    ) -> TopicRequest:
        if not reviewer.is_admin:
            raise PermissionDenied()
        with self._lock:
            requests = self._load()
            for index, request in enumerate(requests):
                if request.id == request_id:
                    updated = request.model_copy(
                        update={"status": status, "updated_at": datetime.now(timezone.utc)}
                    )
                    requests[index] = updated
                    self._save(requests)
                    break
            else:
                raise TopicRequestNotFound()
        logger.info(
            "Topic request status updated",
            request_id=request_id,
            status=status.value,
            reviewer_id=reviewer.user_id,
        )
        return updated
