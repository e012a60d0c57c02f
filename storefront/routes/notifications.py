"""Notification feed for the storefront UI"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ..core.notifications import NotificationCenter, NotificationType
from .dependencies import get_notifications

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


class NotificationOut(BaseModel):
    id: str
    type: NotificationType
    title: str
    description: Optional[str] = None
    duration: int
    created_at: datetime


@router.get("", response_model=list[NotificationOut])
def list_notifications(
    limit: int = Query(10, ge=1, le=50),
    center: NotificationCenter = Depends(get_notifications),
):
    """Most recent notifications, newest first"""
    return [NotificationOut(**vars(n)) for n in center.recent(limit)]
