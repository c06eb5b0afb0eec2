from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user
from app.models import User, Notification
from app.schemas.notification import NotificationOut, SendNotificationRequest, SendNotificationResponse
from app.services.mailer import send_notification_email

router = APIRouter(tags=["notifications"])


@router.get("/notifications", response_model=list[NotificationOut])
def list_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return (
        db.query(Notification)
        .filter(Notification.user_id == current_user.id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .all()
    )


@router.post("/notifications/{notification_id}/read", response_model=NotificationOut)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    notification = (
        db.query(Notification)
        .filter(Notification.id == notification_id, Notification.user_id == current_user.id)
        .first()
    )
    if not notification:
        raise HTTPException(status_code=404, detail="Notification not found")
    notification.read = True
    db.commit()
    db.refresh(notification)
    return notification


@router.post("/functions/send-notification", response_model=SendNotificationResponse)
def send_notification(
    payload: SendNotificationRequest,
    current_user: User = Depends(get_current_user),
):
    result = send_notification_email(payload.to, payload.to_name, payload.type, payload.data)
    if not result["success"]:
        return JSONResponse(status_code=500, content=result)
    return result
