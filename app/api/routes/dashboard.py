from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user, get_current_professor
from app.models import User
from app.schemas.dashboard import DashboardResponse, AnalyticsResponse
from app.schemas.search import SearchResult
from app.services.analytics import build_analytics
from app.services.dashboard import build_dashboard
from app.services.search import global_search

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return build_dashboard(db, current_user)


@router.get("/analytics", response_model=AnalyticsResponse)
def analytics(
    db: Session = Depends(get_db),
    current_professor: User = Depends(get_current_professor),
):
    return build_analytics(db)


@router.get("/search", response_model=list[SearchResult])
def search(
    q: str = Query(""),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return global_search(db, current_user, q)
