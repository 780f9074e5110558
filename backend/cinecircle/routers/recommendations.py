from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from cinecircle.db import get_db
from cinecircle.core.auth import get_current_user
from cinecircle.core.exceptions import handle_exception
from cinecircle.schemas.recommendation import RecommendationCreate, RecommendationResponse
from cinecircle.services.recommendation_service import RecommendationService

router = APIRouter(prefix="/recommendations", tags=["recommendations"])

@router.get("", response_model=List[RecommendationResponse])
def get_received_recommendations(
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Recommendations sent to the caller"""
    try:
        return RecommendationService(db).get_received(current_user_id)
    except Exception as e:
        raise handle_exception(e)

@router.post("", response_model=RecommendationResponse, status_code=status.HTTP_201_CREATED)
def create_recommendation(
    recommendation_data: RecommendationCreate,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return RecommendationService(db).create_recommendation(current_user_id, recommendation_data)
    except Exception as e:
        raise handle_exception(e)
