from pydantic import AliasChoices, BaseModel, Field
from typing import Any, Dict, Optional
from datetime import datetime
from cinecircle.schemas.profile import ProfileResponse

class ActivityResponse(BaseModel):
    id: str
    user_id: str
    activity_type: str
    target_id: Optional[str] = None
    target_type: Optional[str] = None
    # the ORM attribute is "extra"; checked first so the declarative MetaData is never picked up
    metadata: Dict[str, Any] = Field(default_factory=dict, validation_alias=AliasChoices("extra", "metadata"))
    created_at: datetime
    user: Optional[ProfileResponse] = None

    class Config:
        from_attributes = True
