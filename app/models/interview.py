from pydantic import BaseModel, ConfigDict, Field
from typing import List, Any

class ExtractedParameters(BaseModel):
    """Fields pulled out of the conversation by the extraction call"""
    role: str = ""
    level: str = ""
    techstack: str = ""
    type: str = "mixed"
    amount: int = Field(default=10, ge=1)

class InterviewRecord(BaseModel):
    """Document written to the interviews collection"""
    model_config = ConfigDict(populate_by_name=True)

    role: str
    type: str
    level: str
    techstack: List[str] = []
    questions: List[str] = Field(..., min_length=1)
    user_id: Any = Field(..., alias="userId")
    finalized: bool = True
    cover_image: str = Field(..., alias="coverImage")
    created_at: str = Field(..., alias="createdAt")

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)
