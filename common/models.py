from pydantic import BaseModel, ConfigDict
from typing import Any, Optional


class CaseSubmission(BaseModel):
    """Case intake payload as the client sends it. Nothing is validated."""
    model_config = ConfigDict(extra="ignore")

    caseId: Any = None
    summary: Any = None
    history: Any = None  # prior chat turns, stored verbatim
    files: Any = None  # attachment references, stored verbatim


class CaseSavedResponse(BaseModel):
    message: str
    caseId: Optional[Any] = None
    databaseId: str


class ErrorResponse(BaseModel):
    message: str
