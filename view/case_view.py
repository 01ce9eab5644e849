from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from common.db import CaseStore
from common.logging import logger
from common.models import CaseSavedResponse, ErrorResponse
from model.case_model import save_case

router = APIRouter()

FAILURE_MESSAGE = "Error saving case to database"


def get_case_store(request: Request) -> CaseStore:
    """Dependency returning the store configured on the running app."""
    return request.app.state.case_store


@router.post(
    "/save-case",
    status_code=status.HTTP_201_CREATED,
    response_model=CaseSavedResponse,
    responses={500: {"model": ErrorResponse}},
)
async def save_case_endpoint(request: Request, store: CaseStore = Depends(get_case_store)):
    """Save a case intake submission to MongoDB."""
    try:
        payload = await request.json()
        return await save_case(store, payload)
    except Exception as e:
        logger.error(f"Failed to save case to MongoDB: {str(e)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": FAILURE_MESSAGE}
        )
