from datetime import datetime, timezone
from common.models import CaseSubmission
from common.logging import logger

SUCCESS_MESSAGE = "Case saved successfully!"


def build_case_document(submission: CaseSubmission, now: datetime = None) -> dict:
    """Map an intake submission to the document stored in the cases collection."""
    return {
        "caseId": submission.caseId,
        "caseSummary": submission.summary,
        "chatHistory": submission.history,
        "attachedFiles": submission.files,
        "createdAt": now or datetime.now(timezone.utc)  # server time, never the client's
    }


async def save_case(store, payload) -> dict:
    """Insert one case record and return the acknowledgment body."""
    submission = CaseSubmission(**payload)
    logger.info(f"Received case data for caseId: {submission.caseId}")

    async with store.session() as collection:
        case_document = build_case_document(submission)
        result = await collection.insert_one(case_document)
        logger.info(
            f"Successfully inserted case with _id: {result.inserted_id}")

    return {
        "message": SUCCESS_MESSAGE,
        "caseId": submission.caseId,
        "databaseId": str(result.inserted_id)
    }
