"""One-shot analysis endpoint."""

import logging
import time
from fastapi import APIRouter, Depends

from FD2NF.ir.models.analysis import WorkerResponse
from backend.models.requests import AnalyzeRequest
from backend.dependencies import get_analysis_service
from backend.services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["analysis"])


@router.post("/analyze", response_model=WorkerResponse, response_model_by_alias=True)
async def analyze(
    request: AnalyzeRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
):
    """
    Analyze functional dependencies and answer with exactly one response.

    Malformed input and oversized schemas come back as
    ``{"successful": false, "message": ...}`` with status 200.
    """
    start_time = time.time()
    logger.info(f"API ENDPOINT: POST /api/analyze ({len(request.text)} characters)")

    response = await analysis_service.analyze_text(request.text)

    elapsed_time = time.time() - start_time
    logger.info(f"Analysis answered successful={response.successful} in {elapsed_time:.3f} seconds")
    return response
