from functools import lru_cache
import logging

from fastapi import APIRouter, Depends, HTTPException

from config.settings import quiz_settings
from services.energy_engine.engine import EnergyQuizEngine
from services.energy_engine.models import EnergyReport, InvalidSubmissionError, QuizResult
from src.schemas.quiz import QuizCatalogResponse, QuizSubmission

router = APIRouter()
logger = logging.getLogger(__name__)

@lru_cache(maxsize=1)
def get_quiz_engine() -> EnergyQuizEngine:
    # One engine per process; main.py builds it at startup
    return EnergyQuizEngine(
        catalog_path=quiz_settings.catalog_path,
        default_user_name=quiz_settings.default_user_name,
    )

@router.get("/quiz/questions", response_model=QuizCatalogResponse)
async def get_questions(engine: EnergyQuizEngine = Depends(get_quiz_engine)):
    """Returns the question catalog, grouped into sections in presentation order."""
    return engine.get_questions()

@router.post("/quiz/score", response_model=QuizResult)
async def score_quiz(
    submission: QuizSubmission,
    engine: EnergyQuizEngine = Depends(get_quiz_engine)
):
    """
    Scores one answer snapshot. Nothing is stored; the same answers always
    produce the same result.
    """
    try:
        result = engine.calculate_results(submission.answers)
        logger.info(f"Quiz scored: eas={result.eas}, archetype={result.archetype_key.value}")
        return result
    except InvalidSubmissionError as e:
        logger.error(f"Invalid submission: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Unexpected error during quiz scoring: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.post("/quiz/report", response_model=EnergyReport)
async def report_quiz(
    submission: QuizSubmission,
    engine: EnergyQuizEngine = Depends(get_quiz_engine)
):
    """Scores the answers and returns the full personalised report."""
    try:
        return engine.generate_report(submission.answers)
    except InvalidSubmissionError as e:
        logger.error(f"Invalid submission: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Unexpected error during report generation: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
