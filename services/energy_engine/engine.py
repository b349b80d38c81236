import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from services.energy_engine import results_generator, scorer
from services.energy_engine.definitions import QUIZ_CATALOG
from services.energy_engine.loader import load_catalog_data, load_catalog_from_file
from services.energy_engine.models import (
    Answer,
    ChoiceAnswer,
    EnergyReport,
    LikertAnswer,
    LikertQuestion,
    Question,
    QuizCatalog,
    QuizResult,
    TextAnswer,
    TextQuestion,
    InvalidSubmissionError,
)

logger = logging.getLogger(__name__)

class EnergyQuizEngine:
    """
    Holds the validated question catalog and scores answer snapshots against it.

    The engine keeps no per-respondent state, so one instance can serve every
    caller.
    """
    def __init__(
        self,
        catalog: Optional[QuizCatalog] = None,
        catalog_path: Optional[str] = None,
        default_user_name: str = scorer.DEFAULT_USER_NAME
    ):
        """
        Args:
            catalog: An already validated catalog. Takes precedence over catalog_path.
            catalog_path: Path to a YAML catalog. The built-in catalog is used when neither is given.
            default_user_name: Name reported when the respondent leaves the name blank.
        """
        if catalog is not None:
            self.catalog = catalog
        elif catalog_path:
            self.catalog = load_catalog_from_file(catalog_path)
        else:
            self.catalog = load_catalog_data(QUIZ_CATALOG)
        self.default_user_name = default_user_name
        self._build_lookup_maps()
        logger.info(f"Energy quiz engine ready: catalog version {self.catalog.version}, {len(self.questions)} questions")

    def _build_lookup_maps(self):
        """Flattens sections into presentation order and indexes questions by ID."""
        self.questions: List[Question] = [q for section in self.catalog.sections for q in section.questions]
        self.question_map: Dict[str, Question] = {q.id: q for q in self.questions}

    def get_questions(self) -> Dict[str, Any]:
        """Returns the catalog in presentation order for the UI."""
        return {
            "version": self.catalog.version,
            "sections": [
                {
                    "id": section.id,
                    "title": section.title,
                    "subtitle": section.subtitle,
                    "icon": section.icon,
                    "questions": [q.model_dump(mode="json") for q in section.questions],
                }
                for section in self.catalog.sections
            ],
        }

    def build_snapshot(self, raw_answers: Mapping[str, Any]) -> Mapping[str, Answer]:
        """
        Converts raw submitted values into an immutable mapping of typed answers.

        Unknown question IDs and null values are dropped. A value whose type does
        not fit its question raises InvalidSubmissionError.
        """
        answers: Dict[str, Answer] = {}
        for question_id, value in raw_answers.items():
            question = self.question_map.get(question_id)
            if question is None:
                logger.debug(f"Ignoring answer for unknown question '{question_id}'")
                continue
            if value is None:
                continue
            try:
                if isinstance(question, TextQuestion):
                    answers[question_id] = TextAnswer(value=value)
                elif isinstance(question, LikertQuestion):
                    answers[question_id] = LikertAnswer(value=value)
                else:
                    answers[question_id] = ChoiceAnswer(value=value)
            except ValidationError as e:
                raise InvalidSubmissionError(
                    f"Invalid answer {value!r} for {question.type} question '{question_id}': {e.errors()[0]['msg']}"
                )
        return MappingProxyType(answers)

    def calculate_results(self, raw_answers: Mapping[str, Any]) -> QuizResult:
        """Scores a raw answer set. Missing answers are scored at their midpoint."""
        snapshot = self.build_snapshot(raw_answers)
        return scorer.calculate_results(self.questions, snapshot, self.default_user_name)

    def generate_report(self, raw_answers: Mapping[str, Any]) -> EnergyReport:
        return results_generator.generate_report(self.calculate_results(raw_answers))
