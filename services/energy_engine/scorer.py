# services/energy_engine/scorer.py
# Turns an answer snapshot into dimension scores, composite indices,
# the Energy Alignment Score (EAS) and an archetype.

import logging
import math
from typing import Dict, Iterable, Mapping, Optional

from services.energy_engine.models import (
    Answer,
    Archetype,
    ChoiceAnswer,
    ChoiceQuestion,
    CompositeIndices,
    Dimension,
    DimensionScores,
    LikertAnswer,
    LikertQuestion,
    Keying,
    Question,
    QuizResult,
    TextAnswer,
    TextQuestion,
)

logger = logging.getLogger(__name__)

# --- Constants ---

LIKERT_MIN = 1
LIKERT_MAX = 5
SCORE_MIN = 0
SCORE_MAX = 100
NEUTRAL_SCORE = 50  # reported for a dimension no scored question touches

# Inclusive upper bound of each EAS bin, in ascending order
ARCHETYPE_BINS = [
    (25, Archetype.RESTING),
    (50, Archetype.AWAKENING),
    (75, Archetype.RISING),
    (100, Archetype.RADIANT),
]

DEFAULT_USER_NAME = "Friend"

# --- Helpers ---

def round_half_up(value: float) -> int:
    """Rounds .5 away from zero for non-negative values (42.5 -> 43)."""
    return int(math.floor(value + 0.5))

def clamp_score(value: int) -> int:
    return max(SCORE_MIN, min(SCORE_MAX, value))

def clamp_likert(value: int) -> int:
    clamped = max(LIKERT_MIN, min(LIKERT_MAX, value))
    if clamped != value:
        logger.debug(f"Likert value {value} clamped to {clamped}")
    return clamped

# --- Answer Normalizer ---

def max_contribution(question: Question) -> Dict[Dimension, float]:
    """Maximum attainable contribution of a question to each dimension it touches."""
    if isinstance(question, LikertQuestion):
        return {question.dimension: question.weight}
    if isinstance(question, ChoiceQuestion):
        maxima: Dict[Dimension, float] = {}
        for option in question.options:
            for dimension, weight in option.weights.items():
                maxima[dimension] = max(maxima.get(dimension, 0.0), weight)
        return maxima
    return {}

def normalize_answer(question: Question, answer: Optional[Answer]) -> Dict[Dimension, float]:
    """
    Converts one answer into a contribution vector over the dimensions.

    Never raises: a missing answer contributes the midpoint of the question's
    range, an unknown option contributes nothing, and likert values are clamped.
    """
    if isinstance(question, TextQuestion):
        return {}

    if answer is None:
        return {dimension: weight / 2 for dimension, weight in max_contribution(question).items()}

    if isinstance(question, LikertQuestion):
        if not isinstance(answer, LikertAnswer):
            logger.debug(f"Non-likert answer for likert question '{question.id}' treated as unanswered")
            return normalize_answer(question, None)
        value = clamp_likert(answer.value)
        if question.keyed == Keying.REVERSE:
            fraction = (LIKERT_MAX - value) / (LIKERT_MAX - LIKERT_MIN)
        else:
            fraction = (value - LIKERT_MIN) / (LIKERT_MAX - LIKERT_MIN)
        return {question.dimension: fraction * question.weight}

    # Single and categorical questions
    if not isinstance(answer, ChoiceAnswer):
        logger.debug(f"Non-choice answer for question '{question.id}' treated as unanswered")
        return normalize_answer(question, None)
    for option in question.options:
        if option.value == answer.value:
            return dict(option.weights)
    logger.debug(f"Unknown option '{answer.value}' for question '{question.id}' contributes nothing")
    return {dimension: 0.0 for dimension in max_contribution(question)}

# --- Dimension Aggregator ---

def aggregate_dimensions(questions: Iterable[Question], answers: Mapping[str, Answer]) -> DimensionScores:
    """Folds every scored question's contribution into 0-100 dimension scores."""
    totals = {dimension: 0.0 for dimension in Dimension}
    maxima = {dimension: 0.0 for dimension in Dimension}

    for question in questions:
        if isinstance(question, TextQuestion):
            continue
        for dimension, weight in max_contribution(question).items():
            maxima[dimension] += weight
        for dimension, contribution in normalize_answer(question, answers.get(question.id)).items():
            totals[dimension] += contribution

    scores = {}
    for dimension in Dimension:
        if maxima[dimension] <= 0:
            scores[dimension.value] = NEUTRAL_SCORE
        else:
            scores[dimension.value] = clamp_score(round_half_up(totals[dimension] / maxima[dimension] * 100))
    return DimensionScores(**scores)

# --- Index Calculator ---

def calculate_indices(dimensions: DimensionScores) -> CompositeIndices:
    bmh = round_half_up((dimensions.BB + (100 - dimensions.RO)) / 2)
    rci = round_half_up((dimensions.SS + dimensions.SP) / 2)
    ogi = round_half_up((100 - dimensions.SS) * 0.5 + dimensions.EO * 0.5)
    return CompositeIndices(BMH=clamp_score(bmh), RCI=clamp_score(rci), OGI=clamp_score(ogi))

# --- Alignment Scorer ---

def calculate_alignment_score(dimensions: DimensionScores) -> int:
    """Unweighted mean of the five dimensions with EO and RO inverted."""
    total = (
        dimensions.BB
        + (100 - dimensions.EO)
        + (100 - dimensions.RO)
        + dimensions.SP
        + dimensions.SS
    )
    return clamp_score(round_half_up(total / 5))

# --- Archetype Classifier ---

def classify_archetype(eas: int) -> Archetype:
    eas = clamp_score(eas)
    for upper_bound, archetype in ARCHETYPE_BINS:
        if eas <= upper_bound:
            return archetype
    return ARCHETYPE_BINS[-1][1]

# --- Full Pipeline ---

def extract_user_name(
    questions: Iterable[Question],
    answers: Mapping[str, Answer],
    default_user_name: str = DEFAULT_USER_NAME
) -> str:
    for question in questions:
        if isinstance(question, TextQuestion) and question.is_name:
            answer = answers.get(question.id)
            if isinstance(answer, TextAnswer) and answer.value.strip():
                return answer.value.strip()
            break
    return default_user_name

def calculate_results(
    questions: Iterable[Question],
    answers: Mapping[str, Answer],
    default_user_name: str = DEFAULT_USER_NAME
) -> QuizResult:
    """
    Runs the whole scoring pipeline over one answer snapshot.

    Args:
        questions: The scored catalog, in any order.
        answers: Question ID -> validated answer. Absent IDs are unanswered.
        default_user_name: Name reported when the name question is blank or missing.

    Returns:
        An immutable QuizResult.
    """
    questions = list(questions)
    dimensions = aggregate_dimensions(questions, answers)
    indices = calculate_indices(dimensions)
    eas = calculate_alignment_score(dimensions)
    archetype = classify_archetype(eas)

    logger.debug(f"Calculated dimensions={dimensions.model_dump()}, indices={indices.model_dump()}, eas={eas}, archetype={archetype.value}")
    return QuizResult(
        user_name=extract_user_name(questions, answers, default_user_name),
        eas=eas,
        dimensions=dimensions,
        indices=indices,
        archetype_key=archetype,
    )
