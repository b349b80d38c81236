import copy

import pytest

from services.energy_engine.definitions import QUIZ_CATALOG
from services.energy_engine.engine import EnergyQuizEngine

LIKERT_IDS = [
    "body-q1", "body-q2",
    "emotions-q1", "emotions-q2",
    "mind-q1", "mind-q2",
    "spirit-q1", "spirit-q2",
    "support-q1", "support-q2",
]

# Options that maximise BB/SP/SS and leave EO/RO at zero
HEALTHIEST_CHOICES = {
    "body-q3": "deep",
    "emotions-q3": "honest",
    "mind-q3": "clear",
    "spirit-q3": "daily",
    "support-q3": "ask-for-help",
}

# Options that leave BB/SP/SS at zero and maximise EO/RO
MOST_DEPLETED_CHOICES = {
    "body-q3": "barely",
    "emotions-q3": "overwhelmed",
    "mind-q3": "looping",
    "spirit-q3": "never",
    "support-q3": "give-more",
}


@pytest.fixture(scope="session")
def engine() -> EnergyQuizEngine:
    """Engine loaded with the built-in catalog."""
    return EnergyQuizEngine()


@pytest.fixture
def catalog_data() -> dict:
    # Deep copy so tests can mutate freely
    return copy.deepcopy(QUIZ_CATALOG)


@pytest.fixture
def healthiest_answers() -> dict:
    answers = {qid: 5 for qid in LIKERT_IDS}
    answers.update(HEALTHIEST_CHOICES)
    answers["name"] = "Asha"
    return answers


@pytest.fixture
def most_depleted_answers() -> dict:
    answers = {qid: 1 for qid in LIKERT_IDS}
    answers.update(MOST_DEPLETED_CHOICES)
    answers["name"] = "Asha"
    return answers
