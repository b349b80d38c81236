from types import MappingProxyType

import pytest
import yaml

from services.energy_engine.engine import EnergyQuizEngine
from services.energy_engine.loader import load_catalog_data
from services.energy_engine.models import (
    Archetype,
    ChoiceAnswer,
    InvalidSubmissionError,
    LikertAnswer,
    TextAnswer,
)

# --- Catalog Access ---

def test_get_questions_preserves_presentation_order(engine):
    catalog = engine.get_questions()
    assert catalog["version"] == engine.catalog.version
    assert [s["id"] for s in catalog["sections"]] == ["about", "body", "emotions", "mind", "spirit", "support"]
    body = catalog["sections"][1]
    assert [q["id"] for q in body["questions"]] == ["body-q1", "body-q2", "body-q3"]
    assert body["questions"][0]["dimension"] == "BB"
    assert body["questions"][2]["options"][0]["value"] == "deep"

def test_every_question_is_indexed(engine):
    assert len(engine.questions) == 16
    assert set(engine.question_map) == {q.id for q in engine.questions}

def test_engine_accepts_prebuilt_catalog(catalog_data):
    catalog_data["version"] = "9.9.9"
    engine = EnergyQuizEngine(catalog=load_catalog_data(catalog_data))
    assert engine.catalog.version == "9.9.9"

def test_engine_loads_catalog_from_yaml(tmp_path, catalog_data):
    catalog_data["version"] = "2.0.0-yaml"
    filepath = tmp_path / "catalog.yml"
    with open(filepath, 'w') as f:
        yaml.dump(catalog_data, f, allow_unicode=True)

    engine = EnergyQuizEngine(catalog_path=str(filepath))
    assert engine.catalog.version == "2.0.0-yaml"
    assert engine.calculate_results({}).eas == 50

# --- Snapshot Building ---

def test_build_snapshot_types_each_answer(engine):
    snapshot = engine.build_snapshot({"name": "Asha", "body-q1": 4, "body-q3": "light"})
    assert snapshot["name"] == TextAnswer(value="Asha")
    assert snapshot["body-q1"] == LikertAnswer(value=4)
    assert snapshot["body-q3"] == ChoiceAnswer(value="light")

def test_build_snapshot_is_read_only(engine):
    snapshot = engine.build_snapshot({"body-q1": 4})
    assert isinstance(snapshot, MappingProxyType)
    with pytest.raises(TypeError):
        snapshot["body-q1"] = LikertAnswer(value=1)

def test_build_snapshot_drops_unknown_ids_and_nulls(engine):
    snapshot = engine.build_snapshot({"not-a-question": 3, "body-q1": None, "body-q2": 2})
    assert dict(snapshot) == {"body-q2": LikertAnswer(value=2)}

def test_numeric_string_is_accepted_for_likert(engine):
    assert engine.build_snapshot({"body-q1": "4"})["body-q1"] == LikertAnswer(value=4)

@pytest.mark.parametrize("question_id, value", [
    ("body-q1", "very much"),
    ("body-q3", 3),
    ("name", 42),
])
def test_mismatched_payload_raises(engine, question_id, value):
    with pytest.raises(InvalidSubmissionError) as excinfo:
        engine.build_snapshot({question_id: value})
    assert f"'{question_id}'" in str(excinfo.value)

# --- Scoring Scenarios ---

def test_fully_aligned_respondent_is_radiant(engine, healthiest_answers):
    result = engine.calculate_results(healthiest_answers)
    assert result.user_name == "Asha"
    assert result.dimensions.model_dump() == {"BB": 100, "EO": 0, "RO": 0, "SP": 100, "SS": 100}
    assert result.eas == 100
    assert (result.indices.BMH, result.indices.RCI, result.indices.OGI) == (100, 100, 0)
    assert result.archetype_key == Archetype.RADIANT

def test_fully_depleted_respondent_is_resting(engine, most_depleted_answers):
    result = engine.calculate_results(most_depleted_answers)
    assert result.dimensions.model_dump() == {"BB": 0, "EO": 100, "RO": 100, "SP": 0, "SS": 0}
    assert result.eas == 0
    assert (result.indices.BMH, result.indices.RCI, result.indices.OGI) == (0, 0, 100)
    assert result.archetype_key == Archetype.RESTING

def test_empty_submission_scores_neutral(engine):
    result = engine.calculate_results({})
    assert result.user_name == "Friend"
    assert result.dimensions.model_dump() == {"BB": 50, "EO": 50, "RO": 50, "SP": 50, "SS": 50}
    assert result.eas == 50
    # 50 sits at the top of the 26-50 band
    assert result.archetype_key == Archetype.AWAKENING

def test_single_answer_moves_only_its_dimension(engine):
    result = engine.calculate_results({"body-q1": 5})
    # BB: (1 + 0.5 + 1 + 0.25) / 4.5
    assert result.dimensions.model_dump() == {"BB": 61, "EO": 50, "RO": 50, "SP": 50, "SS": 50}
    assert result.eas == 52
    assert result.indices.BMH == 56
    assert result.indices.RCI == 50
    assert result.indices.OGI == 50
    assert result.archetype_key == Archetype.RISING

def test_out_of_range_likert_is_clamped(engine):
    assert engine.calculate_results({"body-q1": 9}).dimensions.BB == 61
    assert engine.calculate_results({"body-q1": -3}).dimensions.BB == 39

def test_unknown_option_scores_zero_for_that_question(engine):
    # 0.5 + 0.5 + 0 + 0.25 out of 4.5
    assert engine.calculate_results({"body-q3": "coma"}).dimensions.BB == 28

def test_reverse_keyed_items_raise_distress_when_disagreeing(engine):
    assert engine.calculate_results({"emotions-q1": 1}).dimensions.EO == 59
    assert engine.calculate_results({"emotions-q1": 5}).dimensions.EO == 41

def test_raising_a_positive_item_never_lowers_its_dimension(engine):
    scores = [engine.calculate_results({"spirit-q1": v}).dimensions.SP for v in range(1, 6)]
    assert scores == sorted(scores)
    assert scores[0] < scores[-1]

def test_scoring_is_deterministic(engine, healthiest_answers):
    healthiest_answers["body-q2"] = 3
    healthiest_answers["mind-q3"] = "busy"
    first = engine.calculate_results(healthiest_answers)
    second = engine.calculate_results(dict(reversed(list(healthiest_answers.items()))))
    assert first == second

def test_custom_default_user_name():
    engine = EnergyQuizEngine(default_user_name="Lovely")
    assert engine.calculate_results({"name": "  "}).user_name == "Lovely"

def test_generate_report_wraps_result(engine, healthiest_answers):
    report = engine.generate_report(healthiest_answers)
    assert report.result == engine.calculate_results(healthiest_answers)
    assert report.profile.name == "The Radiant Phase"

def test_changing_only_the_name_changes_only_user_name(engine, healthiest_answers):
    first = engine.calculate_results(healthiest_answers)
    healthiest_answers["name"] = "Meera"
    second = engine.calculate_results(healthiest_answers)
    assert second.user_name == "Meera"
    assert second.model_dump(exclude={"user_name"}) == first.model_dump(exclude={"user_name"})

@pytest.mark.parametrize("dropped", [["body-q1"], ["support-q3", "mind-q2"], ["name", "emotions-q3", "spirit-q1", "spirit-q2"]])
def test_partial_submissions_stay_in_range(engine, most_depleted_answers, dropped):
    for question_id in dropped:
        del most_depleted_answers[question_id]
    result = engine.calculate_results(most_depleted_answers)
    scores = list(result.dimensions.model_dump().values()) + list(result.indices.model_dump().values())
    assert all(0 <= score <= 100 for score in scores + [result.eas])
    assert result.archetype_key in set(Archetype)
