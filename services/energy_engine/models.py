from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# --- Enumerations ---

class Dimension(str, Enum):
    BB = "BB"  # Body Battery
    EO = "EO"  # Emotional Overwhelm (negatively keyed)
    RO = "RO"  # Rumination / Overthinking (negatively keyed)
    SP = "SP"  # Spirit
    SS = "SS"  # Support System

NEGATIVELY_KEYED_DIMENSIONS = frozenset({Dimension.EO, Dimension.RO})

class QuestionType(str, Enum):
    TEXT = "text"
    SINGLE = "single"
    CATEGORICAL = "categorical"
    LIKERT = "likert"

class Keying(str, Enum):
    POSITIVE = "positive"  # agreeing raises the dimension
    REVERSE = "reverse"    # agreeing lowers the dimension

class Archetype(str, Enum):
    """The four ordered phases, lowest alignment first."""
    RESTING = "resting"
    AWAKENING = "awakening"
    RISING = "rising"
    RADIANT = "radiant"

# --- Question Catalog ---

Weight = Annotated[float, Field(ge=0)]

class QuestionOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    weights: Dict[Dimension, Weight] = Field(default_factory=dict)

class TextQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: Literal["text"]
    text: str
    placeholder: Optional[str] = None
    is_name: bool = False  # answer is reported as the respondent's name

class LikertQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: Literal["likert"]
    text: str
    dimension: Dimension
    weight: float = Field(default=1.0, gt=0)
    keyed: Keying = Keying.POSITIVE

class ChoiceQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: Literal["single", "categorical"]
    text: str
    options: List[QuestionOption] = Field(..., min_length=1)

Question = Annotated[
    Union[TextQuestion, LikertQuestion, ChoiceQuestion],
    Field(discriminator="type"),
]

class QuizSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    subtitle: str = ""
    icon: str = ""
    questions: List[Question] = Field(..., min_length=1)

class QuizCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    sections: List[QuizSection] = Field(..., min_length=1)

# --- Answers ---
# One payload type per question kind; built by the engine from raw submissions.

class TextAnswer(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    value: str

class ChoiceAnswer(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["choice"] = "choice"
    value: str

class LikertAnswer(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["likert"] = "likert"
    value: int

Answer = Union[TextAnswer, ChoiceAnswer, LikertAnswer]

# --- Scoring Results ---

Score = Annotated[int, Field(ge=0, le=100)]

class DimensionScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    BB: Score
    EO: Score
    RO: Score
    SP: Score
    SS: Score

    def get(self, dimension: Dimension) -> int:
        return getattr(self, dimension.value)

class CompositeIndices(BaseModel):
    model_config = ConfigDict(frozen=True)

    BMH: Score  # Body-Mind Harmony
    RCI: Score  # Receiving Capacity
    OGI: Score  # Over-Giving Index, higher means more over-giving

class QuizResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_name: str
    eas: Score
    dimensions: DimensionScores
    indices: CompositeIndices
    archetype_key: Archetype

# --- Report Content ---

class ArchetypeProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    oto_message: str

class CorePattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    narrative: str
    behaviors: List[str]
    root_cause: str

class ResetDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    practice: str

class StatusLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    css_class: str

class RankedDimension(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: Dimension
    name: str
    score: Score  # display score, EO and RO already inverted

class SnapshotTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    css_class: str

class EnergyReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: QuizResult
    status: StatusLevel
    status_message: str
    profile: ArchetypeProfile
    radar: List[RankedDimension]
    weakest: List[RankedDimension]
    strongest: RankedDimension
    snapshot_tags: List[SnapshotTag]
    core_pattern: CorePattern
    reset_plan: List[ResetDay]

# Custom Error Classes
class InvalidSubmissionError(ValueError):
    """Raised when an answer payload does not fit its question's kind."""
    pass

class ContentConfigurationError(Exception):
    """Raised when the archetype content tables do not cover every archetype."""
    pass
