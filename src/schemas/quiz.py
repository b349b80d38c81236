from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, Field

class QuizSubmission(BaseModel):
    # question_id → answer; int for likert questions, str otherwise. null means unanswered.
    answers: Dict[str, Optional[Union[int, str]]] = Field(default_factory=dict)

class QuizCatalogResponse(BaseModel):
    version: str
    sections: List[Dict[str, Any]]
