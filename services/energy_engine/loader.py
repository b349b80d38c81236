import logging
from typing import Any, Dict

import yaml

from services.energy_engine.models import ChoiceQuestion, QuizCatalog, TextQuestion

logger = logging.getLogger(__name__)

class CatalogValidationError(ValueError):
    """Custom exception for catalog validation errors not covered by Pydantic."""
    pass

def load_catalog_data(data: Dict[str, Any]) -> QuizCatalog:
    """
    Validates the raw dictionary data against the QuizCatalog model
    and performs additional custom validations.
    """
    # Schema problems surface as pydantic's ValidationError
    catalog = QuizCatalog.model_validate(data)

    section_ids = set()
    question_ids = set()
    name_questions = []

    for section in catalog.sections:
        if section.id in section_ids:
            raise CatalogValidationError(f"Duplicate section ID found: {section.id}")
        section_ids.add(section.id)

        for question in section.questions:
            # Answers are keyed by question ID alone, so IDs must be unique across sections.
            if question.id in question_ids:
                raise CatalogValidationError(f"Duplicate question ID '{question.id}' in section '{section.id}'")
            question_ids.add(question.id)

            if isinstance(question, TextQuestion) and question.is_name:
                name_questions.append(question.id)

            if isinstance(question, ChoiceQuestion):
                option_values = set()
                for option in question.options:
                    if option.value in option_values:
                        raise CatalogValidationError(
                            f"Duplicate option value '{option.value}' in question '{question.id}' (section '{section.id}')"
                        )
                    option_values.add(option.value)

                if not any(weight > 0 for option in question.options for weight in option.weights.values()):
                    raise CatalogValidationError(
                        f"Question '{question.id}' is scored but none of its options carries a weight"
                    )

    if len(name_questions) > 1:
        raise CatalogValidationError(f"More than one name question defined: {name_questions}")

    logger.debug(f"Validated catalog version {catalog.version}: {len(section_ids)} sections, {len(question_ids)} questions")
    return catalog

def load_catalog_from_file(file_path: str) -> QuizCatalog:
    """
    Loads a question catalog from a YAML file, validates it,
    and returns a QuizCatalog object.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise CatalogValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise CatalogValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise CatalogValidationError(f"YAML file is empty or invalid: {file_path}")
    if not isinstance(data, dict):
        raise CatalogValidationError(f"YAML file must contain a mapping at the top level: {file_path}")

    logger.info(f"Loading question catalog from {file_path}")
    return load_catalog_data(data)
