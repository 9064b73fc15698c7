"""
Input shape checks run before any create or update reaches storage.

Create bodies must carry every mandatory field; update bodies may carry any
subset. Both reject unknown fields and wrongly typed values.
"""

import logging
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from pokedeck.models.descriptor import ResourceDescriptor
from pokedeck.models.errors import ValidationError

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


def validate_create(descriptor: ResourceDescriptor, payload: Any) -> dict[str, Any]:
    """
    Check a create body.

    Returns:
        Field values keyed by attribute name, defaults filled in.

    Raises:
        ValidationError: If the body is not an object or violates the schema.
    """
    model = _parse(descriptor.create_schema, payload)
    return model.model_dump()


def validate_update(descriptor: ResourceDescriptor, payload: Any) -> dict[str, Any]:
    """
    Check a partial update body.

    Returns:
        Only the fields present in the body, keyed by attribute name.

    Raises:
        ValidationError: If the body is not an object or violates the schema.
    """
    model = _parse(descriptor.update_schema, payload)
    return model.model_dump(exclude_unset=True)


def _parse(schema: type[BaseModel], payload: Any) -> BaseModel:
    if not isinstance(payload, dict):
        raise ValidationError(
            INVALID_BODY_MESSAGE,
            details=[{"field": "body", "message": "Body must be a JSON object", "type": "dict_type"}],
        )
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        details = [
            {
                "field": ".".join(str(loc) for loc in error["loc"]) or "body",
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        logger.info("Rejected %s body: %s", schema.__name__, details)
        raise ValidationError(INVALID_BODY_MESSAGE, details=details) from exc
