"""
Output Normalization: entities → serializable, schema-checked payload.

Converts the internal Entity list to the EXTRACTION_OUTPUT_SCHEMA format,
translating offsets to UTF-16 code units when the consumer indexes strings
that way (JavaScript, Java, .NET).
"""
import logging
from typing import List, Optional, Tuple

from jsonschema import validate

from tweet_text.config import settings
from tweet_text.config.constants import PATTERN_VERSION
from tweet_text.config.schemas import EXTRACTION_OUTPUT_SCHEMA, OFFSET_UNITS
from tweet_text.entity_extraction.offsets import to_code_unit_offsets, utf16_length
from tweet_text.entity_extraction.pipeline import extract_entities
from tweet_text.entity_extraction.validation import (
    contains_rtl,
    find_invalid_characters,
    has_invalid_characters,
)
from tweet_text.models.entity import Entity
from tweet_text.models.extraction_io import ExtractionOutput, ExtractionRequest

logger = logging.getLogger(__name__)


def translate_spans(text: str, entities: List[Entity], offset_unit: str) -> List[Tuple[int, int]]:
    """(start, end) of every entity in *offset_unit*, in one pass over *text*."""
    if offset_unit == "codepoint":
        return [(e.start, e.end) for e in entities]

    flat = [offset for e in entities for offset in (e.start, e.end)]
    translated = to_code_unit_offsets(text, flat)
    return list(zip(translated[0::2], translated[1::2]))


def build_extraction_output(
    text: str,
    entities: List[Entity],
    offset_unit: Optional[str] = None,
    validate_schema: Optional[bool] = None,
) -> dict:
    """
    Build the payload conforming to EXTRACTION_OUTPUT_SCHEMA.

    Args:
        text: The text the entities were extracted from.
        entities: Output of extract_entities().
        offset_unit: "codepoint" or "utf16". Defaults to settings.DEFAULT_OFFSET_UNIT.
        validate_schema: Check the payload with jsonschema.
                         Defaults to settings.VALIDATE_OUTPUT_SCHEMA.

    Returns:
        Output dict with entities and message-level flags.

    Raises:
        ValueError: unknown offset unit.
        jsonschema.ValidationError: payload violates the schema.
    """
    if offset_unit is None:
        offset_unit = settings.DEFAULT_OFFSET_UNIT
    if offset_unit not in OFFSET_UNITS:
        raise ValueError(f"offset_unit must be one of {OFFSET_UNITS}, got '{offset_unit}'")
    if validate_schema is None:
        validate_schema = settings.VALIDATE_OUTPUT_SCHEMA

    spans = translate_spans(text, entities, offset_unit)

    records = []
    for entity, (start, end) in zip(entities, spans):
        record = entity.to_dict()
        record["start"] = start
        record["end"] = end
        records.append(record)

    output = {
        "pattern_version": PATTERN_VERSION,
        "text_length": utf16_length(text) if offset_unit == "utf16" else len(text),
        "offset_unit": offset_unit,
        "has_rtl": contains_rtl(text),
        "has_invalid_characters": has_invalid_characters(text),
        "entities": records,
    }

    if validate_schema:
        validate(instance=output, schema=EXTRACTION_OUTPUT_SCHEMA)

    return output


def process_request(request: ExtractionRequest) -> ExtractionOutput:
    """Extract entities for one request and return the typed output."""
    entities = extract_entities(
        request.text,
        extract_url_without_protocol=request.extract_url_without_protocol,
    )
    output = build_extraction_output(request.text, entities, offset_unit=request.offset_unit)

    if output["has_invalid_characters"]:
        logger.warning(
            "Request text contains %d invalid control characters",
            len(find_invalid_characters(request.text)),
        )

    return ExtractionOutput.model_validate(output)
