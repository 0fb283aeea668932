"""
JSON Schema for the extraction output.

EXTRACTION_OUTPUT_SCHEMA: what build_extraction_output() produces and
what downstream consumers (autolinker, indexer, moderation) may rely on.
"""
from tweet_text.config.constants import PATTERN_VERSION

ENTITY_KINDS = ["hashtag", "mention", "list_mention", "url", "cashtag"]

OFFSET_UNITS = ["codepoint", "utf16"]

EXTRACTION_OUTPUT_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": [
        "pattern_version",
        "text_length",
        "offset_unit",
        "has_rtl",
        "has_invalid_characters",
        "entities",
    ],
    "properties": {
        "pattern_version": {"type": "string", "const": PATTERN_VERSION},
        "text_length": {"type": "integer", "minimum": 0},
        "offset_unit": {"type": "string", "enum": OFFSET_UNITS},
        "has_rtl": {"type": "boolean"},
        "has_invalid_characters": {"type": "boolean"},
        "entities": {
            "type": "array",
            "items": {
                "type": "object",
                "additionalProperties": False,
                "required": ["kind", "start", "end", "text", "value", "subgroups"],
                "properties": {
                    "kind": {"type": "string", "enum": ENTITY_KINDS},
                    "start": {"type": "integer", "minimum": 0},
                    "end": {"type": "integer", "minimum": 1},
                    "text": {"type": "string", "minLength": 1},
                    "value": {"type": "string", "minLength": 1},
                    "subgroups": {
                        "type": "object",
                        "additionalProperties": {"type": ["string", "null"]},
                    },
                },
            },
        },
    },
}
