import json
import logging
import re

import json5
import demjson3

logger = logging.getLogger(__name__)


def strip_code_fences(response_text: str) -> str:
    """Remove ```json fences and any prose around the outermost JSON object."""
    text = response_text.strip()

    if text.startswith("```json"):
        text = text.replace("```json", "").replace("```", "").strip()
    elif text.startswith("```"):
        text = text.replace("```", "").strip()

    # Extract JSON from response if it's wrapped in text
    if not text.startswith("{"):
        start_idx = text.find("{")
        end_idx = text.rfind("}")
        if start_idx != -1 and end_idx > start_idx:
            text = text[start_idx : end_idx + 1]

    return text


# JSON Repair and Parsing Function
def repair_and_parse_json(response_text: str) -> dict:
    """
    Multi-layered JSON parsing with auto-repair capabilities.

    Attempts to parse JSON through multiple strategies:
    1. Standard json.loads()
    2. Clean common issues (trailing commas, comments)
    3. json5 parser (tolerates comments and trailing commas)
    4. demjson3 parser (auto-repairs many errors)

    Markdown fences and surrounding prose are stripped before layer 1.

    Args:
        response_text: Raw text response from Claude

    Returns:
        Parsed dictionary

    Raises:
        ValueError: If all parsing attempts fail or the payload is not an object
    """
    original_text = response_text
    response_text = strip_code_fences(response_text)
    errors = []

    # Layer 1: Try standard JSON parser first
    try:
        return _require_object(json.loads(response_text))
    except json.JSONDecodeError as e:
        errors.append(f"Standard JSON: {str(e)}")
        logger.debug(f"Layer 1 failed: {str(e)}")

    # Layer 2: Clean common Claude JSON mistakes
    try:
        cleaned = response_text

        # Remove trailing commas before closing braces/brackets
        cleaned = re.sub(r",(\s*[}\]])", r"\1", cleaned)

        # Remove single-line comments (// ...) that start a line or follow JSON punctuation
        cleaned = re.sub(r"(^\s*|[,{\[]\s*)//[^\n]*", r"\1", cleaned, flags=re.MULTILINE)

        # Remove multi-line comments (/* ... */)
        cleaned = re.sub(r"/\*.*?\*/", "", cleaned, flags=re.DOTALL)

        result = _require_object(json.loads(cleaned))
        logger.info("JSON parsed after cleaning")
        return result
    except json.JSONDecodeError as e:
        errors.append(f"Cleaned JSON: {str(e)}")
        logger.debug(f"Layer 2 failed: {str(e)}")

    # Layer 3: Try json5 (tolerates trailing commas and comments)
    try:
        result = _require_object(json5.loads(response_text))
        logger.info("JSON parsed with json5")
        return result
    except Exception as e:
        errors.append(f"JSON5: {str(e)}")
        logger.debug(f"Layer 3 failed: {str(e)}")

    # Layer 4: Try demjson3 (auto-repairs many JSON errors)
    try:
        result = _require_object(demjson3.decode(response_text))
        logger.info("JSON parsed with demjson3")
        return result
    except Exception as e:
        errors.append(f"DemJSON: {str(e)}")
        logger.debug(f"Layer 4 failed: {str(e)}")

    logger.error(
        f"JSON parsing failed after all layers: {'; '.join(errors)}. "
        f"Response preview: {original_text[:200]!r}"
    )
    raise ValueError(
        f"Failed to parse JSON after all attempts. "
        f"Errors: {'; '.join(errors[:2])}."
    )


def _require_object(result) -> dict:
    if not isinstance(result, dict):
        raise json.JSONDecodeError(
            f"Expected a JSON object, got {type(result).__name__}", "", 0
        )
    return result
