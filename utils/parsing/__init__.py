# Parsing subpackage - JSON repair for Claude responses
from .json import repair_and_parse_json, strip_code_fences

__all__ = [
    "repair_and_parse_json",
    "strip_code_fences",
]
