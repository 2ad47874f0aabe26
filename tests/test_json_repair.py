"""
Tests for JSON repair functionality
"""
import pytest

from utils.parsing.json import repair_and_parse_json, strip_code_fences

test_cases = [
    ("Valid JSON", '{"companyName": "Acme", "personas": [{"title": "CFO"}]}'),
    ("Trailing comma", '{"companyName": "Acme", "personas": [{"title": "CFO"},],}'),
    (
        "Single-line comment",
        '''{"companyName": "Acme", // the brand name
"positioningAssessmentOutput": "CLEAR: ok"}''',
    ),
    ("Multi-line comment", '{"companyName": "Acme", /* comment */ "positioningAssessmentOutput": "CLEAR: ok"}'),
    ("Markdown code block", '```json\n{"companyName": "Acme"}\n```'),
    ("Prose around object", 'Here is the analysis:\n{"companyName": "Acme"}\nLet me know!'),
    ("Single quotes", "{'companyName': 'Acme'}"),
]


@pytest.mark.parametrize("name,text", test_cases, ids=[name for name, _ in test_cases])
def test_repair_and_parse_json(name, text):
    result = repair_and_parse_json(text)

    assert result["companyName"] == "Acme"


def test_urls_survive_comment_cleaning():
    text = '{"companyName": "Acme", "reportHtml": "<a href=\\"https://acme.io\\">site</a>",}'

    result = repair_and_parse_json(text)

    assert result["reportHtml"] == '<a href="https://acme.io">site</a>'


def test_unparsable_text_raises_value_error():
    with pytest.raises(ValueError):
        repair_and_parse_json("I could not analyze that website, sorry.")


def test_non_object_json_is_rejected():
    with pytest.raises(ValueError):
        repair_and_parse_json("[1, 2, 3]")


def test_strip_code_fences():
    assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'
