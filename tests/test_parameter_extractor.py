import pytest

from app.core.exceptions import ExtractionParseError
from app.services.parameter_extractor import (
    coerce_text,
    extract_parameters,
    normalize_amount,
    split_techstack,
)
from app.utils.llm_json import Parsed, ParseFailed, parse_json_lenient


@pytest.mark.parametrize("raw, expected", [
    (0, 10),
    (-5, 10),
    ("abc", 10),
    (None, 10),
    (75, 50),
    (7, 7),
    (50, 50),
    (1, 1),
    ("12", 12),
    ("7 questions", 7),
    ("7.9", 7),
    (8.0, 8),
    (True, 10),
    ("", 10),
])
def test_normalize_amount(raw, expected):
    assert normalize_amount(raw) == expected


def test_normalize_amount_honours_configured_bounds():
    assert normalize_amount(None, default=3, maximum=20) == 3
    assert normalize_amount(30, default=3, maximum=20) == 20


@pytest.mark.parametrize("text, expected", [
    ("React, Node.js ,, Go", ["React", "Node.js", "Go"]),
    ("Go,Postgres", ["Go", "Postgres"]),
    ("", []),
    (" , ,", []),
    ("Python", ["Python"]),
])
def test_split_techstack(text, expected):
    assert split_techstack(text) == expected


def test_extract_parameters_reads_and_trims_fields():
    params = extract_parameters(Parsed({
        "role": "  Backend Engineer ",
        "level": "Senior",
        "techstack": "Go, Postgres",
        "type": " technical ",
        "amount": "5",
    }))
    assert params.role == "Backend Engineer"
    assert params.level == "Senior"
    assert params.techstack == "Go, Postgres"
    assert params.type == "technical"
    assert params.amount == 5


def test_extract_parameters_defaults():
    params = extract_parameters(Parsed({"role": None, "amount": None}))
    assert params.role == ""
    assert params.level == ""
    assert params.techstack == ""
    assert params.type == "mixed"
    assert params.amount == 10


def test_extract_parameters_coerces_non_string_fields():
    params = extract_parameters(Parsed({"level": 3, "amount": 75}))
    assert params.level == "3"
    assert params.amount == 50


def test_extract_parameters_from_noisy_model_output():
    result = parse_json_lenient('Sure! {"role": "Data Engineer", "amount": 4} Let me know.')
    params = extract_parameters(result)
    assert params.role == "Data Engineer"
    assert params.amount == 4


@pytest.mark.parametrize("result", [
    ParseFailed("no JSON value found"),
    Parsed("just a string"),
    Parsed(None),
])
def test_extract_parameters_requires_an_object(result):
    with pytest.raises(ExtractionParseError) as exc_info:
        extract_parameters(result)
    assert "Failed to parse extracted variables" in exc_info.value.message


def test_extract_parameters_treats_array_as_object_without_fields():
    params = extract_parameters(parse_json_lenient('[{"role": "QA"}]'))
    assert params.role == ""
    assert params.type == "mixed"
    assert params.amount == 10


def test_extract_parameters_joins_techstack_array():
    params = extract_parameters(Parsed({"techstack": ["Go", "Postgres"], "role": ["Backend", "Engineer"]}))
    assert params.techstack == "Go,Postgres"
    assert params.role == "Backend,Engineer"
    assert split_techstack(params.techstack) == ["Go", "Postgres"]


@pytest.mark.parametrize("value, expected", [
    (None, ""),
    (True, "true"),
    (False, "false"),
    (1.0, "1"),
    (2.5, "2.5"),
    (7, "7"),
    (float("inf"), "Infinity"),
    (float("-inf"), "-Infinity"),
    (["a", 1, None, True], "a,1,,true"),
    ([["a", "b"], "c"], "a,b,c"),
    ({"k": "v"}, '{"k": "v"}'),
    ("  text ", "  text "),
])
def test_coerce_text(value, expected):
    assert coerce_text(value) == expected
