from __future__ import annotations

import json

import pytest

from ai_search.search.parse import ResultParseError, extract_json_array, parse_results


def test_extract_json_array_strips_prose_and_fences():
    content = 'Sure! Here you go:\n```json\n[{"title": "A"}]\n```\nEnjoy.'
    assert extract_json_array(content) == '[{"title": "A"}]'


def test_extract_json_array_without_brackets_returns_trimmed():
    assert extract_json_array('  {"a": 1}  ') == '{"a": 1}'


def test_parse_results_applies_defaults_per_element():
    content = "Results:\n" + json.dumps(
        [
            {"title": "T1", "url": "https://a.example", "snippet": "s1"},
            {"url": "https://b.example"},
            {"title": None, "snippet": 42},
            {},
        ]
    ) + "\nThat's all."
    res = parse_results(content)
    assert len(res) == 4
    assert res[0].title == "T1" and res[0].url == "https://a.example" and res[0].snippet == "s1"
    assert res[1].title == "Untitled" and res[1].snippet == ""
    assert res[2].title == "Untitled" and res[2].url == "https://example.com" and res[2].snippet == "42"
    assert (res[3].title, res[3].url, res[3].snippet) == ("Untitled", "https://example.com", "")


def test_parse_results_truncates_to_ten():
    items = [{"title": f"t{i}", "url": f"https://e.example/{i}", "snippet": ""} for i in range(15)]
    res = parse_results(json.dumps(items))
    assert len(res) == 10
    assert res[-1].title == "t9"


def test_parse_results_does_not_pad():
    res = parse_results('[{"title": "only one"}]')
    assert len(res) == 1


def test_parse_results_skips_non_objects():
    res = parse_results('[{"title": "a"}, "junk", 3, null, {"title": "b"}]')
    assert [r.title for r in res] == ["a", "b"]


def test_parse_results_coerces_scalars_like_json():
    res = parse_results('[{"title": true, "url": 1.0, "snippet": ["x"]}]')
    assert res[0].title == "true"
    assert res[0].url == "1"
    assert res[0].snippet == '["x"]'


@pytest.mark.parametrize(
    "content",
    [
        "",
        "   ",
        None,
        "no json here",
        "[not, valid]",
        '{"title": "a"}',
        "[{\"title\": NaN}]",
        "[{\"title\": \"a\", \"url\": -Infinity}]",
        "[" * 100000 + "]" * 100000,
    ],
)
def test_parse_results_rejects_bad_content(content):
    with pytest.raises(ResultParseError):
        parse_results(content)


def test_parse_results_empty_array_inside_object_yields_nothing():
    # bracket slicing finds the inner array
    assert parse_results('{"results": []}') == []
