import pytest

from tekerectc.errors import RegexCaptureError
from tekerectc.testcases import (
    TestCase,
    format_vec_str,
    get_input_cases,
    get_output_cases,
    get_test_cases,
    parse_input_case,
    parse_output_case,
    pickup_test_case,
    save_test_cases,
)


def _paragraph(line, data):
    return (
        '<p class="m-0">\n'
        f"    {line}\n"
        f'    <span class="judge-test-button" data-case="{data}">\n'
        '        <i class="far fa-play-circle"></i>\n'
        "    </span>\n"
        "</p>\n"
    )


def _page(rows):
    return "".join(_paragraph(line, data) for line, data in rows)


SPACED_ROWS = [
    ("getLowestTemperature(3,2) --> 1", "[3,2]"),
    ("getLowestTemperature(2, 10) --> -8", "[2,10]"),
    ("getLowestTemperature( 18,5 ) --> 13", "[18,5]"),
]

COMPACT_ROWS = [
    ("getLowestTemperature(3,2) --> 1", "[3,2]"),
    ("getLowestTemperature(2,10) --> -8", "[2,10]"),
    ("getLowestTemperature(18,5) --> 13", "[18,5]"),
]

HTML_SPACED = _page(SPACED_ROWS)
HTML_COMPACT = _page(COMPACT_ROWS)


def test_format_vec_str():
    assert format_vec_str(["1", "2", "3"]) == "1 2 3"


def test_get_test_cases():
    assert get_test_cases(HTML_SPACED) == [
        TestCase(["3", "2"], "1"),
        TestCase(["2", "10"], "-8"),
        TestCase(["18", "5"], "13"),
    ]


def test_get_output_test_cases():
    assert get_output_cases(pickup_test_case(HTML_SPACED)) == ["1", "-8", "13"]


def test_get_input_test_cases():
    assert get_input_cases(pickup_test_case(HTML_SPACED)) == ["3,2", "2,10", "18,5"]


def test_parse_output_case():
    assert parse_output_case("getLowestTemperature(3,2) --> 1") == "1"


def test_parse_input_case():
    assert parse_input_case("getLowestTemperature(3,2) --> 1") == "3,2"


def test_pickup_test_case():
    assert pickup_test_case(HTML_COMPACT) == [line for line, _ in COMPACT_ROWS]


def test_pickup_ignores_paragraphs_without_case_span():
    html = "<p>getLowestTemperature(1,1) --> 0</p><p>text <span>x</span></p>"
    assert pickup_test_case(html) == []


def test_parse_input_case_missing_parens():
    with pytest.raises(RegexCaptureError):
        parse_input_case("no arguments here --> 1")


def test_parse_output_case_missing_arrow():
    with pytest.raises(RegexCaptureError):
        parse_output_case("getLowestTemperature(3,2)")


def test_get_test_cases_bad_format_raises():
    html = '<p>broken line <span data-case="[1]"></span></p>'
    with pytest.raises(RegexCaptureError):
        get_test_cases(html)


def test_save_test_cases_writes_files(tmp_path):
    cases = get_test_cases(HTML_SPACED)
    save_test_cases(cases, tmp_path / "testcase")
    directory = tmp_path / "testcase"
    assert (directory / "testcase-1.in").read_text(encoding="utf-8") == "3 2"
    assert (directory / "testcase-1.out").read_text(encoding="utf-8") == "1"
    assert (directory / "testcase-2.in").read_text(encoding="utf-8") == "2 10"
    assert (directory / "testcase-3.out").read_text(encoding="utf-8") == "13"
    assert len(list(directory.iterdir())) == 2 * len(cases)


def test_save_test_cases_empty_creates_nothing(tmp_path):
    save_test_cases([], tmp_path / "testcase")
    assert not (tmp_path / "testcase").exists()