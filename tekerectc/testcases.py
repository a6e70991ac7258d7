"""Extraction of test cases from a problem page and saving them to disk."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from bs4 import BeautifulSoup

from .errors import RegexCaptureError
from .files import save_to_file

_INPUT_PATTERN = re.compile(r"\(([^)]+)\)")
_OUTPUT_PATTERN = re.compile(r"--> (.+)\Z")

DEFAULT_DIRECTORY = "./testcase"


@dataclass
class TestCase:
    """One example: the call arguments and the expected result."""

    __test__ = False

    input: list[str] = field(default_factory=list)
    output: str = ""


def format_vec_str(values: Iterable[str]) -> str:
    """Join values with single spaces."""
    return " ".join(values)


def save_test_cases(
    test_cases: Iterable[TestCase], directory: str | Path = DEFAULT_DIRECTORY
) -> None:
    """Write each case as ``testcase-N.in`` and ``testcase-N.out`` in ``directory``."""
    base = Path(directory)
    for index, case in enumerate(test_cases, start=1):
        save_to_file(base / f"testcase-{index}.in", format_vec_str(case.input))
        save_to_file(base / f"testcase-{index}.out", case.output)


def pickup_test_case(html: str) -> list[str]:
    """Return the trimmed text of every paragraph holding a ``data-case`` span."""
    document = BeautifulSoup(html, "html.parser")
    return [
        p.get_text().strip()
        for p in document.find_all("p")
        if p.select("span[data-case]")
    ]


def parse_input_case(test_case: str) -> str:
    """Return the parenthesised arguments, each trimmed, joined by commas."""
    match = _INPUT_PATTERN.search(test_case)
    if match is None:
        raise RegexCaptureError()
    return ",".join(part.strip() for part in match.group(1).split(","))


def parse_output_case(test_case: str) -> str:
    """Return the text after ``--> `` at the end of the line."""
    match = _OUTPUT_PATTERN.search(test_case)
    if match is None:
        raise RegexCaptureError()
    return match.group(1)


def get_input_cases(test_cases: Iterable[str]) -> list[str]:
    """Parse the arguments of every case line."""
    return [parse_input_case(case) for case in test_cases]


def get_output_cases(test_cases: Iterable[str]) -> list[str]:
    """Parse the expected result of every case line."""
    return [parse_output_case(case) for case in test_cases]


def get_test_cases(html: str) -> list[TestCase]:
    """Extract all test cases from a problem page."""
    cases = []
    for line in pickup_test_case(html):
        inputs = [part.strip() for part in parse_input_case(line).split(",")]
        cases.append(TestCase(inputs, parse_output_case(line)))
    return cases