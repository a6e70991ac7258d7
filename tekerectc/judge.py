"""Running a program against saved test cases and reporting verdicts."""

from __future__ import annotations

import enum
import os
import signal
import subprocess
import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from termcolor import colored

from .files import get_file_name, read_file

VERSION_INFO = "takerectc 1.0.0"
DEFAULT_DIRECTORY = "./testcase"
DEFAULT_TIMEOUT = 3.0

SUCCESS_LABEL = colored("SUCCESS", "green")
FAILURE_LABEL = colored("FAILURE", "red")
PASSED_LABEL = colored("passed", "green")
FAILED_LABEL = colored("failed", "red")
INFO_LABEL = colored("INFO", "blue")
AC_LABEL = colored("AC (Accepted)", "green")
WA_LABEL = colored("WA (Wrong Answer)", "red")
RE_LABEL = colored("RE (Runtime Error)", "yellow")
TLE_LABEL = colored("TLE (Time Limit Exceeded)", "yellow")
CE_LABEL = colored("CE (Compilation Error)", "red")

# A blank line, the separator rule and another blank line.
_SEPARATOR_BLOCK = "\n---------------------------\n"


class Verdict(enum.Enum):
    """Outcome of running one test case."""

    AC = "AC"
    WA = "WA"
    RE = "RE"
    TLE = "TLE"


@dataclass(frozen=True)
class TestFile:
    """A pair of input and expected-output files."""

    __test__ = False

    input_file: str
    output_file: str


@dataclass(frozen=True)
class JudgeResult:
    """Result of one test case; ``elapsed_time`` is in seconds."""

    case_name: str
    is_success: bool
    elapsed_time: float
    verdict: Verdict


def judge(command_str: str, directory: str | Path = DEFAULT_DIRECTORY) -> list[JudgeResult]:
    """Run ``command_str`` on every test case in ``directory`` and print a report."""
    test_files = create_testfile_list(directory)

    print(f"[{INFO_LABEL}] {VERSION_INFO}")
    print(f"[{INFO_LABEL}] {len(test_files)} cases found")
    print(f"[{INFO_LABEL}] judge start")
    print(_SEPARATOR_BLOCK)

    results = [
        judge_test(test_file.input_file, test_file.output_file, command_str)
        for test_file in test_files
    ]

    slowest_time = 0.0
    slowest_case = ""
    for result in results:
        if slowest_time < result.elapsed_time:
            slowest_time = result.elapsed_time
            slowest_case = result.case_name

    total = len(results)
    passed = sum(1 for result in results if result.is_success)

    print(f"[{INFO_LABEL}] end judge")
    print(f"[{INFO_LABEL}] slowest: {slowest_time:.6f} sec (for {slowest_case})")

    if passed == total:
        print(f"[{SUCCESS_LABEL}] test {PASSED_LABEL}: {passed}")
    elif passed > 0:
        print(
            f"[{FAILURE_LABEL}] test {PASSED_LABEL}: {passed} | "
            f"test {FAILED_LABEL}: {total - passed}"
        )
    else:
        print(f"[{FAILURE_LABEL}] test {FAILED_LABEL}: {total}")

    return results


def _kill(process: subprocess.Popen) -> None:
    if hasattr(os, "killpg"):
        try:
            os.killpg(process.pid, signal.SIGKILL)
            return
        except OSError:
            pass
    try:
        process.kill()
    except OSError:
        pass


def judge_test(
    input_path: str | Path,
    output_path: str | Path,
    command_str: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> JudgeResult:
    """Run ``command_str`` with the input file on stdin and compare its output."""
    start = time.perf_counter()

    case_name = get_file_name(input_path)
    print(f"[{INFO_LABEL}] {case_name}")

    input_contents = read_file(input_path)
    expected = read_file(output_path)
    actual = ""

    process = subprocess.Popen(
        ["sh", "-c", command_str],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        start_new_session=True,
    )
    try:
        stdout, _ = process.communicate(input_contents.encode("utf-8"), timeout=timeout)
    except subprocess.TimeoutExpired:
        _kill(process)
        process.communicate()
        verdict = Verdict.TLE
    else:
        if process.returncode != 0:
            verdict = Verdict.RE
        else:
            actual = trim_one_newline(stdout.decode("utf-8", errors="replace"))
            verdict = Verdict.AC if actual.strip() == expected.strip() else Verdict.WA

    elapsed = time.perf_counter() - start

    if verdict is Verdict.AC:
        print(f"[{INFO_LABEL}] time: {elapsed:.6f} sec")
        print(f"[{SUCCESS_LABEL}] {AC_LABEL}")
    elif verdict is Verdict.WA:
        print(f"[{INFO_LABEL}] time: {elapsed:.6f} sec")
        print(f"[{FAILURE_LABEL}] {WA_LABEL}")
        print(f"input:\n {input_contents}")
        print(f"output:\n {actual}")
        print()
        print(f"expected:\n {expected}")
    elif verdict is Verdict.RE:
        print(f"[{FAILURE_LABEL}] {RE_LABEL}")
    else:
        print(f"[{FAILURE_LABEL}] {TLE_LABEL}")
        message = colored(f"The program ran for more than {timeout:g} seconds.", "red")
        print(f"[{FAILURE_LABEL}] {message}")

    print(_SEPARATOR_BLOCK)

    return JudgeResult(case_name, verdict is Verdict.AC, elapsed, verdict)


def trim_one_newline(s: str) -> str:
    """Remove a single trailing newline, if there is one."""
    return s[:-1] if s.endswith("\n") else s


def create_testfile_list(path: str | Path) -> list[TestFile]:
    """Pair up the sorted entries of directory ``path`` into test files."""
    entries = sorted(str(entry) for entry in Path(path).iterdir())
    return conv_string_to_testfiles(entries)


def conv_string_to_testfiles(file_list: Iterable[str]) -> list[TestFile]:
    """Group consecutive paths into (input, output) pairs; a lone last path is dropped."""
    paths = iter(file_list)
    return [TestFile(input_file, output_file) for input_file, output_file in zip(paths, paths)]