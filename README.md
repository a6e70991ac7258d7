# tekerectc

A small local judge for programming exercises.

It does two things:

* **Extracts test cases** from the HTML of a problem page. Each paragraph
  that holds a `<span data-case="...">` and reads like
  `functionName(3, 2) --> 1` becomes a `TestCase`. The arguments go into
  `testcase-N.in`, separated by spaces. The expected result goes into
  `testcase-N.out`.
* **Judges a solution.** It runs a shell command once for each test case.
  The command gets the `.in` file on standard input. Its output, with one
  trailing newline removed and surrounding whitespace ignored, is compared
  with the `.out` file. Each case gets one verdict (`tekerectc.judge.Verdict`):
  * **AC**: Accepted.
  * **WA**: Wrong Answer. The input, the actual output and the expected
    output are printed.
  * **RE**: Runtime Error. The program exited with a non-zero status.
  * **TLE**: Time Limit Exceeded. The program ran for more than 3 seconds
    and was killed.

At the end the judge prints the number of cases that passed and failed, and
names the slowest case.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Usage

Put your test cases in a directory, `./testcase` by default. The entries in
the directory are sorted by name and paired in order, so `testcase-1.in`
goes with `testcase-1.out`. If the directory has an odd number of entries,
the last one is left out. Then run the judge:

```
tekerectc "python3 solution.py"
```

Options:

* `command`: the shell command that runs your solution. It is run with
  `sh -c`. The default is `bb ./tests/main.clj`.
* `-d DIRECTORY`, `--directory DIRECTORY`: the directory that holds the test
  case files. The default is `./testcase`.

To see the same help from the command itself:

```
tekerectc --help
```

If the test case directory cannot be read, the command prints a message and
exits with status 1. Otherwise it exits with status 0, even when some cases
fail. Read the printed summary to see the results.

The judge runs commands with `sh -c`, so it needs a POSIX-like system.

## Using it from Python

```python
from tekerectc.testcases import get_test_cases, save_test_cases
from tekerectc.judge import judge

with open("problem.html", encoding="utf-8") as page:
    cases = get_test_cases(page.read())

save_test_cases(cases, "testcase")
results = judge("python3 solution.py", "testcase")
print(sum(result.is_success for result in results), "passed")
```

`judge` returns a list of `JudgeResult` objects, one for each case. Each
one has `case_name`, `is_success`, `elapsed_time` (in seconds) and
`verdict`. To judge a single pair of files with your own time limit, call
`tekerectc.judge.judge_test(input_path, output_path, command_str, timeout)`.

`tekerectc.testcases` also has the steps that `get_test_cases` uses:

* `pickup_test_case` gets the text of each paragraph from the HTML.
* `parse_input_case` and `parse_output_case` split one line into its
  arguments and its expected result.

If a line is not in the expected format, these functions raise
`tekerectc.errors.RegexCaptureError`. `tekerectc.errors.handle_error`
prints a message that explains an error to standard error.

## Configuration

`tekerectc.env.read_env(key)` returns an environment variable. The first
time it is called, it loads the `.env` file found from the working
directory. If the variable is not set, it raises `KeyError`.

## What it does not do

* It does not download problem pages and does not log in to any site. You
  must save the page's HTML yourself and pass it to `get_test_cases`.
* The `tekerectc` command only judges. Test cases are extracted and saved
  through the Python functions above.
* It does not compile solutions. The command you give must run the program
  as it is.