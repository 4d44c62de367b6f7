import pytest
from pyparsing import ParseException

from pegshell import Job, Pipeline, parse_script_strict
from pegshell.exceptions import ParseError
from pegshell.grammar import COMMENT, JOB, JOB_ENDING, PIPELINE, REDIRECTION, UNUSED
from pegshell.words import WORD


def test_word_does_not_skip_leading_whitespace():
    with pytest.raises(ParseException):
        WORD.parse_string(" abc")


def test_word_prefers_quoted_alternative():
    assert WORD.parse_string("'a b'").as_list() == ["a b"]
    assert WORD.parse_string("''").as_list() == ["''"]


def test_comment_runs_to_end_of_line():
    assert COMMENT.parse_string("# a ; b\nnext").as_list() == ["# a ; b"]


def test_unused_is_whitespace_then_optional_comment():
    assert UNUSED.parse_string(" \t# note").as_list() == [" \t", "# note"]
    assert UNUSED.parse_string("#only").as_list() == ["#only"]
    with pytest.raises(ParseException):
        UNUSED.parse_string("word")


@pytest.mark.parametrize("text", [";", "\n", "\r"])
def test_job_ending(text):
    assert JOB_ENDING.parse_string(text).as_list() == [text]


def test_job_builds_job_node():
    (job,) = JOB.parse_string("grep -v x &")
    assert job == Job(command="grep", args=["grep", "-v", "x"], background=True)


def test_job_does_not_consume_trailing_whitespace():
    result = JOB.parse_string("ls -l  > out")
    assert result[0].args == ["ls", "-l"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("< in > out", ("in", "out")),
        ("> out < in", ("in", "out")),
        ("<in", ("in", None)),
        (">out", (None, "out")),
        ("", (None, None)),
    ],
)
def test_redirection_yields_stdin_stdout_pair(text, expected):
    assert REDIRECTION.parse_string(text)[0] == expected


def test_redirection_falls_back_to_empty_alternative():
    assert REDIRECTION.parse_string("| cat")[0] == (None, None)


def test_pipeline_builds_pipeline_node():
    (pipeline,) = PIPELINE.parse_string("  a | b c > out # done")
    assert pipeline == Pipeline(
        jobs=[Job.from_words(["a"]), Job.from_words(["b", "c"])],
        stdout_file="out",
    )


def test_strict_error_carries_location_and_reason():
    with pytest.raises(ParseError) as exc:
        parse_script_strict("echo ok\n  cat |\n")
    error = exc.value
    assert error.line == 2
    assert error.column >= 1
    assert error.position > len("echo ok\n")
    assert error.reason
    assert str(error).startswith("Syntax error at line 2, column ")
