"""Shell script grammar.

Roughly, in PEG notation::

    script      = (unused* newline)* pipeline ++ separator (newline unused*)* !.
                / unused* ** newline !.
    separator   = (job_ending+ unused*)+
    pipeline    = whitespace? job ++ pipe whitespace? redirection whitespace? comment?
    redirection = stdin whitespace? stdout?
                / stdout whitespace? stdin?
                / ""
    job         = word ++ whitespace (whitespace? "&")?
    unused      = whitespace comment? / comment
    job_ending  = ";" / newline

pyparsing's ``|`` (``MatchFirst``) is the ordered choice. Every element is
built without implicit whitespace skipping, so whitespace is only accepted
where a rule names it.
"""

from __future__ import annotations

from pyparsing import (
    Empty,
    Group,
    Literal,
    OneOrMore,
    Opt,
    ParseResults,
    Regex,
    StringEnd,
    Suppress,
    ZeroOrMore,
)

from .nodes import Job, Pipeline
from .words import WORD, explicit_whitespace


def _build_job(tokens: ParseResults) -> Job:
    words = list(tokens[0])
    return Job.from_words(words, background=len(tokens) > 1)


def _build_pipeline(tokens: ParseResults) -> Pipeline:
    jobs, (stdin_file, stdout_file) = tokens
    return Pipeline(jobs=list(jobs), stdin_file=stdin_file, stdout_file=stdout_file)


with explicit_whitespace():
    WHITESPACE = Regex(r"[ \t]+").set_name("whitespace")
    NEWLINE = Regex(r"[\r\n]").set_name("newline")
    COMMENT = Regex(r"#[^\r\n]*").set_name("comment")
    UNUSED = (WHITESPACE + Opt(COMMENT) | COMMENT).set_name("unused")
    JOB_ENDING = (Literal(";") | NEWLINE).set_name("job ending")

    BACKGROUND = Suppress(Opt(WHITESPACE)) + Literal("&")
    JOB = (
        (Group(WORD + ZeroOrMore(Suppress(WHITESPACE) + WORD)) + Opt(BACKGROUND))
        .set_parse_action(_build_job)
        .set_name("job")
    )

    PIPE = Suppress(Opt(WHITESPACE) + Literal("|") + Opt(WHITESPACE))
    STDIN = Suppress(Literal("<") + Opt(WHITESPACE)) + WORD
    STDOUT = Suppress(Literal(">") + Opt(WHITESPACE)) + WORD

    # always yields one (stdin_file, stdout_file) token
    REDIRECTION = (
        (STDIN + Suppress(Opt(WHITESPACE)) + Opt(STDOUT, default=None)).set_parse_action(
            lambda tokens: [(tokens[0], tokens[1])]
        )
        | (STDOUT + Suppress(Opt(WHITESPACE)) + Opt(STDIN, default=None)).set_parse_action(
            lambda tokens: [(tokens[1], tokens[0])]
        )
        | Empty().set_parse_action(lambda: [(None, None)])
    ).set_name("redirection")

    PIPELINE = (
        (
            Suppress(Opt(WHITESPACE))
            + Group(JOB + ZeroOrMore(PIPE + JOB))
            + Suppress(Opt(WHITESPACE))
            + REDIRECTION
            + Suppress(Opt(WHITESPACE) + Opt(COMMENT))
        )
        .set_parse_action(_build_pipeline)
        .set_name("pipeline")
    )

    LEADING_LINES = ZeroOrMore(ZeroOrMore(UNUSED) + NEWLINE)
    SEPARATOR = OneOrMore(OneOrMore(JOB_ENDING) + ZeroOrMore(UNUSED))
    TRAILING_LINES = ZeroOrMore(NEWLINE + ZeroOrMore(UNUSED))
    BLANK_LINES = ZeroOrMore(UNUSED) + ZeroOrMore(NEWLINE + ZeroOrMore(UNUSED))

    SCRIPT = (
        (
            Suppress(LEADING_LINES)
            + PIPELINE
            + ZeroOrMore(Suppress(SEPARATOR) + PIPELINE)
            + Suppress(TRAILING_LINES)
            + StringEnd()
        )
        | Suppress(BLANK_LINES) + StringEnd()
    ).set_name("script").parse_with_tabs()


__all__ = [
    "COMMENT",
    "JOB",
    "JOB_ENDING",
    "NEWLINE",
    "PIPELINE",
    "REDIRECTION",
    "SCRIPT",
    "UNUSED",
    "WHITESPACE",
]
