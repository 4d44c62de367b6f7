"""Script parser entry points."""

from __future__ import annotations

from pyparsing import ParseException

from .exceptions import ParseError
from .grammar import SCRIPT
from .log import get_logger
from .nodes import Pipeline

logger = get_logger(__name__)


def parse_script_strict(script: str) -> list[Pipeline]:
    """Parse ``script`` into pipelines, raising :class:`ParseError` on bad syntax."""

    try:
        results = SCRIPT.parse_string(script)
    except ParseException as exc:
        raise ParseError(exc.loc, exc.lineno, exc.col, exc.msg) from exc
    return list(results)


def parse_script(script: str) -> list[Pipeline]:
    """Parse ``script`` into pipelines.

    Text that does not match the grammar yields an empty list so that a
    malformed line never aborts the host shell.
    """

    try:
        return parse_script_strict(script)
    except ParseError as exc:
        logger.debug("Discarding unparsable script: %s", exc)
        return []


__all__ = ["parse_script", "parse_script_strict"]
