"""Glob expansion of job arguments."""

from __future__ import annotations

import glob
import re
from collections.abc import Callable, Iterable, Iterator

from .exceptions import GlobError
from .log import get_logger
from .nodes import Job, Pipeline

logger = get_logger(__name__)

GLOB_CHARS = frozenset("?*[")

GlobService = Callable[[str], Iterable[str]]


def has_glob_chars(arg: str) -> bool:
    return any(char in GLOB_CHARS for char in arg)


def host_glob(pattern: str, root_dir: str | None = None) -> Iterator[str]:
    """Match ``pattern`` against the host filesystem, in sorted order.

    Relative patterns are resolved against ``root_dir`` (default: the
    process working directory) and matches are returned relative to it.
    """

    yield from sorted(glob.iglob(pattern, root_dir=root_dir))


def _expand_arg(arg: str, glob_service: GlobService) -> list[str]:
    if not has_glob_chars(arg):
        return [arg]
    try:
        matches = list(glob_service(arg))
    except (GlobError, OSError, ValueError, re.error) as exc:
        logger.debug("Glob pattern %r rejected: %s", arg, exc)
        return [arg]
    if not matches:
        logger.debug("Glob pattern %r matched nothing", arg)
        return [arg]
    return matches


def expand_job_globs(job: Job, glob_service: GlobService = host_glob) -> Job:
    """Replace glob arguments of ``job`` with their matches, in place.

    The command word is never expanded. An argument whose pattern fails or
    matches nothing is kept as written.
    """

    expanded = [job.args[0]]
    for arg in job.args[1:]:
        expanded.extend(_expand_arg(arg, glob_service))
    job.args[:] = expanded
    return job


def expand_pipeline_globs(pipeline: Pipeline, glob_service: GlobService = host_glob) -> Pipeline:
    for job in pipeline.jobs:
        expand_job_globs(job, glob_service)
    return pipeline


def expand_globs(
    pipelines: Iterable[Pipeline], glob_service: GlobService = host_glob
) -> list[Pipeline]:
    return [expand_pipeline_globs(pipeline, glob_service) for pipeline in pipelines]


__all__ = [
    "GLOB_CHARS",
    "GlobService",
    "expand_globs",
    "expand_job_globs",
    "expand_pipeline_globs",
    "has_glob_chars",
    "host_glob",
]
