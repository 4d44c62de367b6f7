"""pegshell package: grammar-driven shell script front end."""

from .command import CommandInvocation, build_command
from .exceptions import GlobError, ParseError, ShellFrontError
from .frontend import ShellFrontend
from .globbing import (
    GlobService,
    expand_globs,
    expand_job_globs,
    expand_pipeline_globs,
    has_glob_chars,
    host_glob,
)
from .nodes import Job, Pipeline
from .runner import CommandResult, PipelineRunner
from .shell_parser import parse_script, parse_script_strict
from .words import lex_word

__all__ = [
    "parse_script",
    "parse_script_strict",
    "lex_word",
    "Job",
    "Pipeline",
    "GlobService",
    "host_glob",
    "has_glob_chars",
    "expand_globs",
    "expand_job_globs",
    "expand_pipeline_globs",
    "CommandInvocation",
    "build_command",
    "CommandResult",
    "PipelineRunner",
    "ShellFrontend",
    "ShellFrontError",
    "ParseError",
    "GlobError",
]
