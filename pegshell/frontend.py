"""High level front end: parse, expand, build and run scripts."""

from __future__ import annotations

from functools import partial

from .command import CommandInvocation, build_command
from .exceptions import ParseError
from .globbing import GlobService, expand_globs, expand_pipeline_globs, host_glob
from .log import get_logger
from .nodes import Pipeline
from .runner import CommandResult, PipelineRunner
from .shell_parser import parse_script, parse_script_strict

logger = get_logger(__name__)


class ShellFrontend:
    """Turns script text into pipelines and hands them to a runner.

    Without an explicit ``glob_service`` patterns are matched on the host
    filesystem, relative to the runner's working directory.
    """

    def __init__(
        self,
        *,
        glob_service: GlobService | None = None,
        expand_globs: bool = True,
        strict: bool = False,
        runner: PipelineRunner | None = None,
        stop_on_error: bool = True,
    ) -> None:
        self.runner = runner or PipelineRunner()
        self.glob_service: GlobService = glob_service or partial(
            host_glob, root_dir=self.runner.cwd
        )
        self.expand_globs = expand_globs
        self.strict = strict
        self.stop_on_error = stop_on_error

    def parse(self, script: str) -> list[Pipeline]:
        if self.strict:
            return parse_script_strict(script)
        return parse_script(script)

    def prepare(self, script: str) -> list[Pipeline]:
        pipelines = self.parse(script)
        if self.expand_globs:
            expand_globs(pipelines, self.glob_service)
        return pipelines

    def commands(self, pipeline: Pipeline) -> list[CommandInvocation]:
        return [build_command(job) for job in pipeline.jobs]

    def exec(self, script: str) -> CommandResult:
        try:
            pipelines = self.parse(script)
        except ParseError as exc:
            return CommandResult(stderr=str(exc), exit_code=2)
        last_result = CommandResult()
        for pipeline in pipelines:
            # globs see files written by earlier pipelines
            if self.expand_globs:
                expand_pipeline_globs(pipeline, self.glob_service)
            last_result = self.runner.run(pipeline)
            if last_result.exit_code != 0 and self.stop_on_error:
                logger.debug(
                    "Stopping after %s exited with %d",
                    pipeline.jobs[-1].command,
                    last_result.exit_code,
                )
                return last_result
        return last_result


__all__ = ["ShellFrontend"]
