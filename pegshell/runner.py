"""Run parsed pipelines as host processes."""

from __future__ import annotations

import contextlib
import subprocess
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from .command import build_command
from .log import get_logger
from .nodes import Pipeline

logger = get_logger(__name__)


@dataclass(slots=True)
class CommandResult:
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0


class PipelineRunner:
    """Spawns each job of a pipeline and wires them stdout-to-stdin.

    Redirection files apply to the pipeline as a whole: ``stdin_file`` feeds
    the first job and ``stdout_file`` receives the output of the last one.
    Background pipelines are started and left running on ``self.background``.
    """

    def __init__(
        self,
        *,
        cwd: str | Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self.cwd = str(cwd) if cwd is not None else None
        self.env = dict(env) if env is not None else None
        self.background: list[subprocess.Popen[str]] = []

    def run(self, pipeline: Pipeline) -> CommandResult:
        # drop finished background processes
        self.background = [p for p in self.background if p.poll() is None]
        with contextlib.ExitStack() as stack:
            try:
                stdin = self._open(stack, pipeline.stdin_file, "r")
                stdout_file = self._open(stack, pipeline.stdout_file, "w")
            except OSError as exc:
                return CommandResult(stderr=str(exc), exit_code=1)
            if pipeline.background:
                started = self._spawn(pipeline, stdin, stdout_file, None)
                if isinstance(started, CommandResult):
                    return started
                self.background.extend(started)
                return CommandResult()
            stderr_sink = stack.enter_context(tempfile.TemporaryFile(mode="w+"))
            processes = self._spawn(pipeline, stdin, stdout_file, stderr_sink)
            if isinstance(processes, CommandResult):
                return processes
            stdout, _ = processes[-1].communicate()
            for process in processes[:-1]:
                process.wait()
            stderr_sink.seek(0)
            return CommandResult(
                stdout=stdout or "",
                stderr=stderr_sink.read(),
                exit_code=processes[-1].returncode,
            )

    def wait_background(self) -> list[int]:
        """Wait for every background process and return their exit codes."""

        codes = [process.wait() for process in self.background]
        self.background.clear()
        return codes

    def _open(
        self, stack: contextlib.ExitStack, name: str | None, mode: str
    ) -> IO[str] | None:
        if name is None:
            return None
        path = Path(name)
        if self.cwd is not None and not path.is_absolute():
            path = Path(self.cwd) / path
        return stack.enter_context(open(path, mode))

    def _spawn(
        self,
        pipeline: Pipeline,
        stdin: IO[str] | None,
        stdout_file: IO[str] | None,
        stderr_sink: IO[str] | None,
    ) -> list[subprocess.Popen[str]] | CommandResult:
        processes: list[subprocess.Popen[str]] = []
        last_index = len(pipeline.jobs) - 1
        source: IO[str] | int | None = stdin
        for index, job in enumerate(pipeline.jobs):
            invocation = build_command(job)
            if index < last_index:
                target: IO[str] | int | None = subprocess.PIPE
            elif stdout_file is not None:
                target = stdout_file
            elif pipeline.background:
                target = None
            else:
                target = subprocess.PIPE
            logger.debug("Spawning %s", invocation.argv)
            try:
                process = subprocess.Popen(
                    invocation.argv,
                    stdin=source,
                    stdout=target,
                    stderr=stderr_sink,
                    cwd=self.cwd,
                    env=self.env,
                    text=True,
                )
            except FileNotFoundError as exc:
                logger.warning("Command not found: %s", invocation.program)
                self._abort(processes)
                return CommandResult(stderr=str(exc), exit_code=127)
            except OSError as exc:
                logger.warning("Failed to start %s: %s", invocation.program, exc)
                self._abort(processes)
                return CommandResult(stderr=str(exc), exit_code=exc.errno or 1)
            if processes and processes[-1].stdout is not None:
                # the child holds its own copy of the pipe
                processes[-1].stdout.close()
            processes.append(process)
            source = process.stdout
        return processes

    def _abort(self, processes: list[subprocess.Popen[str]]) -> None:
        for process in processes:
            process.kill()
            process.wait()
            if process.stdout is not None:
                process.stdout.close()


__all__ = ["CommandResult", "PipelineRunner"]
