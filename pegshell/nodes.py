"""Parsed script representation: jobs and pipelines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class Job:
    """One command invocation.

    ``command`` always equals ``args[0]``. Glob expansion rewrites the rest of
    ``args`` in place but never the command word.
    """

    command: str
    args: list[str]
    background: bool = False

    def __post_init__(self) -> None:
        if not self.args:
            raise ValueError("A job needs at least one word")
        if self.args[0] != self.command:
            raise ValueError(f"Job command {self.command!r} must be its first argument")

    @classmethod
    def from_words(cls, words: Iterable[str], *, background: bool = False) -> "Job":
        args = list(words)
        if not args:
            raise ValueError("A job needs at least one word")
        return cls(command=args[0], args=args, background=background)

    def to_dict(self) -> dict[str, object]:
        return {
            "command": self.command,
            "args": list(self.args),
            "background": self.background,
        }


@dataclass
class Pipeline:
    """Jobs connected stdout-to-stdin, plus optional file redirection."""

    jobs: list[Job]
    stdin_file: str | None = None
    stdout_file: str | None = None

    def __post_init__(self) -> None:
        if not self.jobs:
            raise ValueError("A pipeline needs at least one job")

    @property
    def background(self) -> bool:
        return self.jobs[-1].background

    def to_dict(self) -> dict[str, object]:
        return {
            "jobs": [job.to_dict() for job in self.jobs],
            "stdin_file": self.stdin_file,
            "stdout_file": self.stdout_file,
        }


__all__ = ["Job", "Pipeline"]
