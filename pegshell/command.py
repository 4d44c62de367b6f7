"""Mapping from parsed jobs to process invocations."""

from __future__ import annotations

from dataclasses import dataclass, field

from .nodes import Job


@dataclass(frozen=True)
class CommandInvocation:
    program: str
    args: list[str] = field(default_factory=list)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]


def build_command(job: Job) -> CommandInvocation:
    """Program is the first word; the remaining words are its arguments."""

    return CommandInvocation(program=job.args[0], args=list(job.args[1:]))


__all__ = ["CommandInvocation", "build_command"]
