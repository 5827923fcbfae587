#!/usr/bin/env python3
"""Common helpers for fixture jobs."""

from __future__ import annotations

import os
import random
import sys
from dataclasses import dataclass
from typing import Literal, Protocol

Outcome = Literal[0, 1]

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
# Reserved so a harness can tell "job failed" apart from "fixture is broken".
EXIT_ENTROPY_UNAVAILABLE = 2

SEED_BYTES = 32


class EntropyUnavailable(RuntimeError):
    """The OS randomness source could not be read."""


class RandomnessProvider(Protocol):
    def seed(self) -> int: ...

    def choice(self, seed: int) -> int: ...


class SystemRandomnessProvider:
    """Seed a private PRNG from os.urandom and draw uniformly from {0, 1}."""

    def __init__(self, seed_bytes: int = SEED_BYTES) -> None:
        self.seed_bytes = seed_bytes

    def seed(self) -> int:
        try:
            material = os.urandom(self.seed_bytes)
        except NotImplementedError as exc:
            raise EntropyUnavailable(f"no OS randomness source: {exc}") from exc
        except OSError as exc:
            raise EntropyUnavailable(f"OS error while reading randomness: {exc}") from exc
        return int.from_bytes(material, "big")

    def choice(self, seed: int) -> int:
        # A fresh generator per draw; nothing is shared between invocations.
        generator = random.Random(seed)
        return generator.randint(0, 1)


@dataclass
class JobResult:
    job: str
    outcome: Outcome
    detail: str


def emit_result(result: JobResult) -> None:
    """Print the report line and exit with the outcome as the status code."""

    print(result.detail, flush=True)
    raise SystemExit(result.outcome)


def emit_failure(job: str, exc: EntropyUnavailable) -> None:
    """Report a fixture-internal failure on stderr and exit with the reserved code."""

    print(f"{job}: entropy source unavailable: {exc}", file=sys.stderr, flush=True)
    raise SystemExit(EXIT_ENTROPY_UNAVAILABLE)
