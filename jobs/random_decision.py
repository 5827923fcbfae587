#!/usr/bin/env python3
"""Job that exits 0 or 1 at random, for exercising a harness's success and failure paths."""

from __future__ import annotations

from jobs._runner import (
    EntropyUnavailable,
    JobResult,
    Outcome,
    RandomnessProvider,
    SystemRandomnessProvider,
    emit_failure,
    emit_result,
)

JOB = "random_decision"


def draw_outcome(provider: RandomnessProvider | None = None) -> Outcome:
    """Draw one unbiased binary outcome.

    Raises EntropyUnavailable when the provider cannot be seeded; no fixed
    value is ever substituted.
    """

    if provider is None:
        provider = SystemRandomnessProvider()
    value = provider.choice(provider.seed())
    if value not in (0, 1):
        raise ValueError(f"Randomness provider returned {value!r}; expected 0 or 1")
    return value


def exercise(provider: RandomnessProvider | None = None) -> JobResult:
    outcome = draw_outcome(provider)
    return JobResult(
        job=JOB,
        outcome=outcome,
        detail=f"Random decision job exiting with code {outcome}",
    )


def main() -> None:
    try:
        result = exercise()
    except EntropyUnavailable as exc:
        emit_failure(JOB, exc)
    else:
        emit_result(result)


if __name__ == "__main__":
    main()
