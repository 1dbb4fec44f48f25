"""Mapping report dataclasses and the builder that fills them.

WHY: The caller of the engine does not want raw interval lists; it wants
"what did each seed become, and what is the smallest resulting value".
Formatters (plain text, JSON) need the same answer in a structured form.
The report is that single intermediate form, decoupling the walk from
how its result is shown.

HOW: Two dataclasses:
  SeedResult:    one seed (a number or a range) and what it mapped to
  MappingReport: every seed result plus the chain walked and the
                  overall lowest value
build_report() runs each seed through a Pipeline, scalar seeds with
Pipeline.map() and range seeds with Pipeline.map_range(), and reduces
the outputs with lowest_start().

RULES:
- Scalar seeds are stored as one-number intervals [n, n + 1)
- A seed that cannot reach the target has mapped == [] and lowest None
- MappingReport.lowest is None when no seed reached the target
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from range_remapper.core.category_map import Value
from range_remapper.core.intervals import Interval
from range_remapper.core.pipeline import Pipeline, lowest_start

SEED_MODES = ("values", "ranges")


@dataclass
class SeedResult:
    """One seed and the target-category intervals it became.

    RULES:
    - seed: the starting interval in the source category
    - mapped: target intervals in walk order; [] when the walk failed
    - lowest: smallest start among mapped, or None
    """

    seed: Interval
    mapped: List[Interval] = field(default_factory=list)
    lowest: Optional[int] = None

    @property
    def reached_target(self) -> bool:
        return bool(self.mapped)


@dataclass
class MappingReport:
    """Everything a formatter needs to present one mapping run.

    RULES:
    - seed_mode: "values" or "ranges"
    - chain: categories walked from source (for display)
    - results: one SeedResult per seed, in input order
    - lowest: smallest value reached by any seed, or None
    """

    source_category: str
    target_category: str
    seed_mode: str
    chain: List[str]
    results: List[SeedResult]
    lowest: Optional[int]

    @property
    def unmapped_count(self) -> int:
        return sum(1 for result in self.results if not result.reached_target)


def build_report(
    pipeline: Pipeline,
    seeds: Iterable[Union[int, Interval]],
    source: str,
    target: str,
    seed_mode: str = "values",
) -> MappingReport:
    """Run every seed through the pipeline and collect the answers.

    Args:
        pipeline: The assembled category chain.
        seeds: Numbers (values mode) or Intervals (ranges mode).
        source: Category the seeds belong to.
        target: Category to map them to.
        seed_mode: "values" or "ranges".

    Returns:
        A MappingReport with one SeedResult per seed.

    Raises:
        ValueError: If seed_mode is unknown or a seed has the wrong type
            for the mode.
    """
    if seed_mode not in SEED_MODES:
        raise ValueError(
            "Unknown seed mode '{}'. Available: {}".format(seed_mode, ", ".join(SEED_MODES))
        )

    results: List[SeedResult] = []
    for seed in seeds:
        if seed_mode == "values":
            if not isinstance(seed, int):
                raise ValueError("Seed {!r} is not a number".format(seed))
            mapped_value = pipeline.map(Value(source, seed), target)
            mapped = [] if mapped_value is None else [Interval.from_length(mapped_value.number, 1)]
            seed_interval = Interval.from_length(seed, 1)
        else:
            if not isinstance(seed, Interval):
                raise ValueError("Seed {!r} is not an interval".format(seed))
            mapped = pipeline.map_range(seed, source, target)
            seed_interval = seed
        results.append(SeedResult(seed=seed_interval, mapped=mapped, lowest=lowest_start(mapped)))

    chain = pipeline.chain(source)
    if target in chain:
        chain = chain[:chain.index(target) + 1]

    reached = [result.lowest for result in results if result.lowest is not None]
    return MappingReport(
        source_category=source,
        target_category=target,
        seed_mode=seed_mode,
        chain=chain,
        results=results,
        lowest=min(reached) if reached else None,
    )
