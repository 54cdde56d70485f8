"""Entry point for the feature tour.

Running ``python -m feature_tour`` executes every section in a stable order.
Each section prints a heading followed by its routine's output; the worker
pool and the deferred computation print from other threads, so their lines
may land anywhere after their heading.

To add a new section:
1. Write a routine in the matching topic module (or a new ``<topic>.py``).
2. Append a ``(heading, routine)`` pair to the list built by ``sections``.
"""

from __future__ import annotations

import logging
from typing import Callable

from . import (
    concurrency,
    datetimes,
    functional,
    generics,
    interfaces,
    optionals,
    pipelines,
    records,
    shapes,
    text_blocks,
)
from .console import announce, color_enabled, setup_logging
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)

Section = tuple[str | None, Callable[[], object]]


def sections(settings: Settings) -> list[Section]:
    """Return the ordered ``(heading, routine)`` pairs; ``None`` means no heading."""

    def deferred_computation() -> None:
        concurrency.demonstrate_deferred_computation(settings.async_delay)

    return [
        (None, text_blocks.demonstrate_text_blocks),
        (None, shapes.demonstrate_shapes),
        ("Demonstrating Worker Pool:", concurrency.demonstrate_worker_pool),
        ("Demonstrating Records:", records.demonstrate_records),
        ("Demonstrating Grouping:", pipelines.demonstrate_grouping),
        ("Demonstrating Optional Values:", optionals.demonstrate_optional_api),
        ("Demonstrating Variance in Generics:", generics.demonstrate_generics),
        ("Demonstrating Deferred Computation:", deferred_computation),
        ("Demonstrating Filtering a Dict:", pipelines.demonstrate_dict_filter),
        (
            "Demonstrating Filtering and Mapping (dropping None):",
            pipelines.demonstrate_filter_and_map,
        ),
        ("Demonstrating Advanced Pipeline Operations:", pipelines.demonstrate_advanced_pipeline),
        ("Demonstrating Ordered Dict:", pipelines.demonstrate_ordered_map),
        ("Demonstrating Date and Time:", datetimes.demonstrate_date_time_api),
        (None, interfaces.demonstrate_interfaces),
        ("Demonstrating Callable Values:", functional.demonstrate_functional_interfaces),
    ]


def main() -> int:
    settings = load_settings()
    setup_logging(settings.log_level)
    color = color_enabled(settings.no_color)

    for heading, runner in sections(settings):
        logger.debug("running %s", runner.__qualname__)
        if heading is not None:
            announce(heading, color=color)
        runner()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
