"""Log pruning by category tag."""

from dataclasses import replace

from ..models import Trace


def prune_trace(trace: Trace, category: str | None) -> Trace:
    """Keep only logs carrying a field keyed by the category.

    An empty category returns the same trace object. Spans left without
    logs are kept with an empty log list.
    """
    if not category:
        return trace

    return Trace(
        spans=[
            replace(
                span,
                logs=[log for log in span.logs if log.fields.find(category) is not None],
            )
            for span in trace.spans
        ]
    )
