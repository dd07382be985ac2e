"""Batch processing of submissions through a form type."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from form_object.core.form import FormObject
from form_object.core.models import ProcessingResult

logger = logging.getLogger(__name__)


def process_batch(
    form_class: type[FormObject],
    records: Iterable[Mapping[str, Any]],
    *args: Any,
    **kwargs: Any,
) -> list[ProcessingResult]:
    """Process each record with a fresh form instance.

    Args:
        form_class: The FormObject subclass to instantiate.
        records: Raw input mappings, one per submission.
        *args: Positional arguments forwarded to every form constructor.
        **kwargs: Keyword arguments forwarded to every form constructor.

    Returns:
        One ProcessingResult per record, in input order.
    """
    results = []
    for record in records:
        form = form_class(*args, **kwargs)
        form.process(record)
        results.append(form.to_result())

    logger.debug(
        "Processed %d %s submissions (%d valid)",
        len(results),
        form_class.model_name(),
        sum(1 for r in results if r.valid),
    )
    return results
