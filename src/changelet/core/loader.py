"""Turn collected change files into validated records.

Downstream stages only ever see a complete record set: a single bad file
fails the whole load.
"""

import logging
from collections.abc import Iterable

from ..errors import ChangeSetError, ParseError
from ..models import ChangeRecord
from .parser import parse_change_file
from .sources import ChangeSource

logger = logging.getLogger(__name__)


def load_changes(
    sources: Iterable[ChangeSource], *, fail_fast: bool = False
) -> list[ChangeRecord]:
    """Parse every source into a change record.

    Args:
        sources: Raw change files
        fail_fast: Stop at the first invalid file instead of reporting all

    Returns:
        Records in the order of ``sources``

    Raises:
        ParseError: First invalid file, when ``fail_fast`` is set
        ChangeSetError: Every invalid file, otherwise
    """
    records: list[ChangeRecord] = []
    errors: list[ParseError] = []

    for source in sources:
        try:
            if source.error is not None:
                raise source.error
            record = parse_change_file(source.text, source.created_at, source.identifier)
        except ParseError as e:
            if fail_fast:
                raise
            logger.debug(f"Invalid change file {source.identifier}: {e.message}")
            errors.append(e)
            continue
        logger.debug(f"Parsed {source.identifier}: {record.kind.value}, priority {record.priority}")
        records.append(record)

    if errors:
        raise ChangeSetError(errors)
    return records
