import logging

from django.conf import settings

from .analyzer import DEFAULT_MAX_LENGTH, StringAnalyzer
from .exceptions import ConflictingFilters, StringNotFound
from .nl_parser import FilterParser, FilterSet
from .store import apply_residual_filters, get_record_store

logger = logging.getLogger(__name__)


def get_analyzer() -> StringAnalyzer:
    return StringAnalyzer(max_length=getattr(settings, 'STRING_MAX_LENGTH', DEFAULT_MAX_LENGTH))


def create_string(value, store=None):
    """
    Analyze ``value`` and store the result.

    Raises InvalidType / ValueTooLong before touching the store, and
    DuplicateString when the value (hence its id) is already stored.
    """
    store = store or get_record_store()
    analyzed = get_analyzer().analyze(value)
    record = store.insert(analyzed)
    logger.info("Stored string id=%s length=%s", record.id, record.properties.length)
    return record


def get_string(value, store=None):
    store = store or get_record_store()
    record = store.get_by_value(value)
    if record is None:
        raise StringNotFound("String does not exist in the system")
    return record


def list_strings(filters: FilterSet, store=None):
    store = store or get_record_store()
    if filters.has_length_conflict():
        raise ConflictingFilters(
            "min_length cannot be greater than max_length", filters=filters
        )
    records = store.list_where(filters)
    return apply_residual_filters(records, filters)


def filter_by_natural_language(query: str, store=None):
    """
    Parse ``query`` into filters and run them.

    Returns ``(records, filters)``. Unparsable / ConflictingFilters
    propagate to the caller.
    """
    store = store or get_record_store()
    filters = FilterParser().parse_and_validate(query)
    logger.debug("Parsed %r into %s", query, filters.to_dict())
    records = store.list_where(filters)
    return apply_residual_filters(records, filters, ignore_case=True), filters


def delete_string(value, store=None):
    store = store or get_record_store()
    if not store.delete_by_value(value):
        raise StringNotFound("String does not exist in the system")
    logger.info("Deleted string of length %s", len(value))
