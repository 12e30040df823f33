"""
Exception classes for multisort.

Comparison itself never raises, and errors raised by caller-supplied accessor
functions are propagated unchanged. These exceptions only signal a malformed
sort request that can be detected before any comparison runs.
"""


class SortError(Exception):
    """Base class for errors raised by multisort itself."""
    pass


class InvalidCriterionError(SortError, TypeError):
    """Raised when a criterion is neither a field name nor a callable.

    Field names must be hashable so they can be used as mapping keys,
    sequence indices or attribute names. Examples of rejected criteria:
        - A list or dict passed where a single criterion was expected
        - A tuple containing unhashable members
    """
    pass


class SortConfigurationError(SortError, ValueError):
    """Raised when a sort option has an unsupported value.

    The only option is the null placement policy, which must be a
    ``NullPlacement`` member or one of its string values ("last", "first").
    """
    pass
