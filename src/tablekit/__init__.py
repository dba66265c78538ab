"""
tablekit – filter, fuzzy-search and column-ordering engine for data tables.

Import path convention::

    from tablekit.filtering import FilterCondition, apply_filters
    from tablekit.search import fuzzy_search, highlight_matches
    from tablekit.columns import ColumnOrderMode, order_columns
    from tablekit.persistence import TableStatePersistence
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
