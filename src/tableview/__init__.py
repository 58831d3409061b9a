"""
tableview – In-memory tabular view engine.

Import path convention::

    from tableview.application.table import DataTable
    from tableview.application.filtering import filter_records
    from tableview.application.sorting import sort_records
    from tableview.kernel.errors import InvalidInputError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
