"""
Type predicates and guard combinators.

predicates holds single-value is_* checks; guards builds composite checks
from them and provides assert_type.
"""
