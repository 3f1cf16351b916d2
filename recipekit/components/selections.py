"""
Selectors choose the columns a step operates on.

A step keeps its selectors unresolved until it is prepped; they are then
evaluated against the schema info of the training data:

    terms_select([all_numeric(), -has_role('outcome')], info)

Bare strings name a single column, a leading '-' excludes it.
"""
import re
import typing

import pandas as pd

from recipekit.components.utils.constants import NUMERIC, NOMINAL, PREDICTOR, OUTCOME
from recipekit.components.utils.exceptions import SelectionError


class Selector(object):
    def __init__(self, name, predicate, args=(), negated=False):
        self.name = name
        self.predicate = predicate
        self.args = tuple(args)
        self.negated = negated

    def __neg__(self):
        return Selector(self.name, self.predicate, self.args, not self.negated)

    def __eq__(self, other):
        if isinstance(other, Selector):
            return self.name == other.name and self.args == other.args and self.negated == other.negated
        return False

    def __hash__(self):
        return hash((self.name, self.args, self.negated))

    def select(self, info: pd.DataFrame) -> typing.List[str]:
        return [row['variable'] for _, row in info.iterrows() if self.predicate(row, *self.args)]

    def __str__(self):
        args = ', '.join(repr(arg) for arg in self.args)
        return '%s%s(%s)' % ('-' if self.negated else '', self.name, args)

    __repr__ = __str__


def all_predictors():
    return Selector('all_predictors', lambda row: row['role'] == PREDICTOR)


def all_outcomes():
    return Selector('all_outcomes', lambda row: row['role'] == OUTCOME)


def all_numeric():
    return Selector('all_numeric', lambda row: row['type'] == NUMERIC)


def all_nominal():
    return Selector('all_nominal', lambda row: row['type'] == NOMINAL)


def has_role(role):
    return Selector('has_role', lambda row, value: row['role'] == value, (role,))


def has_type(type):
    return Selector('has_type', lambda row, value: row['type'] == value, (type,))


def starts_with(prefix):
    return Selector('starts_with', lambda row, value: str(row['variable']).startswith(value), (prefix,))


def ends_with(suffix):
    return Selector('ends_with', lambda row, value: str(row['variable']).endswith(value), (suffix,))


def contains(text):
    return Selector('contains', lambda row, value: value in str(row['variable']), (text,))


def matches(pattern):
    return Selector('matches', lambda row, value: re.search(value, str(row['variable'])) is not None, (pattern,))


def ellipse_check(terms):
    """Terms passed to a step must not be empty."""
    if isinstance(terms, (str, Selector)):
        terms = (terms,)
    terms = tuple(terms)
    if len(terms) == 0:
        raise SelectionError('Please supply at least one variable specification.')
    return terms


def _is_negated(term):
    if isinstance(term, Selector):
        return term.negated
    return isinstance(term, str) and term.startswith('-') and len(term) > 1


def _evaluate(term, info):
    if isinstance(term, Selector):
        return term.select(info)
    if isinstance(term, str):
        name = term[1:] if _is_negated(term) else term
        if name not in set(info['variable']):
            raise SelectionError("Column '%s' does not exist in the data." % name)
        return [name]
    raise SelectionError('Malformed selector: %r. Use a column name or a selector function.' % (term,))


def terms_select(terms, info: pd.DataFrame) -> typing.List[str]:
    """
    Resolve `terms` against `info` into an ordered list of column names.

    Positive terms are applied first, in the order given; negated terms then
    remove columns. When only negated terms are given they are removed from
    all the columns of `info`.
    """
    if not terms:
        raise SelectionError('At least one selector should be used.')

    included, excluded = list(), set()
    positives = [term for term in terms if not _is_negated(term)]
    for term in terms:
        columns = _evaluate(term, info)
        if _is_negated(term):
            excluded.update(columns)
            continue
        for col in columns:
            if col not in included:
                included.append(col)
    if not positives:
        included = list(info['variable'])

    selected = [col for col in included if col not in excluded]
    if len(selected) == 0:
        raise SelectionError('No columns were selected by %s.' % ', '.join(sel2char(terms)))
    return selected


def sel2char(terms) -> typing.List[str]:
    return [str(term) for term in terms]
