import random
import shutil
import string
import textwrap
import importlib.util

import pandas as pd

from recipekit.components.utils.constants import NUMERIC, NOMINAL, PACKAGE_DISTRIBUTIONS
from recipekit.components.utils.exceptions import DependencyMissingError, TypeMismatchError

_id_chars = string.ascii_letters + string.digits


def rand_id(prefix, size=5):
    """Random step identifier such as 'kpca_Xa3Bz'."""
    return '%s_%s' % (prefix, ''.join(random.choice(_id_chars) for _ in range(size)))


def names0(num, prefix='x'):
    """
    Generate zero-padded names, e.g. names0(3, 'kPC') -> ['kPC1', 'kPC2', 'kPC3'].

    The padding width is the number of digits of `num`, so the lexicographic
    order of the names matches their numeric order.
    """
    if num < 1:
        raise ValueError('`num` should be > 0, got %d.' % num)
    width = len(str(num))
    return ['%s%s' % (prefix, str(idx).zfill(width)) for idx in range(1, num + 1)]


def default_width():
    return max(20, shutil.get_terminal_size().columns - 40)


def format_ch_vec(values, width=None, sep=', '):
    """Join names with `sep`, wrapping the text at `width` characters."""
    width = default_width() if width is None else width
    return textwrap.fill(sep.join(str(val) for val in values), width=width,
                         break_long_words=False, break_on_hyphens=False)


def column_type(values: pd.Series):
    if pd.api.types.is_bool_dtype(values):
        return NOMINAL
    if pd.api.types.is_numeric_dtype(values):
        return NUMERIC
    return NOMINAL


def check_type(data: pd.DataFrame, quant=True, step_id=None):
    """
    Check that every column of `data` is numeric (quant=True) or nominal (quant=False).
    :raise TypeMismatchError: naming the offending columns.
    """
    expected = NUMERIC if quant else NOMINAL
    wrong = [col for col in data.columns if column_type(data[col]) != expected]
    if wrong:
        raise TypeMismatchError('All columns selected for the step should be %s. Offending columns: %s'
                                % (expected, ', '.join(map(str, wrong))), wrong, step_id)


def check_packages(packages, step_id=None):
    """
    Fail fast when one of the import names in `packages` is not installed.
    :raise DependencyMissingError: naming the distributions to install.
    """
    missing = [pkg for pkg in packages if importlib.util.find_spec(pkg) is None]
    if missing:
        raise DependencyMissingError([PACKAGE_DISTRIBUTIONS.get(pkg, pkg) for pkg in missing], step_id)
