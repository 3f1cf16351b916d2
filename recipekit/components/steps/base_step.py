import abc
import copy
import functools
import typing

import pandas as pd

from recipekit.components.utils.constants import *
from recipekit.components.utils.exceptions import StepNotTrainedError
from recipekit.components.utils.utils import rand_id, default_width
from recipekit.utils.logging_utils import get_logger
from recipekit.components.selections import ellipse_check, sel2char


class Step(object, metaclass=abc.ABCMeta):
    """
    This is the parent class for all recipe steps.

    A step has two forms. The untrained form only holds the specification
    (selectors, role, options). `prep` learns from training data and returns
    a new, trained step; `bake` applies a trained step to new data. Steps are
    immutable: both forms share the same `id` and derived versions are built
    with `_replace`.
    type specification:
        kpca: kernel PCA signal extraction.
    """
    type = None
    operation = STEP

    def __init__(self, terms, role=PREDICTOR, trained=False, skip=False, id=None):
        self.terms = ellipse_check(terms)
        self.role = role
        self.trained = trained
        self.skip = skip
        self.id = rand_id(self.type) if id is None else id
        self.logger = get_logger(self.__module__ + "." + self.__class__.__name__)

    def _freeze(self):
        """Called at the end of a subclass __init__, attributes are read-only afterwards."""
        object.__setattr__(self, '_frozen', True)

    def __setattr__(self, key, value):
        if getattr(self, '_frozen', False):
            raise AttributeError('%s is immutable, use _replace to derive a new step.'
                                 % self.__class__.__name__)
        object.__setattr__(self, key, value)

    def _replace(self, **changes):
        """Return a shallow copy with `changes` applied; the `id` is kept."""
        if 'id' in changes:
            raise ValueError('The id of a step cannot be changed.')
        new_step = copy.copy(self)
        for key, value in changes.items():
            if not hasattr(self, key):
                raise ValueError('Cannot set %s for %s because the attribute does not exist.'
                                 % (key, self.__class__.__name__))
            object.__setattr__(new_step, key, value)
        return new_step

    def __eq__(self, other):
        """Overrides the default implementation"""
        if isinstance(other, Step):
            if self.type == other.type and self.id == other.id and self.terms == other.terms \
                    and self.role == other.role and self.trained == other.trained and self.skip == other.skip:
                return True
        return False

    def __hash__(self):
        return hash((self.type, self.id))

    @abc.abstractmethod
    def prep(self, training: pd.DataFrame, info: pd.DataFrame) -> 'Step':
        raise NotImplementedError()

    @abc.abstractmethod
    def bake(self, new_data: pd.DataFrame) -> pd.DataFrame:
        raise NotImplementedError()

    @abc.abstractmethod
    def tidy(self) -> pd.DataFrame:
        raise NotImplementedError()

    @abc.abstractmethod
    def describe(self, width: typing.Optional[int] = None) -> str:
        raise NotImplementedError()

    def __str__(self):
        return self.describe(default_width())

    def term_names(self) -> typing.List[str]:
        return sel2char(self.terms)

    def _tidy_frame(self, terms) -> pd.DataFrame:
        res = pd.DataFrame({'terms': list(terms)}, columns=['terms'])
        res['id'] = self.id
        return res


def check_trained(func):
    """Refuse to run `bake` on a step that has not been prepped."""

    @functools.wraps(func)
    def dec(step, new_data, *args, **kwargs):
        if not step.trained:
            raise StepNotTrainedError('%s has not been trained; call prep before bake.'
                                      % step.__class__.__name__, step.id)
        return func(step, new_data, *args, **kwargs)

    return dec
