import numbers

import pandas as pd

from recipekit.components.steps import Step, get_step_types
from recipekit.components.utils.constants import TIDY_COLUMNS
from recipekit.components.utils.exceptions import RecipeNotTrainedError
from recipekit.utils.data_manager import DataManager
from recipekit.utils.logging_utils import setup_logger, get_logger


class Recipe(object):
    """
    An ordered sequence of preprocessing steps.

    Steps are declared on an untrained recipe, learned from training data by
    `prep`, and applied identically to new data by `bake`. Every operation
    returns a new recipe; a recipe is never modified in place.

    :param data: template DataFrame, used to set the initial roles and types.
    :param outcomes: names of the outcome columns.
    :param predictors: names of the predictor columns, all non-outcome columns by default.
    :param roles: mapping of column name to a custom role.
    """

    def __init__(self, data: pd.DataFrame, outcomes=None, predictors=None, roles=None,
                 log_file=None, logging_config=None):
        self.template = data
        self.data_manager = DataManager(outcomes=outcomes, predictors=predictors, roles=roles)
        self.var_info = self.data_manager.get_info(data)
        self.term_info = self.var_info.copy()
        self.steps = tuple()
        self.trained = False
        self.retained = None

        if log_file is not None or logging_config is not None:
            setup_logger(log_file, logging_config)
        self.logger = get_logger(self.__module__ + "." + self.__class__.__name__)

    def _copy(self, **changes):
        new_recipe = Recipe.__new__(Recipe)
        new_recipe.__dict__.update(self.__dict__)
        new_recipe.__dict__.update(changes)
        return new_recipe

    def add_step(self, step: Step):
        if not isinstance(step, Step):
            raise TypeError('Only steps can be added to a recipe, got %s.' % type(step).__name__)
        step_types = get_step_types()
        if step.type not in step_types or not isinstance(step, step_types[step.type]):
            raise ValueError('Unknown step type: %s! Register it with add_step_type first.' % step.type)
        if step.id in [existing.id for existing in self.steps]:
            raise ValueError('Step id %s is already used in this recipe.' % step.id)
        return self._copy(steps=self.steps + (step,), trained=False, retained=None)

    def prep(self, training: pd.DataFrame = None, fresh=False, retain=True):
        """
        Learn every step from `training` (the template by default).

        Each step is fit on the training data as baked by the steps before it.
        Steps that are already trained are reused unless `fresh` is set.
        """
        training = self.template if training is None else training
        info = self.data_manager.get_info(training)
        self.logger.info('Preparing %d step(s) on %d rows.' % (len(self.steps), training.shape[0]))

        fitted_steps = list()
        for number, step in enumerate(self.steps, 1):
            if fresh or not step.trained:
                self.logger.debug('Step %d (%s, %s): prep.' % (number, step.type, step.id))
                step = step.prep(training, info)
            fitted_steps.append(step)
            training = step.bake(training)
            info = DataManager.update_info(info, training, role=step.role)

        return self._copy(steps=tuple(fitted_steps), trained=True, term_info=info,
                          retained=training if retain else None)

    def bake(self, new_data: pd.DataFrame):
        """Apply the trained steps to `new_data`, leaving out the steps marked with skip."""
        if not self.trained:
            raise RecipeNotTrainedError('The recipe has not been trained; call prep before bake.')
        for number, step in enumerate(self.steps, 1):
            if step.skip:
                self.logger.debug('Step %d (%s, %s): skipped.' % (number, step.type, step.id))
                continue
            new_data = step.bake(new_data)
        return new_data

    def juice(self):
        """Return the training data as processed during prep."""
        if not self.trained:
            raise RecipeNotTrainedError('The recipe has not been trained; call prep before juice.')
        if self.retained is None:
            raise ValueError('The training data was not retained; use prep(retain=True).')
        return self.retained.copy()

    def tidy(self, number=None):
        """
        Summarise the recipe, one row per step, or return the tidy output of step `number` (1-based).
        """
        if len(self.steps) == 0:
            raise ValueError('The recipe has no steps to tidy.')

        if number is None:
            rows = list()
            for idx, step in enumerate(self.steps, 1):
                rows.append([idx, step.operation, step.type, step.trained, step.skip, step.id])
            return pd.DataFrame(rows, columns=TIDY_COLUMNS)

        if isinstance(number, bool) or not isinstance(number, numbers.Integral):
            raise ValueError('`number` should be a single integer, got %r.' % (number,))
        if not 1 <= number <= len(self.steps):
            raise ValueError('`number` should be between 1 and %d, got %d.' % (len(self.steps), number))
        return self.steps[number - 1].tidy()

    def __str__(self):
        from tabulate import tabulate
        role_counts = self.var_info.groupby('role', dropna=False).size()
        tabular_data = [['role', '#variables']]
        for role, count in role_counts.items():
            tabular_data.append([role if isinstance(role, str) else 'none', count])
        text = 'Data Recipe\n\n' + tabulate(tabular_data, headers='firstrow', tablefmt="github")
        if self.steps:
            text += '\n\nOperations:\n\n' + '\n'.join(str(step) for step in self.steps)
        return text
