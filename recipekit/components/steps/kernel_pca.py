import warnings

import numpy as np
import pandas as pd
from ConfigSpace.configuration_space import ConfigurationSpace
from ConfigSpace.hyperparameters import CategoricalHyperparameter, \
    UniformIntegerHyperparameter, UniformFloatHyperparameter
from ConfigSpace.conditions import EqualsCondition, InCondition

from recipekit.components.steps.base_step import *
from recipekit.components.steps.utils import KernelParams, KernelProjector
from recipekit.components.selections import terms_select
from recipekit.components.utils.exceptions import SchemaError
from recipekit.components.utils.utils import check_packages, check_type, format_ch_vec, names0
from recipekit.utils.data_manager import DataManager


def _check_num_comp(num_comp):
    if isinstance(num_comp, (bool, np.bool_)):
        raise ValueError('`num_comp` should be a positive integer, got %r.' % (num_comp,))
    try:
        value = int(num_comp)
        exact = float(num_comp) == value
    except (TypeError, ValueError, OverflowError):
        exact = False
    if not exact or value < 1:
        raise ValueError('`num_comp` should be a positive integer, got %r.' % (num_comp,))
    return value


class KernelPCAStep(Step):
    """
    Kernel PCA signal extraction.

    Converts the selected numeric columns into `num_comp` kernel principal
    components. The selected columns are removed from the data and the
    components are appended as `prefix` followed by a zero-padded index
    (kPC1..kPC9 for fewer than ten components, kPC001..kPC101 for 101).

    If `num_comp` is larger than the number of components the training data
    admits, the smaller number is used when baking.

    :param terms: selectors for the columns used to compute the components.
    :param role: role assigned to the new component columns.
    :param num_comp: number of components to retain.
    :param res: the fitted KernelProjector, set by prep.
    :param options: kernel configuration, a KernelParams or a mapping with the keys
        'kernel' and 'kernel_options'; other keys are passed to sklearn.decomposition.KernelPCA.
    :param num: deprecated, replaced by `num_comp`. When given it takes precedence.
    :param prefix: prefix of the new column names.
    """
    type = 'kpca'

    def __init__(self, terms, role=PREDICTOR, trained=False, num_comp=5, res=None,
                 options=None, num=None, prefix='kPC', skip=False, id=None):
        check_packages(['sklearn'], id)
        super().__init__(terms, role=role, trained=trained, skip=skip, id=id)

        if num is not None:
            warnings.warn('The argument `num` is deprecated in favor of `num_comp`. '
                          '`num` will be removed in the next version.', DeprecationWarning, stacklevel=2)
            self.logger.warning('Step %s uses the deprecated argument `num`=%s.' % (self.id, num))
            num_comp = num

        self.num_comp = _check_num_comp(num_comp)
        self.options = KernelParams.from_dict(options)
        self.res = res
        self.prefix = prefix
        if self.trained and self.res is None:
            raise ValueError('A trained kernel PCA step needs a fitted projector.')
        self._freeze()

    def prep(self, training: pd.DataFrame, info: pd.DataFrame = None):
        if info is None:
            info = DataManager().get_info(training)
        col_names = terms_select(self.terms, info)
        check_type(training[col_names], step_id=self.id)

        self.logger.debug('Fitting kernel PCA (%s) with %d components on %d rows: %s'
                          % (self.options.kernel, self.num_comp, training.shape[0], ', '.join(map(str, col_names))))
        projector = KernelProjector.fit(training[col_names], self.num_comp,
                                        kernel=self.options.kernel,
                                        kernel_options=self.options.kernel_options,
                                        **self.options.extras)
        if projector.n_components < self.num_comp:
            self.logger.info('Step %s: only %d of the %d requested components are available.'
                             % (self.id, projector.n_components, self.num_comp))
        return self._replace(trained=True, res=projector)

    @check_trained
    def bake(self, new_data: pd.DataFrame):
        pca_vars = self.res.original_columns()
        missing = [col for col in pca_vars if col not in new_data.columns]
        if missing:
            raise SchemaError('Columns used to train the step are missing from the data: %s'
                              % ', '.join(map(str, missing)), missing, self.id)

        comps = self.res.project(new_data[pca_vars])
        comps = comps[:, :min(self.num_comp, comps.shape[1])]
        comp_names = names0(comps.shape[1], self.prefix)

        kept = new_data.drop(columns=pca_vars)
        clash = [name for name in comp_names if name in kept.columns]
        if clash:
            raise SchemaError('The new component columns already exist in the data: %s'
                              % ', '.join(clash), clash, self.id)

        comps = pd.DataFrame(comps, index=new_data.index, columns=comp_names)
        return pd.concat([kept, comps], axis=1)

    def describe(self, width=None):
        if self.trained:
            return 'Kernel PCA (%s) extraction with %s [trained]' % (
                self.res.kernel, format_ch_vec(self.res.original_columns(), width=width))
        return 'Kernel PCA extraction with %s' % format_ch_vec(self.term_names(), width=width)

    def tidy(self):
        if self.trained:
            return self._tidy_frame(self.res.original_columns())
        return self._tidy_frame(self.term_names())

    @staticmethod
    def get_hyperparameter_search_space(dataset_properties=None):
        max_comp = 20
        if dataset_properties is not None and dataset_properties.get('n_features') is not None:
            max_comp = max(2, min(max_comp, int(dataset_properties['n_features'])))

        num_comp = UniformIntegerHyperparameter("num_comp", 1, max_comp, default_value=min(5, max_comp))
        kernel = CategoricalHyperparameter('kernel',
                                           [RBF_KERNEL, POLY_KERNEL, LINEAR_KERNEL, TANH_KERNEL, LAPLACE_KERNEL],
                                           default_value=RBF_KERNEL)
        bandwidth = UniformFloatHyperparameter("bandwidth", 3.0517578125e-05, 8,
                                               log=True, default_value=0.2)
        degree = UniformIntegerHyperparameter('degree', 2, 5, default_value=3)
        scale = UniformFloatHyperparameter("scale", 3.0517578125e-05, 8,
                                           log=True, default_value=1.0)
        offset = UniformFloatHyperparameter("offset", -1, 1, default_value=0)
        cs = ConfigurationSpace()
        cs.add(num_comp, kernel, bandwidth, degree, scale, offset)

        bandwidth_condition = InCondition(bandwidth, kernel, [RBF_KERNEL, LAPLACE_KERNEL])
        degree_depends_on_poly = EqualsCondition(degree, kernel, POLY_KERNEL)
        scale_condition = InCondition(scale, kernel, [POLY_KERNEL, TANH_KERNEL])
        offset_condition = InCondition(offset, kernel, [POLY_KERNEL, TANH_KERNEL])
        cs.add(bandwidth_condition, degree_depends_on_poly, scale_condition, offset_condition)
        return cs

    @staticmethod
    def options_from_config(config):
        """Map a configuration of the search space to keyword arguments of step_kpca."""
        values = dict(config)
        kernel = KERNEL_ALIASES[values['kernel']]
        kernel_options = dict((key, values[key]) for key in KERNEL_OPTIONS[kernel] if key in values)
        return {'num_comp': int(values['num_comp']),
                'options': {'kernel': kernel, 'kernel_options': kernel_options}}


def step_kpca(recipe, *terms, role=PREDICTOR, trained=False, num_comp=5, res=None,
              options=None, num=None, prefix='kPC', skip=False, id=None):
    """
    Add a kernel PCA step to `recipe` and return the new recipe.

    rec = step_kpca(rec, all_predictors(), num_comp=2,
                    options={'kernel': 'radial-basis', 'kernel_options': {'bandwidth': 0.5}})
    """
    step = KernelPCAStep(terms, role=role, trained=trained, num_comp=num_comp, res=res,
                         options=options, num=num, prefix=prefix, skip=skip, id=id)
    return recipe.add_step(step)
