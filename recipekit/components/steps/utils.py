import types
import typing

import numpy as np
import pandas as pd
from scipy.spatial.distance import cdist

from recipekit.components.utils.constants import KERNEL_ALIASES, KERNEL_OPTIONS, SKLEARN_KERNELS, \
    DEFAULT_KERNEL_PARAMS, KERNEL_DEFAULTS, RESERVED_OPTIONS


def laplacian_kernel(X, Y=None, gamma=1.0):
    """exp(-gamma * ||x - y||) with the euclidean norm."""
    Y = X if Y is None else Y
    return np.exp(-gamma * cdist(X, Y, metric='euclidean'))


# Kernels KernelPCA does not know by name, evaluated here and handed over precomputed.
PRECOMPUTED_KERNELS = {'laplacian': laplacian_kernel}


class KernelParams(object):
    """
    Kernel configuration of a kernel PCA step.

    kernel: kernel identifier, see KERNEL_ALIASES for the accepted names.
    kernel_options: kernel hyperparameters, e.g. {'bandwidth': 0.2} for the radial basis kernel.
    extras: any other keyword, handed to sklearn.decomposition.KernelPCA untouched.

    The kernels follow the rbfdot/polydot/tanhdot/laplacedot definitions:
        radial-basis        exp(-bandwidth * ||x - y||^2)
        polynomial          (scale * <x, y> + offset) ^ degree
        hyperbolic-tangent  tanh(scale * <x, y> + offset)
        laplacian           exp(-bandwidth * ||x - y||)
    Unset options take the values in KERNEL_DEFAULTS (bandwidth 1, degree 1,
    scale 1, offset 1), not the data-dependent defaults of scikit-learn.

    The parameters are immutable; kernel_options and extras are read-only views.
    """

    def __init__(self, kernel=DEFAULT_KERNEL_PARAMS['kernel'], kernel_options=None, extras=None):
        if kernel not in KERNEL_ALIASES:
            raise ValueError('Unknown kernel: %s! Choose one of %s.' % (kernel, ', '.join(sorted(KERNEL_ALIASES))))
        kernel = KERNEL_ALIASES[kernel]
        kernel_options = dict(kernel_options) if kernel_options is not None else dict()
        extras = dict(extras) if extras is not None else dict()

        unknown = [key for key in kernel_options if key not in KERNEL_OPTIONS[kernel]]
        if unknown:
            raise ValueError('Invalid option(s) %s for the %s kernel. Valid options: %s.'
                             % (', '.join(unknown), kernel,
                                ', '.join(KERNEL_OPTIONS[kernel]) or 'none'))
        reserved = [key for key in extras if key in RESERVED_OPTIONS]
        if reserved:
            raise ValueError('Option(s) %s are set by the kernel PCA step and cannot be passed.'
                             % ', '.join(reserved))

        object.__setattr__(self, 'kernel', kernel)
        object.__setattr__(self, 'kernel_options', types.MappingProxyType(kernel_options))
        object.__setattr__(self, 'extras', types.MappingProxyType(extras))

    def __setattr__(self, key, value):
        raise AttributeError('KernelParams is immutable, build a new one instead.')

    def __reduce__(self):
        return self.__class__, (self.kernel, dict(self.kernel_options), dict(self.extras))

    @classmethod
    def from_dict(cls, options: typing.Optional[dict] = None):
        """
        Build the parameters from an options mapping such as
        {'kernel': 'polynomial', 'kernel_options': {'degree': 2}, 'eigen_solver': 'dense'}.

        Missing keys fall back to the defaults. Setting only the kernel drops the
        default options, which belong to the default kernel.
        """
        if options is None:
            options = dict()
        if isinstance(options, KernelParams):
            return cls(options.kernel, options.kernel_options, options.extras)
        options = dict(options)
        kernel = options.pop('kernel', DEFAULT_KERNEL_PARAMS['kernel'])
        if 'kernel_options' in options:
            kernel_options = options.pop('kernel_options')
        elif KERNEL_ALIASES.get(kernel) == DEFAULT_KERNEL_PARAMS['kernel']:
            kernel_options = DEFAULT_KERNEL_PARAMS['kernel_options']
        else:
            kernel_options = None
        return cls(kernel, kernel_options, extras=options)

    def to_dict(self):
        options = {'kernel': self.kernel, 'kernel_options': dict(self.kernel_options)}
        options.update(self.extras)
        return options

    def to_estimator_kwargs(self):
        options = dict(KERNEL_DEFAULTS.get(self.kernel, {}))
        options.update(self.kernel_options)

        kwargs = {'kernel': SKLEARN_KERNELS[self.kernel]}
        for key, value in options.items():
            kwargs[KERNEL_OPTIONS[self.kernel][key]] = value
        if 'degree' in kwargs:
            kwargs['degree'] = int(kwargs['degree'])
        for key in ['gamma', 'coef0']:
            if key in kwargs:
                kwargs[key] = float(kwargs[key])
        kwargs.update(self.extras)
        return kwargs

    def __eq__(self, other):
        if isinstance(other, KernelParams):
            return self.to_dict() == other.to_dict()
        return False

    def __hash__(self):
        return hash(repr(self))

    def __repr__(self):
        return 'KernelParams(%r)' % self.to_dict()

class KernelProjector(object):
    """
    A fitted kernel PCA basis.

    Remembers the columns it was fit on and projects any data holding
    those columns onto the retained components, ordered by decreasing
    eigenvalue. Directions with a zero eigenvalue are dropped, so fewer
    components than requested may be available.

    Kernels KernelPCA does not know by name (the laplacian) are evaluated
    by PRECOMPUTED_KERNELS and handed over precomputed, so the training
    matrix is kept to build the cross kernel when projecting.
    """

    def __init__(self, model, columns, params: KernelParams, metric=None, metric_params=None, X_fit=None):
        self.model = model
        self.columns = list(columns)
        self.params = params
        self.metric = metric
        self.metric_params = metric_params if metric_params is not None else dict()
        self.X_fit = X_fit

    @classmethod
    def fit(cls, data: pd.DataFrame, dimension, kernel=DEFAULT_KERNEL_PARAMS['kernel'],
            kernel_options=None, **extras):
        from sklearn.decomposition import KernelPCA

        params = KernelParams(kernel, kernel_options, extras)
        X = data.to_numpy(dtype=np.float64)
        kwargs = params.to_estimator_kwargs()

        metric, metric_params, X_fit = None, dict(), None
        if kwargs['kernel'] in PRECOMPUTED_KERNELS:
            metric = kwargs.pop('kernel')
            metric_params = dict((key, kwargs.pop(key)) for key in ['gamma'] if key in kwargs)
            kwargs['kernel'] = 'precomputed'
            X_fit = X

        model = KernelPCA(n_components=int(dimension), remove_zero_eig=True, **kwargs)
        if metric is None:
            model.fit(X)
        else:
            model.fit(PRECOMPUTED_KERNELS[metric](X, **metric_params))
        if len(model.eigenvalues_) == 0:
            raise ValueError('KernelPCA removed all features!')
        return cls(model, data.columns, params, metric, metric_params, X_fit)

    @property
    def kernel(self):
        return self.params.kernel

    @property
    def n_components(self):
        return len(self.model.eigenvalues_)

    def original_columns(self) -> typing.List[str]:
        return list(self.columns)

    def project(self, data: pd.DataFrame) -> np.ndarray:
        X = data[self.columns].to_numpy(dtype=np.float64)
        if self.metric is None:
            return self.model.transform(X)
        return self.model.transform(PRECOMPUTED_KERNELS[self.metric](X, self.X_fit, **self.metric_params))
