"""
Constants used in variable types
"""
NUMERIC = 'numeric'
NOMINAL = 'nominal'

"""
Constants used in variable roles
"""
PREDICTOR = 'predictor'
OUTCOME = 'outcome'

"""
Constants used in variable sources
"""
ORIGINAL = 'original'
DERIVED = 'derived'

INFO_COLUMNS = ['variable', 'type', 'role', 'source']

"""
Constants used in recipe operations
"""
STEP = 'step'

TIDY_COLUMNS = ['number', 'operation', 'type', 'trained', 'skip', 'id']

"""
Kernel identifiers and the aliases accepted for them
"""
RBF_KERNEL = 'radial-basis'
POLY_KERNEL = 'polynomial'
LINEAR_KERNEL = 'linear'
TANH_KERNEL = 'hyperbolic-tangent'
LAPLACE_KERNEL = 'laplacian'
COSINE_KERNEL = 'cosine'

KERNEL_ALIASES = {RBF_KERNEL: RBF_KERNEL, 'rbfdot': RBF_KERNEL, 'rbf': RBF_KERNEL,
                  POLY_KERNEL: POLY_KERNEL, 'polydot': POLY_KERNEL, 'poly': POLY_KERNEL,
                  LINEAR_KERNEL: LINEAR_KERNEL, 'vanilladot': LINEAR_KERNEL,
                  TANH_KERNEL: TANH_KERNEL, 'tanhdot': TANH_KERNEL, 'sigmoid': TANH_KERNEL,
                  LAPLACE_KERNEL: LAPLACE_KERNEL, 'laplacedot': LAPLACE_KERNEL,
                  COSINE_KERNEL: COSINE_KERNEL}

# Options each kernel understands, with the scikit-learn argument they map to.
KERNEL_OPTIONS = {RBF_KERNEL: {'bandwidth': 'gamma', 'sigma': 'gamma'},
                  POLY_KERNEL: {'degree': 'degree', 'scale': 'gamma', 'offset': 'coef0'},
                  LINEAR_KERNEL: {},
                  TANH_KERNEL: {'scale': 'gamma', 'offset': 'coef0'},
                  LAPLACE_KERNEL: {'bandwidth': 'gamma', 'sigma': 'gamma'},
                  COSINE_KERNEL: {}}

SKLEARN_KERNELS = {RBF_KERNEL: 'rbf',
                   POLY_KERNEL: 'poly',
                   LINEAR_KERNEL: 'linear',
                   TANH_KERNEL: 'sigmoid',
                   LAPLACE_KERNEL: 'laplacian',
                   COSINE_KERNEL: 'cosine'}

DEFAULT_KERNEL_PARAMS = {'kernel': RBF_KERNEL,
                         'kernel_options': {'bandwidth': 0.2}}

# Values of the kernel options left unset.
KERNEL_DEFAULTS = {RBF_KERNEL: {'bandwidth': 1.0},
                   POLY_KERNEL: {'degree': 1, 'scale': 1.0, 'offset': 1.0},
                   TANH_KERNEL: {'scale': 1.0, 'offset': 1.0},
                   LAPLACE_KERNEL: {'bandwidth': 1.0}}

# KernelPCA and projector arguments set by the step itself.
RESERVED_OPTIONS = ['n_components', 'remove_zero_eig', 'kernel', 'kernel_options',
                    'data', 'dimension', 'x', 'X']

"""
Import names of optional packages and the distributions that provide them
"""
PACKAGE_DISTRIBUTIONS = {'sklearn': 'scikit-learn',
                         'scipy': 'scipy',
                         'ConfigSpace': 'ConfigSpace'}
