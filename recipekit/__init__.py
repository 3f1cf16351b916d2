from recipekit.pkginfo import version as __version__
from recipekit.recipe import Recipe
from recipekit.components.steps import Step, add_step_type
from recipekit.components.steps.kernel_pca import KernelPCAStep, step_kpca
from recipekit.components.steps.utils import KernelParams, KernelProjector
from recipekit.components.selections import all_predictors, all_outcomes, all_numeric, all_nominal, \
    has_role, has_type, starts_with, ends_with, contains, matches
from recipekit.components.utils.exceptions import RecipeError, DependencyMissingError, SelectionError, \
    TypeMismatchError, SchemaError, StepNotTrainedError, RecipeNotTrainedError
