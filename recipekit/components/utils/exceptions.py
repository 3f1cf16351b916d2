"""
Exceptions raised by recipes and their steps.

Fatal conditions are raised as soon as they are detected and never
recovered from inside a step. Failures of the numerical backend are
not wrapped and reach the caller as raised by scikit-learn.
"""

from typing import List, Optional


class RecipeError(Exception):
    """Base exception for all recipe-related errors."""

    def __init__(self, message: str, step_id: Optional[str] = None):
        self.message = message
        self.step_id = step_id

        error_parts = [message]
        if step_id is not None:
            error_parts.append("Step: %s" % step_id)

        super().__init__(" | ".join(error_parts))


class DependencyMissingError(RecipeError, ImportError):
    """Raised at construction when a required package cannot be imported."""

    def __init__(self, packages: List[str], step_id: Optional[str] = None):
        self.packages = list(packages)
        message = "This step requires the package(s): %s. " \
                  "Install with `pip install %s`." % (', '.join(self.packages), ' '.join(self.packages))
        super().__init__(message, step_id)


class SelectionError(RecipeError, ValueError):
    """Raised when selectors are malformed or resolve to no columns."""
    pass


class TypeMismatchError(RecipeError, TypeError):
    """Raised when selected columns do not have the type a step needs."""

    def __init__(self, message: str, columns: List[str], step_id: Optional[str] = None):
        self.columns = list(columns)
        super().__init__(message, step_id)


class SchemaError(RecipeError, ValueError):
    """Raised when new data lacks columns a trained step was fit on."""

    def __init__(self, message: str, columns: List[str], step_id: Optional[str] = None):
        self.columns = list(columns)
        super().__init__(message, step_id)


class StepNotTrainedError(RecipeError, RuntimeError):
    """Raised when a step is applied before it has been prepped."""
    pass


class RecipeNotTrainedError(RecipeError, RuntimeError):
    """Raised when a recipe is baked or juiced before it has been prepped."""
    pass
