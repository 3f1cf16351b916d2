import os
from recipekit.components.steps.base_step import Step
from recipekit.components.utils.class_loader import find_components, ThirdPartyComponents

"""
Load the build-in steps.
"""
steps_directory = os.path.split(__file__)[0]
_steps = find_components(__package__, steps_directory, Step)

"""
Load third-party steps.
"""
_addons = ThirdPartyComponents(Step)


def add_step_type(step_class):
    if step_class.type in _steps:
        raise ValueError('Step type %s is already built in!' % step_class.type)
    _addons.add_component(step_class)


def get_step_types():
    steps = _steps.copy()
    steps.update(_addons.components)
    return steps
