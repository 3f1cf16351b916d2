"""Tests for the kernel PCA hyperparameter search space."""

import pytest
from ConfigSpace import ConfigurationSpace

from recipekit.components.steps.kernel_pca import KernelPCAStep


def test_default_configuration():
    cs = KernelPCAStep.get_hyperparameter_search_space()
    assert isinstance(cs, ConfigurationSpace)
    kwargs = KernelPCAStep.options_from_config(cs.get_default_configuration())
    assert kwargs['num_comp'] == 5
    assert kwargs['options']['kernel'] == 'radial-basis'
    assert list(kwargs['options']['kernel_options']) == ['bandwidth']
    assert kwargs['options']['kernel_options']['bandwidth'] == pytest.approx(0.2)


def test_sampled_configurations_build_steps():
    cs = KernelPCAStep.get_hyperparameter_search_space()
    cs.seed(1)
    for config in cs.sample_configuration(30):
        kwargs = KernelPCAStep.options_from_config(config)
        step = KernelPCAStep(['x1', 'x2'], **kwargs)
        assert step.num_comp == config['num_comp']
        assert step.options.kernel == config['kernel']


def test_inactive_options_dropped():
    cs = KernelPCAStep.get_hyperparameter_search_space()
    cs.seed(3)
    for config in cs.sample_configuration(30):
        options = KernelPCAStep.options_from_config(config)['options']
        if options['kernel'] == 'linear':
            assert options['kernel_options'] == {}
        if options['kernel'] == 'polynomial':
            assert set(options['kernel_options']) == {'degree', 'scale', 'offset'}


def test_num_comp_bounded_by_features():
    cs = KernelPCAStep.get_hyperparameter_search_space({'n_features': 3})
    assert cs['num_comp'].upper == 3
    assert cs['num_comp'].default_value == 3


def test_sampled_configuration_fits(train_df, test_df):
    cs = KernelPCAStep.get_hyperparameter_search_space({'n_features': 4})
    cs.seed(7)
    configs = [config for config in cs.sample_configuration(20)
               if config['kernel'] in ['radial-basis', 'laplacian', 'linear']]
    for config in configs[:5]:
        step = KernelPCAStep(['x1', 'x2', 'x3', 'x4'], **KernelPCAStep.options_from_config(config))
        baked = step.prep(train_df).bake(test_df)
        assert baked.shape[0] == test_df.shape[0]
        assert 1 <= baked.shape[1] - 2 <= config['num_comp']
