"""Tests for Recipe: prep, bake, juice and the recipe-wide tidy summary."""

import os

import pandas as pd
import pytest

from recipekit import Recipe, step_kpca, all_predictors, all_numeric, starts_with
from recipekit.components.steps.kernel_pca import KernelPCAStep
from recipekit.components.utils.exceptions import RecipeNotTrainedError, SchemaError


@pytest.fixture
def recipe(train_df):
    rec = Recipe(train_df, outcomes=['y'], predictors=['x1', 'x2', 'x3', 'x4'])
    rec = step_kpca(rec, 'x1', 'x2', num_comp=1, prefix='a')
    rec = step_kpca(rec, 'x3', 'x4', num_comp=2, prefix='b')
    return rec


class TestRecipeInfo:
    def test_var_info(self, train_df):
        rec = Recipe(train_df, outcomes=['y'], predictors=['x1', 'x2', 'x3', 'x4'])
        info = rec.var_info.set_index('variable')
        assert info.loc['y', 'role'] == 'outcome'
        assert info.loc['x1', 'role'] == 'predictor'
        assert info.loc['x1', 'type'] == 'numeric'
        assert info.loc['sample', 'type'] == 'nominal'
        assert pd.isnull(info.loc['sample', 'role'])
        assert set(info['source']) == {'original'}

    def test_unknown_outcome(self, train_df):
        with pytest.raises(ValueError, match='nope'):
            Recipe(train_df, outcomes=['nope'])

    def test_add_step_returns_new_recipe(self, train_df):
        rec = Recipe(train_df, outcomes=['y'])
        new_rec = step_kpca(rec, starts_with('x'))
        assert rec.steps == tuple()
        assert len(new_rec.steps) == 1

    def test_add_step_rejects_other_objects(self, train_df):
        with pytest.raises(TypeError):
            Recipe(train_df).add_step('step_kpca')

    def test_add_step_rejects_duplicate_id(self, train_df):
        step = KernelPCAStep(['x1'], id='kpca_same')
        rec = Recipe(train_df).add_step(step)
        with pytest.raises(ValueError, match='kpca_same'):
            rec.add_step(KernelPCAStep(['x2'], id='kpca_same'))


class TestPrepBake:
    def test_prep_trains_every_step(self, recipe, train_df):
        trained = recipe.prep(train_df)
        assert trained.trained is True
        assert all(step.trained for step in trained.steps)
        assert recipe.trained is False
        assert not any(step.trained for step in recipe.steps)
        assert [step.id for step in trained.steps] == [step.id for step in recipe.steps]

    def test_prep_defaults_to_template(self, recipe):
        assert recipe.prep().trained is True

    def test_term_info_tracks_new_columns(self, recipe, train_df):
        info = recipe.prep(train_df).term_info.set_index('variable')
        assert 'x1' not in info.index
        assert info.loc['a1', 'source'] == 'derived'
        assert info.loc['b2', 'role'] == 'predictor'
        assert info.loc['b2', 'type'] == 'numeric'

    def test_bake(self, recipe, train_df, test_df):
        baked = recipe.prep(train_df).bake(test_df)
        assert list(baked.columns) == ['sample', 'y', 'a1', 'b1', 'b2']
        assert baked.shape[0] == test_df.shape[0]

    def test_bake_requires_prep(self, recipe, test_df):
        with pytest.raises(RecipeNotTrainedError):
            recipe.bake(test_df)

    def test_bake_missing_column(self, recipe, train_df, test_df):
        with pytest.raises(SchemaError):
            recipe.prep(train_df).bake(test_df.drop(columns=['x4']))

    def test_juice(self, recipe, train_df):
        trained = recipe.prep(train_df)
        juiced = trained.juice()
        assert list(juiced.columns) == ['sample', 'y', 'a1', 'b1', 'b2']
        pd.testing.assert_frame_equal(juiced, trained.bake(train_df))

    def test_juice_needs_retain(self, recipe, train_df):
        with pytest.raises(ValueError):
            recipe.prep(train_df, retain=False).juice()

    def test_juice_requires_prep(self, recipe):
        with pytest.raises(RecipeNotTrainedError):
            recipe.juice()

    def test_skip_step_not_baked(self, train_df, test_df):
        rec = step_kpca(Recipe(train_df, outcomes=['y']), 'x1', 'x2', num_comp=2, skip=True)
        trained = rec.prep(train_df)
        assert trained.steps[0].trained is True
        assert list(trained.juice().columns) == ['sample', 'y', 'x3', 'x4', 'kPC1', 'kPC2']
        pd.testing.assert_frame_equal(trained.bake(test_df), test_df)

    def test_trained_steps_reused(self, recipe, train_df):
        trained = recipe.prep(train_df)
        again = trained.prep(train_df)
        assert again.steps[0].res is trained.steps[0].res
        fresh = trained.prep(train_df, fresh=True)
        assert fresh.steps[0].res is not trained.steps[0].res

    def test_steps_chain_on_derived_columns(self, train_df, test_df):
        rec = Recipe(train_df, outcomes=['y'])
        rec = step_kpca(rec, starts_with('x'), num_comp=3)
        rec = step_kpca(rec, starts_with('kPC'), num_comp=1, prefix='second')
        baked = rec.prep(train_df).bake(test_df)
        assert list(baked.columns) == ['sample', 'y', 'second1']

    def test_all_predictors_with_nominal_column(self, train_df):
        rec = step_kpca(Recipe(train_df, outcomes=['y']), all_predictors())
        with pytest.raises(TypeError):
            rec.prep(train_df)


class TestTidy:
    def test_untrained(self, recipe):
        expected = pd.DataFrame({
            'number': [1, 2],
            'operation': ['step', 'step'],
            'type': ['kpca', 'kpca'],
            'trained': [False, False],
            'skip': [False, False],
            'id': [step.id for step in recipe.steps],
        })
        pd.testing.assert_frame_equal(recipe.tidy(), expected)

    def test_trained(self, recipe, train_df):
        trained = recipe.prep(train_df)
        res = trained.tidy()
        assert list(res['trained']) == [True, True]
        assert list(res['id']) == [step.id for step in recipe.steps]

    def test_step_number(self, recipe, train_df):
        trained = recipe.prep(train_df)
        res = trained.tidy(number=2)
        assert list(res['terms']) == ['x3', 'x4']
        assert set(res['id']) == {recipe.steps[1].id}

    def test_step_number_untrained(self, train_df):
        rec = step_kpca(Recipe(train_df, outcomes=['y']), all_numeric(), '-y')
        assert list(rec.tidy(number=1)['terms']) == ['all_numeric()', '-y']

    def test_bad_args(self, recipe, train_df):
        trained = recipe.prep(train_df)
        with pytest.raises(ValueError):
            trained.tidy(number=100)
        with pytest.raises(ValueError):
            trained.tidy(number=0)
        with pytest.raises(ValueError):
            trained.tidy(number='1')
        with pytest.raises(ValueError):
            Recipe(train_df).tidy()


class TestDisplay:
    def test_str(self, recipe, train_df):
        text = str(recipe)
        assert text.startswith('Data Recipe')
        assert 'outcome' in text
        assert 'Kernel PCA extraction with x1, x2' in text
        assert 'Kernel PCA (radial-basis) extraction with x3, x4 [trained]' in str(recipe.prep(train_df))


def test_log_file(train_df, tmp_path, reset_logging):
    log_file = os.path.join(str(tmp_path), 'logs', 'recipe.log')
    rec = step_kpca(Recipe(train_df, outcomes=['y'], log_file=log_file), 'x1', 'x2')
    rec.prep(train_df)
    with open(log_file) as f:
        content = f.read()
    assert 'Preparing 1 step(s) on 100 rows.' in content
