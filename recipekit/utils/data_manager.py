import pandas as pd

from recipekit.components.utils.constants import *
from recipekit.components.utils.utils import column_type


class DataManager(object):
    """
    This class builds the schema info the steps of a recipe are resolved against.

    The info is a DataFrame with one row per column of the data:
    1) variable: the column name.
    2) type: numeric or nominal.
    3) role: predictor, outcome, or a custom role assigned by a step.
    4) source: original for the columns of the template, derived for step outputs.
    """

    def __init__(self, outcomes=None, predictors=None, roles=None):
        self.outcomes = list(outcomes) if outcomes is not None else list()
        self.predictors = list(predictors) if predictors is not None else None
        self.roles = dict(roles) if roles is not None else dict()

    def get_role(self, col_name):
        if col_name in self.roles:
            return self.roles[col_name]
        if col_name in self.outcomes:
            return OUTCOME
        if self.predictors is None or col_name in self.predictors:
            return PREDICTOR
        return None

    def get_info(self, df: pd.DataFrame) -> pd.DataFrame:
        missing = [col for col in self.outcomes + (self.predictors or []) + list(self.roles)
                   if col not in df.columns]
        if missing:
            raise ValueError('Columns not found in the data: %s' % ', '.join(map(str, missing)))

        rows = list()
        for col_name in df.columns:
            rows.append([col_name, column_type(df[col_name]), self.get_role(col_name), ORIGINAL])
        return pd.DataFrame(rows, columns=INFO_COLUMNS)

    @staticmethod
    def update_info(info: pd.DataFrame, df: pd.DataFrame, role=PREDICTOR) -> pd.DataFrame:
        """
        Refresh `info` after a step produced `df`.

        Removed columns are dropped, surviving columns keep their info, and
        new columns are typed from the data and tagged with the step's role.
        """
        known = dict((row['variable'], row) for _, row in info.iterrows())
        rows = list()
        for col_name in df.columns:
            if col_name in known:
                rows.append([known[col_name][key] for key in INFO_COLUMNS])
            else:
                rows.append([col_name, column_type(df[col_name]), role, DERIVED])
        return pd.DataFrame(rows, columns=INFO_COLUMNS)
