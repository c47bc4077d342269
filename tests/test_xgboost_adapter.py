import types

import joblib
import numpy as np
import pandas as pd
import pytest
import xgboost as xgb
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from xgbimportance.data.dump_loader import DumpLoader
from xgbimportance.models.xgboost_model import BoosterDumpAdapter, load_booster_artifact
from xgbimportance.pipelines.importance import compute_importance, xgb_importance


@pytest.fixture
def training_data():
    rng = np.random.default_rng(0)
    X = pd.DataFrame(
        {
            "nsm": rng.uniform(0, 86400, 64),
            "co2": rng.uniform(0, 1, 64),
            "noise": rng.normal(size=64),
        }
    )
    y = 3 * X["co2"] + X["nsm"] / 86400.0
    return X, y


def _xgb_params(**overrides):
    params = {
        "n_estimators": 5,
        "max_depth": 2,
        "learning_rate": 0.3,
        "random_state": 0,
        "n_jobs": 1,
    }
    params.update(overrides)
    return params


def test_tree_model_dump_gives_normalized_table(training_data):
    X, y = training_data
    model = xgb.XGBRegressor(**_xgb_params()).fit(X, y)

    adapter = BoosterDumpAdapter(model)
    lines = adapter.dump_lines()
    assert lines[0] == "booster[0]:"
    assert sum(line.startswith("booster[") for line in lines) == 5

    table = compute_importance(lines)
    assert set(table["Feature"]).issubset(set(X.columns))
    assert "co2" in set(table["Feature"])
    for col in ("Gain", "Cover", "Frequency"):
        assert table[col].sum() == pytest.approx(1.0, abs=1e-9)


def test_linear_model_dump_is_detected(training_data):
    X, y = training_data
    model = xgb.XGBRegressor(**_xgb_params(booster="gblinear")).fit(X, y)

    lines = BoosterDumpAdapter(model).dump_lines()
    assert lines[1] == "bias:"

    table = xgb_importance(list(X.columns), model=BoosterDumpAdapter(model))
    assert table["Feature"].tolist() == list(X.columns)
    assert list(table.columns) == ["Feature", "Weight"]


def test_pipeline_artifact_round_trip(tmp_path, training_data):
    X, y = training_data
    pipeline = Pipeline(
        steps=[
            ("preprocessor", StandardScaler()),
            ("regressor", xgb.XGBRegressor(**_xgb_params())),
        ]
    ).fit(X.to_numpy(), y)
    path = tmp_path / "models" / "xgboost" / "artifacts" / "model_20240101.pkl"
    path.parent.mkdir(parents=True)
    joblib.dump(pipeline, path)

    adapter = load_booster_artifact(str(path))
    names = ["nsm", "co2", "noise"]
    table = xgb_importance(names, model=adapter)
    assert set(table["Feature"]).issubset(set(names))

    # same table through a dump file
    dump_path = adapter.save_dump(str(tmp_path / "dump.txt"))
    assert DumpLoader(dump_path).load_lines() == adapter.dump_lines()
    from_file = xgb_importance(names, filename_dump=dump_path)
    pd.testing.assert_frame_equal(from_file, table)


def test_load_booster_artifact_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_booster_artifact(str(tmp_path / "nope.pkl"))


def test_adapter_rejects_unknown_models():
    with pytest.raises(TypeError):
        BoosterDumpAdapter(object())


def test_adapter_uses_dump_params():
    calls = {}

    class FakeBooster:
        def get_dump(self, fmap="", with_stats=False, dump_format="text"):
            calls.update(fmap=fmap, with_stats=with_stats, dump_format=dump_format)
            return ["0:leaf=0.5,cover=3\n", "0:[f0<1] yes=1,no=2,missing=1,gain=2,cover=3\n\t1:leaf=1\n\t2:leaf=2\n"]

    wrapper = types.SimpleNamespace(get_booster=lambda: FakeBooster())
    adapter = BoosterDumpAdapter(wrapper, dump_params={"fmap": "fmap.txt", "dump_format": "text"})

    assert adapter.dump_lines() == [
        "booster[0]:",
        "0:leaf=0.5,cover=3",
        "booster[1]:",
        "0:[f0<1] yes=1,no=2,missing=1,gain=2,cover=3",
        "\t1:leaf=1",
        "\t2:leaf=2",
    ]
    assert calls == {"fmap": "fmap.txt", "with_stats": True, "dump_format": "text"}
