# xgbimportance/utils/mlflow_logging.py
import mlflow
import pandas as pd

from xgbimportance.utils.env import load_env


def _to_float(v):
    try:
        return float(v)
    except Exception:
        return v


def log_importance_table(df: pd.DataFrame, table_path: str, params: dict | None = None,
                         experiment: str | None = None, tracking_uri: str | None = None):
    """
    Log an already saved importance table to MLflow: params, a few summary
    metrics and the CSV as artifact. Returns the run id.
    """
    env_vars = load_env()
    tracking_uri = tracking_uri or env_vars["MLFLOW_TRACKING_URI"]
    if tracking_uri:
        mlflow.set_tracking_uri(tracking_uri)
    mlflow.set_experiment(experiment or env_vars["EXPERIMENT_NAME"])

    metrics = {"n_features": len(df)}
    if "Gain" in df.columns and len(df):
        metrics["top_gain"] = _to_float(df["Gain"].iloc[0])
    if "Weight" in df.columns and len(df):
        metrics["max_abs_weight"] = _to_float(df["Weight"].abs().max())

    with mlflow.start_run(run_name="feature_importance") as run:
        print(f"[INFO] MLflow run: {run.info.run_id}")
        mlflow.set_tags({"stage": "importance"})
        if params:
            mlflow.log_params(params)
        mlflow.log_metrics(metrics)
        mlflow.log_artifact(table_path)
        print(f"[INFO] Importance table logged to MLflow ({len(df)} features).")
        return run.info.run_id
