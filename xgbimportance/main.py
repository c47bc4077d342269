# xgbimportance/main.py
import argparse
import os

import yaml

from xgbimportance.data.dump_loader import DumpLoader
from xgbimportance.data.sources import build_request
from xgbimportance.models.xgboost_model import load_booster_artifact
from xgbimportance.pipelines.importance import importance_from_request
from xgbimportance.utils.env import load_env

DEFAULT_CFG = {
    "importance": {
        "dump_path": None,
        "model_path": None,
        "feature_names_path": None,
        "output_path": "reports/importance.csv",
        "detector": "position",
    },
    "mlflow": {"enabled": False, "experiment": None},
}


def load_cfg(path="params.yaml"):
    cfg = {section: dict(values) for section, values in DEFAULT_CFG.items()}
    if path and os.path.exists(path):
        with open(path, "r") as f:
            loaded = yaml.safe_load(f) or {}
        for section, values in loaded.items():
            cfg.setdefault(section, {}).update(values or {})
    return cfg


def read_feature_names(path):
    """One feature name per line; blank lines are ignored."""
    if not path:
        return None
    if not os.path.exists(path):
        raise FileNotFoundError(f"Feature names file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def apply_overrides(cfg, args, env_vars):
    imp = cfg["importance"]
    # CLI > params.yaml > .env; the (dump, model) pair comes from one layer only
    if args.dump or args.model:
        source = (args.dump, args.model)
    elif imp.get("dump_path") or imp.get("model_path"):
        source = (imp.get("dump_path"), imp.get("model_path"))
    else:
        source = (env_vars.get("IMPORTANCE_DUMP_PATH"), env_vars.get("IMPORTANCE_MODEL_PATH"))
    imp["dump_path"], imp["model_path"] = source
    imp["feature_names_path"] = args.feature_names or imp.get("feature_names_path")
    imp["output_path"] = args.output or imp.get("output_path") or env_vars.get("IMPORTANCE_OUTPUT_PATH")
    imp["detector"] = args.detector or imp.get("detector", "position")
    if args.mlflow:
        cfg["mlflow"]["enabled"] = True
    return cfg


def run_importance(cfg):
    imp = cfg["importance"]
    print("=" * 70); print("[INFO] STEP 1: Loading model dump"); print("=" * 70)
    model = load_booster_artifact(imp["model_path"]) if imp.get("model_path") else None
    request = build_request(
        feature_names=read_feature_names(imp.get("feature_names_path")),
        filename_dump=imp.get("dump_path"),
        model=model,
    )

    print("=" * 70); print("[INFO] STEP 2: Computing feature importance"); print("=" * 70)
    table = importance_from_request(request, detector=imp["detector"])
    print(f"[INFO] Features in table: {len(table)}")

    print("=" * 70); print("[INFO] STEP 3: Saving importance table"); print("=" * 70)
    source_path = imp.get("dump_path") or imp.get("model_path")
    out_path = DumpLoader(source_path, imp["output_path"]).save_table(table)

    if cfg["mlflow"].get("enabled"):
        print("=" * 70); print("[INFO] STEP 4: Logging to MLflow"); print("=" * 70)
        from xgbimportance.utils.mlflow_logging import log_importance_table
        log_importance_table(
            table,
            out_path,
            params={"source": source_path, "detector": imp["detector"]},
            experiment=cfg["mlflow"].get("experiment"),
        )

    print(table.head(20).to_string(index=False))
    print("\n[INFO] ✅ Importance pipeline executed successfully!")
    return table


def build_parser():
    parser = argparse.ArgumentParser(description="Feature importance from an XGBoost model dump.")
    parser.add_argument("--config", type=str, default="params.yaml")
    parser.add_argument("--dump", type=str, help="Text dump generated with statistics.")
    parser.add_argument("--model", type=str, help="joblib artifact of an XGBoost model.")
    parser.add_argument("--feature-names", dest="feature_names", type=str,
                        help="Text file with one feature name per line.")
    parser.add_argument("--output", type=str, help="CSV path for the importance table.")
    parser.add_argument("--detector", type=str, choices=["position", "scan"])
    parser.add_argument("--mlflow", action="store_true", help="Log the table to MLflow.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    env_vars = load_env()
    cfg = apply_overrides(load_cfg(args.config), args, env_vars)
    return run_importance(cfg)


if __name__ == "__main__":
    main()
