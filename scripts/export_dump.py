# scripts/export_dump.py
import argparse

from xgbimportance.models.xgboost_model import load_booster_artifact
from xgbimportance.utils.env import load_env


def main():
    parser = argparse.ArgumentParser(description="Write the text dump (with stats) of a saved XGBoost model.")
    parser.add_argument("model_path", help="models/xgboost/artifacts/model_<ts>.pkl")
    parser.add_argument("--out", default="models/xgboost/dump.txt")
    args = parser.parse_args()

    load_env()
    adapter = load_booster_artifact(args.model_path)
    path = adapter.save_dump(args.out, with_stats=True)
    print(f"[OK] Dump listo: {path}")
    if adapter.feature_names:
        print(f"[INFO] Feature names in model: {adapter.feature_names}")


if __name__ == "__main__":
    main()
