# xgbimportance/utils/env.py
from dotenv import load_dotenv
from pathlib import Path
import os

def load_env():
    """
    Carga variables de entorno desde el archivo .env (si existe)
    y devuelve un diccionario con las variables principales.
    """
    dotenv_path = Path(".") / ".env"
    if dotenv_path.exists():
        load_dotenv(dotenv_path)
        print("[INFO] .env file loaded.")
    else:
        print("[WARN] No .env found, using system environment variables.")

    return {
        "ENV": os.getenv("ENV", "local"),
        "EXPERIMENT_NAME": os.getenv("EXPERIMENT_NAME", "xgb-importance"),
        "MLFLOW_TRACKING_URI": os.getenv("MLFLOW_TRACKING_URI"),
        "IMPORTANCE_DUMP_PATH": os.getenv("IMPORTANCE_DUMP_PATH"),
        "IMPORTANCE_MODEL_PATH": os.getenv("IMPORTANCE_MODEL_PATH"),
        "IMPORTANCE_OUTPUT_PATH": os.getenv("IMPORTANCE_OUTPUT_PATH", "reports/importance.csv"),
    }
