# xgbimportance/models/xgboost_model/config.py

DUMP_CONFIG = {
    "fmap": "",              # sin fmap: features como f0, f1, ... o nombres del DataFrame
    "dump_format": "text",
}

ARTIFACT_CONFIG = {
    "pipeline_step": "regressor",  # nombre del estimador dentro de un sklearn Pipeline
}
