# xgbimportance/models/xgboost_model/dump_adapter.py
import os
from typing import List, Optional

import joblib
import xgboost as xgb

from .config import DUMP_CONFIG, ARTIFACT_CONFIG


class BoosterDumpAdapter:
    """
    Exposes an XGBoost model (Booster, sklearn wrapper or a Pipeline ending in
    one) as a source of text-dump lines.
    """

    def __init__(self, model, dump_params=None, pipeline_step: Optional[str] = None):
        self.dump_params = dump_params or DUMP_CONFIG
        self.pipeline_step = pipeline_step or ARTIFACT_CONFIG["pipeline_step"]
        self.booster = self._unwrap(model)

    def _unwrap(self, model) -> xgb.Booster:
        # sklearn Pipeline (PipelineModelTrainer artifacts)
        if hasattr(model, "named_steps"):
            step = model.named_steps.get(self.pipeline_step)
            model = step if step is not None else model.steps[-1][1]
        if isinstance(model, xgb.Booster):
            return model
        if hasattr(model, "get_booster"):
            return model.get_booster()
        raise TypeError(f"Unsupported model type for dumping: {type(model).__name__}")

    @property
    def feature_names(self) -> Optional[List[str]]:
        return self.booster.feature_names

    def dump_lines(self, with_stats: bool = True) -> List[str]:
        """
        One ``booster[i]:`` header per tree followed by its lines, as in
        ``Booster.dump_model`` text files.
        """
        dumps = self.booster.get_dump(
            fmap=self.dump_params.get("fmap", ""),
            with_stats=with_stats,
            dump_format=self.dump_params.get("dump_format", "text"),
        )
        lines = []
        for i, tree in enumerate(dumps):
            lines.append(f"booster[{i}]:")
            lines.extend(line for line in tree.splitlines() if line.strip())
        return lines

    def save_dump(self, path: str, with_stats: bool = True) -> str:
        """
        Write the dump to a text file readable by DumpLoader.
        """
        out_dir = os.path.dirname(path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(self.dump_lines(with_stats=with_stats)) + "\n")
        print(f"[INFO] Model dump saved to: {path}")
        return path


def load_booster_artifact(path: str, **kwargs) -> BoosterDumpAdapter:
    """
    Load a joblib-pickled model (``models/<type>/artifacts/model_<ts>.pkl``)
    and wrap it for dumping.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Model artifact not found: {path}")
    model = joblib.load(path)
    print(f"[INFO] Loaded model artifact: {path} ({type(model).__name__})")
    return BoosterDumpAdapter(model, **kwargs)
