from .dump_adapter import BoosterDumpAdapter, load_booster_artifact
