from .dump_loader import DumpLoader
from .sources import (
    DumpProducer,
    FilePathSource,
    ImportanceRequest,
    InMemoryModelSource,
    build_request,
    validate_feature_names,
)
