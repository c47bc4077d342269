from fastapi import FastAPI, HTTPException

from xgbimportance import __version__
from xgbimportance.data.dump_loader import normalize_lines
from xgbimportance.errors import ImportanceError
from xgbimportance.parsing.format_detector import get_detector
from xgbimportance.pipelines.importance import compute_importance, tree_table
from .schemas import ImportanceRequestBody, ImportanceResponse, TreeTableResponse

app = FastAPI(
    title="XGBoost Feature Importance – API",
    description=(
        "Calcula la **importancia de features** a partir del dump de texto de un modelo XGBoost.\n\n"
        "Modelos de árboles: columnas `Gain`, `Cover`, `Frequency` normalizadas.\n"
        "Modelos lineales: columna `Weight` sin normalizar."
    ),
    version=__version__,
)


def _records(df):
    # NaN no es JSON válido
    return df.astype(object).where(df.notna(), None).to_dict(orient="records")


@app.get("/health", tags=["meta"])
def health():
    """Endpoint de estado."""
    return {"status": "ok", "version": __version__}


@app.post("/importance", response_model=ImportanceResponse, tags=["importance"])
def importance(req: ImportanceRequestBody):
    """Tabla de importancia para el dump enviado."""
    lines = normalize_lines(req.lines)
    try:
        mode = get_detector(req.detector)(lines)
        table = compute_importance(lines, req.feature_names, detector=req.detector)
    except ImportanceError as e:
        raise HTTPException(status_code=422, detail=f"{type(e).__name__}: {e}")
    return ImportanceResponse(mode=mode.value, n_features=len(table), rows=_records(table))


@app.post("/importance/tree", response_model=TreeTableResponse, tags=["importance"])
def importance_tree(req: ImportanceRequestBody):
    """Tabla de nodos (un registro por nodo de cada árbol)."""
    try:
        table = tree_table(req.lines, req.feature_names)
    except ImportanceError as e:
        raise HTTPException(status_code=422, detail=f"{type(e).__name__}: {e}")
    return TreeTableResponse(
        n_trees=int(table["Tree"].nunique()),
        n_nodes=len(table),
        rows=_records(table),
    )
