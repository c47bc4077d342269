# api/app/schemas.py
from pydantic import BaseModel, Field
from typing import Optional, Dict, List, Literal, Any

class ImportanceRequestBody(BaseModel):
    """
    Schema de entrada para /importance y /importance/tree.
    Envía las líneas del dump (generado con estadísticas) y, opcionalmente,
    los nombres de las features en orden posicional.
    """
    lines: List[str] = Field(
        min_length=1,
        description="Líneas del dump de texto del modelo XGBoost."
    )
    feature_names: Optional[List[str]] = Field(
        default=None,
        description="Nombres de features; índice i reemplaza a 'fi'."
    )
    detector: Literal["position", "scan"] = Field(
        default="position",
        description="Detección por posición (línea 2 == 'bias:') o por contenido."
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"lines": ["booster[0]:", "bias:", "0.5", "weight:", "1.0", "2.0"],
                 "feature_names": ["nsm", "co2"]},
                {"lines": [
                    "booster[0]:",
                    "0:[f0<30] yes=1,no=2,missing=1,gain=10,cover=5",
                    "\t1:leaf=0.1,cover=2",
                    "\t2:leaf=-0.1,cover=3"
                ]}
            ]
        }
    }

class ImportanceResponse(BaseModel):
    """Schema de salida de /importance."""
    mode: Literal["tree", "linear"] = Field(description="Tipo de modelo detectado en el dump.")
    n_features: int = Field(description="Filas de la tabla.")
    rows: List[Dict[str, Any]] = Field(description="Registros de la tabla de importancia.")

class TreeTableResponse(BaseModel):
    """Schema de salida de /importance/tree."""
    n_trees: int
    n_nodes: int
    rows: List[Dict[str, Any]]
