from enum import Enum
from pydantic import BaseModel
from typing import List, Optional

class IndexSummary(BaseModel):
    """Fila del inventario: un índice tal como lo reporta _cat/indices."""
    name: str = ""
    document_count: str = "0"
    store_size: str = "N/A"
    health: str = "N/A"
    status: str = "N/A"

class ClusterResponse(BaseModel):
    """Sobre de respuesta de una petición al clúster. Solo vive durante un fetch."""
    success: bool
    url: str
    status_code: Optional[int] = None
    body: str = ""
    debug_information: str = ""

class ErrorKind(str, Enum):
    CONFIGURATION_MISSING = "configuration_missing"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"

class CatalogError(BaseModel):
    kind: ErrorKind
    message: str

class IndexCatalogResult(BaseModel):
    """Resultado de un fetch: o todos los índices, o un único error."""
    indices: List[IndexSummary] = []
    error: Optional[CatalogError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, indices: List[IndexSummary]) -> "IndexCatalogResult":
        return cls(indices=indices)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "IndexCatalogResult":
        return cls(error=CatalogError(kind=kind, message=message))
