import logging
from fastapi import FastAPI
from .catalog import fetch_index_catalog
from .config import ES_ENDPOINT, ES_API_KEY
from .models import IndexCatalogResult

app = FastAPI(title="ES Index Inventory API")

@app.get("/health")
def health_check():
    return {"status": "ok"}

# Siempre 200: los errores viajan en el campo 'error' del cuerpo
@app.get("/api/v1/indices", response_model=IndexCatalogResult, tags=["Inventario"])
def ep_get_indices():
    result = fetch_index_catalog(ES_ENDPOINT, ES_API_KEY)
    if not result.ok:
        logging.info(f"/api/v1/indices respondió con error de tipo {result.error.kind.value}")
    return result
