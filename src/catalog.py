import json
import logging
from typing import Any, Callable, List, Optional
from urllib.parse import urlparse

import requests

from .client import ElasticsearchClient
from .config import CAT_INDICES_PATH, CAT_INDICES_COLUMNS, REQUEST_TIMEOUT_S, VERIFY_SSL
from .models import IndexSummary, IndexCatalogResult, ErrorKind

CONFIG_MISSING_MESSAGE = "Falta la configuración de Elasticsearch. Revisa ES_ENDPOINT y ES_API_KEY en el archivo .env"

# Campo de _cat/indices -> (atributo de IndexSummary, valor por defecto)
FIELD_DEFAULTS = {
    "index": ("name", ""),
    "docs.count": ("document_count", "0"),
    "store.size": ("store_size", "N/A"),
    "health": ("health", "N/A"),
    "status": ("status", "N/A"),
}


class MalformedCatalogError(ValueError):
    """El cuerpo de _cat/indices no es JSON válido o no es un array."""


def _as_text(value: Any, default: str) -> str:
    if isinstance(value, str):
        return value
    # bool es subclase de int, no lo tratamos como número
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def normalize_index_entry(entry: Any) -> IndexSummary:
    """
    Convierte un elemento de _cat/indices en un IndexSummary.

    Cada campo se resuelve por separado: si falta, es null o no es un escalar,
    se usa su valor por defecto. Un elemento que no es un objeto produce un
    registro con todos los valores por defecto.
    """
    if not isinstance(entry, dict):
        entry = {}
    values = {attr: _as_text(entry.get(field), default) for field, (attr, default) in FIELD_DEFAULTS.items()}
    return IndexSummary(**values)


def parse_index_catalog(body: str) -> List[IndexSummary]:
    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as e:
        raise MalformedCatalogError(f"Respuesta no es JSON válido: {e}") from e
    if not isinstance(payload, list):
        raise MalformedCatalogError(f"Se esperaba un array JSON y se recibió {type(payload).__name__}")
    return [normalize_index_entry(entry) for entry in payload]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _is_absolute_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:
        # p.ej. "http://[::1" -> Invalid IPv6 URL
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class IndexCatalogFetcher:
    """Obtiene el catálogo de índices del clúster en una única petición, sin reintentos."""
    def __init__(self, session_factory: Callable[[], requests.Session] = requests.Session,
                 timeout: float = REQUEST_TIMEOUT_S, verify_ssl: bool = VERIFY_SSL):
        self.session_factory = session_factory
        self.timeout = timeout
        self.verify_ssl = verify_ssl

    def fetch(self, endpoint: Optional[str], credential: Optional[str]) -> IndexCatalogResult:
        if _is_blank(endpoint) or _is_blank(credential):
            logging.error("No se consultan los índices: ES_ENDPOINT o ES_API_KEY no están configurados.")
            return IndexCatalogResult.failure(ErrorKind.CONFIGURATION_MISSING, CONFIG_MISSING_MESSAGE)

        endpoint = endpoint.strip()
        if not _is_absolute_url(endpoint):
            logging.error(f"No se consultan los índices: ES_ENDPOINT no es una URL absoluta ({endpoint})")
            return IndexCatalogResult.failure(
                ErrorKind.CONFIGURATION_MISSING,
                f"ES_ENDPOINT debe ser una URL absoluta http(s), se recibió '{endpoint}'. {CONFIG_MISSING_MESSAGE}"
            )

        try:
            with ElasticsearchClient(endpoint, credential.strip(), verify_ssl=self.verify_ssl,
                                     timeout=self.timeout, session=self.session_factory()) as client:
                response = client.get(CAT_INDICES_PATH, params={"format": "json", "h": ",".join(CAT_INDICES_COLUMNS)})
        except Exception as e:
            # Fallos fuera de requests, p.ej. una API Key que no se puede codificar en la cabecera
            logging.error(f"Error de conexión con Elasticsearch ({endpoint}): {e}", exc_info=True)
            return IndexCatalogResult.failure(ErrorKind.TRANSPORT_FAILURE, f"Error de conexión con Elasticsearch: {e}")

        if not response.success:
            logging.error(f"Fallo al obtener los índices: {response.debug_information}")
            return IndexCatalogResult.failure(
                ErrorKind.TRANSPORT_FAILURE,
                f"Fallo al obtener los índices: {response.debug_information}"
            )

        try:
            indices = parse_index_catalog(response.body)
        except MalformedCatalogError as e:
            logging.error(f"Error de conexión con Elasticsearch ({response.url}): {e}", exc_info=True)
            return IndexCatalogResult.failure(ErrorKind.MALFORMED_RESPONSE, f"Error de conexión con Elasticsearch: {e}")

        logging.info(f"Índices obtenidos correctamente de Elasticsearch: {len(indices)}")
        return IndexCatalogResult.success(indices)


def fetch_index_catalog(endpoint: Optional[str], credential: Optional[str]) -> IndexCatalogResult:
    return IndexCatalogFetcher().fetch(endpoint, credential)
