import requests
import logging
from .config import HEADERS, VERIFY_SSL, REQUEST_TIMEOUT_S
from .models import ClusterResponse

class ElasticsearchClient:
    """
    Cliente de bajo nivel para la API de Elasticsearch con autenticación por API Key.

    Nunca lanza excepciones por fallos de transporte: cualquier error de red,
    timeout o código HTTP no 2xx se devuelve como un ClusterResponse con
    success=False y el diagnóstico en debug_information.

    El cliente toma posesión de la sesión (propia o inyectada) y la cierra en close().
    """
    def __init__(self, endpoint, api_key, verify_ssl=VERIFY_SSL, timeout=REQUEST_TIMEOUT_S, session=None):
        self.base_url = endpoint.rstrip("/")
        self.headers = {**HEADERS, 'Authorization': f"ApiKey {api_key}"}
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        self.session.close()

    def request(self, method, path, params=None) -> ClusterResponse:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.session.request(
                method, url,
                headers=self.headers, params=params,
                verify=self.verify_ssl, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logging.warning(f"Fallo en petición {method} a {url}: {e}")
            return ClusterResponse(success=False, url=url, debug_information=f"{type(e).__name__}: {e}")

        if not 200 <= response.status_code < 300:
            # El cuerpo de error de Elasticsearch puede ser largo; nos quedamos con el inicio
            debug_info = f"HTTP {response.status_code} {response.reason} en {method} {url}: {response.text[:500]}"
            logging.warning(f"Respuesta no exitosa desde {url}: {response.status_code}")
            return ClusterResponse(
                success=False, url=url, status_code=response.status_code,
                body=response.text, debug_information=debug_info
            )

        return ClusterResponse(success=True, url=url, status_code=response.status_code, body=response.text)

    def get(self, path, params=None) -> ClusterResponse:
        return self.request("GET", path, params=params)
