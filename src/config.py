import os
import logging
from dotenv import load_dotenv
import urllib3

# --- Configuración Inicial ---
load_dotenv()
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

# Configuración del logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format='%(asctime)s - %(levelname)s - %(message)s',
    filename=os.getenv("LOG_FILE", "inventory_debug.log"),
    filemode='w'
)

# --- Conexión a Elasticsearch ---
ES_ENDPOINT = os.getenv("ES_ENDPOINT")
ES_API_KEY = os.getenv("ES_API_KEY")
VERIFY_SSL = os.getenv("ES_VERIFY_SSL", "false").lower() in ("1", "true", "yes")
HEADERS = {'Content-Type': 'application/json'}
REQUEST_TIMEOUT_S = 30

# --- Catálogo de Índices ---
CAT_INDICES_PATH = "_cat/indices"
CAT_INDICES_COLUMNS = ["index", "docs.count", "store.size", "health", "status"]

# --- Parámetros de la Herramienta ---
API_PORT = 8000
GUI_PORT = 8050
API_BASE_URL = f"http://127.0.0.1:{API_PORT}/api/v1"
