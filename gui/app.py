# gui/app.py
import dash
import dash_bootstrap_components as dbc
from src.config import ES_ENDPOINT
from .layout import main_layout

# Inicializa la aplicación Dash
app = dash.Dash(
    __name__,
    title="ES Index Inventory",
    external_stylesheets=[dbc.themes.VAPOR],
    suppress_callback_exceptions=True
)
server = app.server

app.layout = main_layout(ES_ENDPOINT)

# Importar el módulo registra los callbacks en la app
from . import callbacks
