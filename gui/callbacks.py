# gui/callbacks.py
from dash import Input, Output, html
import dash_bootstrap_components as dbc
import traceback
from .app import app
from . import components
from src.catalog import fetch_index_catalog
from src.config import ES_ENDPOINT, ES_API_KEY

@app.callback(Output('page-content', 'children'), Input('url', 'pathname'), Input('refresh-button', 'n_clicks'))
def display_page(pathname, n_clicks):
    # Cada carga de página o clic en "Actualizar" hace un único fetch
    result = fetch_index_catalog(ES_ENDPOINT, ES_API_KEY)
    try:
        return dbc.Spinner(children=[components.render_index_catalog_view(result)], color="primary")
    except Exception:
        return dbc.Alert([html.H4("Error al Renderizar Vista"), html.Pre(traceback.format_exc())], color="danger", className="m-4")
