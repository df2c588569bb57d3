from dash import dcc, html
import dash_bootstrap_components as dbc

# Estructura visual de la página
def main_layout(endpoint=None):
    return dbc.Container(
        [
            dcc.Location(id='url', refresh=False),

            dbc.Row(
                [
                    dbc.Col(html.H2("Inventario de Elasticsearch"), width='auto'),
                    dbc.Col(html.H5(endpoint or "ES_ENDPOINT sin configurar", className="mb-0 text-white-50"), width='auto'),
                    dbc.Col(dbc.Button("Actualizar", id='refresh-button', color="primary", n_clicks=0), width='auto', className="ms-auto"),
                ],
                align="center",
                className="mt-3"
            ),

            html.Hr(),

            # Área de contenido que se rellena desde el callback
            html.Div(id='page-content')
        ],
        fluid=True,
        className="dbc"
    )
