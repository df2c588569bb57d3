from dash import html
import dash_bootstrap_components as dbc
import pandas as pd

HEALTH_COLORS = {"green": "success", "yellow": "warning", "red": "danger"}
TABLE_COLUMNS = {
    "name": "Índice",
    "document_count": "Documentos",
    "store_size": "Tamaño",
    "health": "Salud",
    "status": "Estado",
}

# --- Helpers de UI ---
def create_kpi_card(title, value, color="light", subtitle=None):
    """Crea una tarjeta para un Indicador Clave de Rendimiento (KPI)."""
    return dbc.Card(
        dbc.CardBody(
            [
                html.H5(title, className="card-title text-muted"),
                html.H2(value, className=f"card-text text-{color}"),
                html.P(subtitle, className="card-text small text-muted") if subtitle else None,
            ]
        ),
        className="text-center m-2 shadow-sm",
    )

def health_badge(health):
    return dbc.Badge(health.upper(), color=HEALTH_COLORS.get(health, "secondary"))

def catalog_to_dataframe(indices):
    """Pasa la lista de IndexSummary a un DataFrame conservando el orden del clúster."""
    df = pd.DataFrame([index.model_dump() for index in indices], columns=list(TABLE_COLUMNS))
    return df

def df_to_dbc_table(df, title):
    """Convierte el DataFrame del inventario en una tabla estilizada de Dash Bootstrap."""
    if df.empty:
        return dbc.Alert(f"No hay datos para mostrar en '{title}'.", color="info")

    table_header = [html.Thead(html.Tr([html.Th(TABLE_COLUMNS.get(col, col)) for col in df.columns]))]
    table_body = [html.Tbody([
        html.Tr([html.Td(health_badge(value) if col == "health" else str(value)) for col, value in row.items()])
        for _, row in df.iterrows()
    ])]

    return html.Div([
        html.H4(title),
        dbc.Table(table_header + table_body, bordered=True, striped=True, hover=True, responsive=True)
    ])

# --- Vistas de Página Completa ---

def render_index_catalog_view(result):
    """Crea el layout del inventario: KPIs + tabla de índices, o la alerta de error."""
    if not result.ok:
        return dbc.Alert([html.H4("Error al consultar Elasticsearch"), html.P(result.error.message)], color="danger", className="m-4")

    df = catalog_to_dataframe(result.indices)
    if df.empty:
        return dbc.Alert("El clúster no tiene índices.", color="info", className="m-4")

    # docs.count llega como texto; lo que no sea numérico cuenta como 0
    total_docs = int(pd.to_numeric(df['document_count'], errors='coerce').fillna(0).sum())
    health_counts = df['health'].value_counts()

    return html.Div([
        html.H3("🗂️ Inventario de Índices"),
        dbc.Row([
            dbc.Col(create_kpi_card("Índices", len(df))),
            dbc.Col(create_kpi_card("Documentos", f"{total_docs:,}")),
            dbc.Col(create_kpi_card("Green", int(health_counts.get("green", 0)), "success")),
            dbc.Col(create_kpi_card("Yellow", int(health_counts.get("yellow", 0)), "warning")),
            dbc.Col(create_kpi_card("Red", int(health_counts.get("red", 0)), "danger")),
        ]),
        html.Hr(className="my-4"),
        df_to_dbc_table(df, "Índices del Clúster")
    ])
