from datetime import datetime
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from .models import IndexCatalogResult

console = Console()

HEALTH_STYLES = {"green": "green", "yellow": "yellow", "red": "bold red"}
STATUS_STYLES = {"open": "cyan", "close": "dim"}

def _styled(value: str, styles: dict) -> str:
    style = styles.get(value)
    return f"[{style}]{value}[/{style}]" if style else escape(value)

def build_index_table(result: IndexCatalogResult) -> Table:
    table = Table(title=f"[b]Índices del Clúster[/b] ({len(result.indices)})", expand=True)
    cols = ["Índice", "Documentos", "Tamaño", "Salud", "Estado"]
    styles = ["cyan", "white", "white", "white", "white"]
    justifies = ["left", "right", "right", "center", "center"]
    for col, style, justify in zip(cols, styles, justifies): table.add_column(col, style=style, justify=justify)

    # Se respeta el orden devuelto por el clúster
    for index in result.indices:
        table.add_row(escape(index.name), escape(index.document_count), escape(index.store_size),
                      _styled(index.health, HEALTH_STYLES), _styled(index.status, STATUS_STYLES))
    return table

def render_index_catalog(result: IndexCatalogResult) -> Panel:
    """Devuelve el panel a imprimir: la tabla de índices o el mensaje de error."""
    if not result.ok:
        return Panel(f"[bold red]❌ {escape(result.error.message)}[/bold red]", title="[b red]Error[/b red]", border_style="red")
    if not result.indices:
        return Panel("[yellow]El clúster no tiene índices.[/yellow]", title="[b cyan]Inventario de Índices[/b cyan]", border_style="yellow")
    subtitle = f"Última Actualización: {datetime.now().strftime('%H:%M:%S')}"
    return Panel(build_index_table(result), title="[b cyan]Inventario de Índices[/b cyan]", subtitle=subtitle, border_style="cyan")

def print_index_catalog(result: IndexCatalogResult):
    console.print(render_index_catalog(result))
