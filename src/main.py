# main.py
import httpx
import argparse
from pydantic import ValidationError
from rich.console import Console
from rich.rule import Rule
from rich.markup import escape
import src.renderer as renderer
from src.catalog import fetch_index_catalog
from src.config import API_BASE_URL, API_PORT, ES_ENDPOINT, ES_API_KEY
from src.models import IndexCatalogResult

console = Console()

def check_api_health():
    """Verifica si el servidor de la API está en ejecución."""
    try:
        with console.status("[yellow]Verificando conexión con la API...[/yellow]"):
            response = httpx.get(f"http://127.0.0.1:{API_PORT}/health", timeout=2)
            response.raise_for_status()
        console.print("[bold green]✔ Conexión con la API establecida.[/bold green]")
        return True
    except (httpx.RequestError, httpx.HTTPStatusError):
        console.print("\n[bold red]❌ Error: No se pudo conectar al servidor de la API.[/bold red]")
        console.print("Por favor, inicia el servidor en otro terminal con: [cyan]python run.py --mode api[/cyan]")
        console.print("o consulta el clúster directamente con: [cyan]python -m src.main --direct[/cyan]\n")
        return False

def run_api_mode():
    """Pide el inventario a la API y lo renderiza."""
    if not check_api_health():
        return

    try:
        # El timeout de la API cubre los 30s que puede tardar Elasticsearch
        with console.status("[yellow]Consultando índices...[/yellow]"):
            response = httpx.get(f"{API_BASE_URL}/indices", timeout=40.0)
            response.raise_for_status()
        renderer.print_index_catalog(IndexCatalogResult.model_validate(response.json()))
    except httpx.RequestError as e:
        console.print(f"[red]Error de API: {e}[/red]")
    except httpx.HTTPStatusError as e:
        console.print(f"[red]Error en la respuesta de la API ({e.response.status_code}): {escape(e.response.text)}[/red]")
    except (ValueError, ValidationError) as e:
        # Cuerpo que no es JSON o que no tiene la forma de IndexCatalogResult
        console.print(f"[red]Respuesta inválida de la API: {escape(str(e))}[/red]")

def run_direct_mode():
    """Consulta Elasticsearch sin pasar por la API."""
    with console.status(f"[yellow]Consultando índices en {ES_ENDPOINT or '(sin configurar)'}...[/yellow]"):
        result = fetch_index_catalog(ES_ENDPOINT, ES_API_KEY)
    renderer.print_index_catalog(result)

def main():
    parser = argparse.ArgumentParser(description="Inventario de índices de Elasticsearch (Cliente TUI).")
    parser.add_argument('--direct', action='store_true', help='Consulta el clúster directamente, sin la API.')
    args = parser.parse_args()

    console.print(Rule("[bold]Inventario de Índices de Elasticsearch[/bold]"))
    if args.direct:
        run_direct_mode()
    else:
        run_api_mode()

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        console.print("\n[bold]Interrupción por teclado. Saliendo...[/bold]")
