import argparse
import sys

def run_tui(direct=False):
    """Lanza el cliente de terminal."""
    print("Lanzando en modo Terminal (TUI)...")
    import subprocess
    command = [sys.executable, "-m", "src.main"]
    if direct:
        command.append("--direct")
    subprocess.run(command)


def run_gui():
    """Lanza la página web (Dash) del inventario."""
    import os
    import webbrowser
    from threading import Timer
    from src.config import GUI_PORT

    print("Lanzando en modo Gráfico (GUI)...")

    from gui.app import app

    # Solo abre el navegador si no estamos en un proceso de recarga (reload).
    if not os.environ.get("WERKZEUG_RUN_MAIN"):
        Timer(1, lambda: webbrowser.open(f"http://127.0.0.1:{GUI_PORT}")).start()

    print(f"Servidor Dash iniciado. Abre tu navegador en http://127.0.0.1:{GUI_PORT}")
    app.run(host='0.0.0.0', port=GUI_PORT, debug=False)


def run_api():
    """Lanza la API JSON con uvicorn."""
    import uvicorn
    from src.config import API_PORT

    print(f"Lanzando API en http://127.0.0.1:{API_PORT}/api/v1/indices")
    uvicorn.run("src.api:app", host="0.0.0.0", port=API_PORT)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="ES Index Inventory - Elige el modo de ejecución.")
    parser.add_argument(
        '--mode',
        type=str,
        choices=['tui', 'gui', 'api'],
        default='tui',
        help="Modo de interfaz: 'tui' para terminal (default), 'gui' para la página web, 'api' para la API JSON."
    )
    parser.add_argument('--direct', action='store_true', help="En modo 'tui', consulta Elasticsearch sin la API.")
    args = parser.parse_args()

    if args.mode == 'gui':
        run_gui()
    elif args.mode == 'api':
        run_api()
    else:
        run_tui(direct=args.direct)
