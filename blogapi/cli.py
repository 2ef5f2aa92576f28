import json

import typer
import uvicorn

from blogapi.core.config import configure_logging, settings

app = typer.Typer(help="Blog posts API command line.")


@app.command()
def serve(
    host: str = typer.Option(settings.HOST, "--host", help="Interface to bind"),
    port: int = typer.Option(settings.PORT, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
    log_level: str = typer.Option(settings.LOG_LEVEL, "--log-level"),
):
    """Run the API with uvicorn."""
    configure_logging(log_level)
    print(f"🚀 Serving {settings.PROJECT_NAME} on http://{host}:{port}{settings.API_PREFIX}")
    uvicorn.run(
        "blogapi.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


@app.command()
def routes(
    as_json: bool = typer.Option(False, "--json", help="Print the route table as JSON"),
):
    """List the HTTP routes the application exposes."""
    from blogapi.main import create_app

    # The OpenAPI document lists routes from included routers too
    paths = create_app().openapi()["paths"]
    table = [
        {"path": path, "method": method.upper()}
        for path, operations in paths.items()
        for method in operations
    ]
    if as_json:
        print(json.dumps(table, indent=2))
        return
    for row in table:
        print(f"{row['method']:<7} {row['path']}")


if __name__ == "__main__":
    app()
