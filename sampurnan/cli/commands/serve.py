import uvicorn


def serve(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server in the foreground.

    Args:
        host: Interface to bind.
        port: Port to listen on.
        reload: Restart on code changes (development only).
    """
    uvicorn.run(
        "sampurnan.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )
