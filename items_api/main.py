"""Main entry point for the Items API.

Initializes the FastAPI app and makes it runnable standalone.

Usage:
    Development: uvicorn items_api.main:app --reload --port 8000
    Production: uvicorn items_api.main:app --host 0.0.0.0 --port 8000 --workers 4
"""

from items_api.api import create_app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "items_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
