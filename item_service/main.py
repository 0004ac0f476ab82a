"""Main entry point for the item service.

Initializes the FastAPI app from environment configuration and makes it runnable standalone.

Usage:
    Development: uvicorn item_service.main:app --reload --port 8000
    Production: uvicorn item_service.main:app --host 0.0.0.0 --port 8000
"""

from item_service.api import create_app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "item_service.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
