"""FastAPI application serving equilibrium curve quotes."""

import os

import uvicorn
from fastapi import FastAPI

from eqsolver import __version__
from eqsolver.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("EQSOLVER_HOST", "0.0.0.0")
PORT = int(os.environ.get("EQSOLVER_PORT", "8000"))
DEBUG = os.environ.get("EQSOLVER_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Equilibrium Curve Solver",
    description="Off-chain quotes that reproduce the on-chain equilibrium curve math",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the quote API server.

    Configuration via environment variables:
    - EQSOLVER_HOST: Host to bind to (default: 0.0.0.0)
    - EQSOLVER_PORT: Port to bind to (default: 8000)
    - EQSOLVER_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "eqsolver.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
