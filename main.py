"""
Color Engine MCP Server - FastAPI implementation
Provides endpoints for color parsing, conversion, gamut and contrast operations
"""

import sys
from pathlib import Path
from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

# Ensure project root is on sys.path for package imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

from config import get_settings, setup_default_logging
from routers import colorTools_router

app = FastAPI(
    title="Color Engine MCP Server",
    description="A FastAPI server for style-preserving color conversion",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

app.include_router(colorTools_router)

if __name__ == "__main__":
    settings = get_settings()
    setup_default_logging(settings.log_level)
    if settings.mcp:
        mcp = FastApiMCP(app, exclude_operations=[])
        mcp.mount_http()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
