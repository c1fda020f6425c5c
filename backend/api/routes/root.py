"""
Root and health check endpoints
"""

from fastapi import APIRouter

router = APIRouter(tags=["root"])

@router.get("/")
async def root():
    """API root endpoint - returns API information"""
    return {
        "name": "ESG Search Tools API",
        "version": "0.1.0",
        "docs": "/docs",
        "endpoints": {
            "tools": "/api/v1/tools",
        }
    }
