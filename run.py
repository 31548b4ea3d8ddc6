#!/usr/bin/env python3
"""
Sellin TN - Quick Start Script

Run this script to start the Sellin TN server.
"""

if __name__ == "__main__":
    import uvicorn
    from sellin.config import get_settings

    settings = get_settings()

    print("=" * 50)
    print("Sellin TN")
    print("=" * 50)
    print(f"Server starting at http://{settings.host}:{settings.port}")
    print(f"Stores: *.{settings.apex_domain} (storage: {settings.storage_backend})")
    print("=" * 50)

    uvicorn.run(
        "sellin.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
