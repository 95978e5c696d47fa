"""
Main entry point for the Chatline API.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn chatline.fastapi_app:app --host 0.0.0.0 --port 3000 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from chatline.config.settings import Config

if __name__ == "__main__":
    print(f"Starting Chatline API ({Config.PERSISTENCE_BACKEND} persistence)...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "chatline.fastapi_app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=Config.DEBUG,
        log_level="info" if Config.DEBUG else "warning",
    )
