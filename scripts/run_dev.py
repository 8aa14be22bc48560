"""
Development server launcher.

Loads the .env file and runs the FastAPI app with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("FitTrack Development Server")
    print("=" * 60)
    print("API:  http://localhost:8000")
    print("Docs: http://localhost:8000/docs")
    print("=" * 60)

    uvicorn.run("fittrack.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
