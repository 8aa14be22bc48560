"""
Database initialization script.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from fittrack.core.log import configure_logging
from fittrack.db.init_db import init_db

if __name__ == "__main__":
    configure_logging()
    print("=" * 50)
    print("FitTrack Database Initialization")
    print("=" * 50)

    try:
        init_db()
        print("SUCCESS: Database initialized!")
        sys.exit(0)

    except Exception as e:
        print(f"ERROR: Database initialization failed!")
        print(f"Details: {e}")
        sys.exit(1)
