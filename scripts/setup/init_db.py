"""
Initialize database — creates the waste_log table and its indexes.
Run once before first launch, or after changing the model.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.database import create_tables, engine
from app.config import settings
from sqlalchemy import inspect, text


def main():
    print("🗄️  WasteWise DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {engine.url.render_as_string(hide_password=True)}")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        print("\nCheck DATABASE_URL in .env and that the server is running:")
        print("  sudo systemctl start postgresql")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()

    inspector = inspect(engine)
    print(f"✅ Tables: {', '.join(inspector.get_table_names())}")
    for idx in inspector.get_indexes("waste_log"):
        flag = "unique" if idx.get("unique") else "index"
        print(f"   ✓ {idx['name']} ({flag}: {', '.join(c for c in idx['column_names'] if c)})")

    print("\n🎉 Database ready! You can now start the backend:")
    print(f"   uvicorn app.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
