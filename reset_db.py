# reset_db.py
from serene.models import database
from serene.models.database import engine
from serene.models import *  # journal, habit and mood tables on Base.metadata

if __name__ == "__main__":
    print("⚠️ Dropping all existing tables...")
    database.Base.metadata.drop_all(bind=engine)

    print("✅ Recreating tables from models...")
    database.Base.metadata.create_all(bind=engine)

    print("✅ Database reset complete.")
