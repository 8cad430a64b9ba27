import asyncio
import asyncpg
from dotenv import load_dotenv

# Load env vars before the settings object is built
load_dotenv(".env")

from accounting_api.app.core.config import settings

# asyncpg connect needs the DSN without the SQLAlchemy driver suffix
db_url = settings.sqlalchemy_database_url.replace("+asyncpg", "")

print(f"Testing connection to: {settings.db_host}:{settings.db_port}/{settings.db_database}")


async def check_db():
    try:
        conn = await asyncpg.connect(db_url)
        count = await conn.fetchval("SELECT count(*) FROM accountingledgerentry")
        print(f"✅ Connection Successful! {count} ledger entries")
        await conn.close()
        exit(0)
    except Exception as e:
        print(f"❌ Connection Failed: {e}")
        exit(1)

if __name__ == "__main__":
    asyncio.run(check_db())
