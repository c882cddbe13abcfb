import logging
from logging import INFO
from tortoise import Tortoise
from partshop.core.config import DB_URL

log = logging.getLogger(__name__)

# Set logging level for Tortoise ORM
logging.getLogger('tortoise').setLevel(INFO)

# The item table is the only model module; the store backend has no other entities
MODELS_MODULES = [
    "partshop.models.inventory",
]

async def init_db(db_url: str = DB_URL, generate_schemas: bool = True):
    """Connects Tortoise to the item database and, by default, creates missing tables."""
    try:
        await Tortoise.init(db_url=db_url, modules={"models": MODELS_MODULES})
        if generate_schemas:
            await Tortoise.generate_schemas(safe=True)
        log.info(f"Item database ready at {db_url}.")
    except Exception as e:
        log.critical(f"Could not open item database at {db_url}: {e}")
        # The store API is useless without its table, so startup must fail
        raise

async def close_db():
    """Closes all database connections."""
    await Tortoise.close_connections()
    log.info("Item database connections closed.")
