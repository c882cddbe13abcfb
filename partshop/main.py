from contextlib import asynccontextmanager
from fastapi import FastAPI, status
from partshop.core.db import init_db, close_db
from partshop.api.v1.items import router as items_router
from partshop.api.v1.assistant import router as assistant_router
from partshop.core.config import PROJECT_NAME, VERSION
from partshop.core.exception_handlers import setup_exception_handlers

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handles startup and shutdown events."""
    print(f"Starting {PROJECT_NAME} v{VERSION}...")
    await init_db() # Connect to DB and generate schemas
    yield
    await close_db()
    print(f"{PROJECT_NAME} stopped.")

app = FastAPI(
    title=PROJECT_NAME,
    version=VERSION,
    lifespan=lifespan,
    # Configure API documentation and paths
    docs_url="/docs",
    redoc_url="/redoc"
)

# The item collection resource lives at /api/items, the path the client stores point at
app.include_router(items_router, prefix="/api/items", tags=["Inventory Items"])
app.include_router(assistant_router, prefix="/api/assistant", tags=["Description Assistant"])


setup_exception_handlers(app)

@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok", "app_name": PROJECT_NAME}
