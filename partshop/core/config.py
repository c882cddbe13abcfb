import os

# Database Configuration
# Local sqlite file by default; set DATABASE_URL for postgres (needs the postgres extra)
DB_URL = os.getenv("DATABASE_URL", "sqlite://partshop.sqlite3")

# Application Metadata
PROJECT_NAME = "Thein Myanmar Parts Inventory"
VERSION = "1.0.0"

# Item Store Client Configuration
STORE_BACKEND = os.getenv("STORE_BACKEND", "http") # "http" (remote /items resource) or "local" (JSON file)
STORE_BASE_URL = os.getenv("STORE_BASE_URL", "http://localhost:8000/api")
LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", "partshop_items.json")

# Login Gate (placeholder pair, not a security boundary)
AUTH_FLAG_PATH = os.getenv("AUTH_FLAG_PATH", ".partshop_auth.json")
AUTH_USERNAME = os.getenv("AUTH_USERNAME", "aa")
AUTH_PASSWORD = os.getenv("AUTH_PASSWORD", "1234")

# AI Description Assistant
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "").strip()
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
