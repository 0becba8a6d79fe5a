"""FashionX Product Review System - Main entry point."""
import logging

from nicegui import app, ui

from config import APP_TITLE, APP_PORT, APP_HOST, LOG_LEVEL
from src.api import router as api_router
from src.models import init_db
from src.ui.pages.catalog import catalog_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize database tables on startup
init_db()

# JSON API (catalog reads, batch remark updates, health probe) on the same server
app.include_router(api_router)


@ui.page("/")
def index():
    catalog_page()


ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=False,
)
