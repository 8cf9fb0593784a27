# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .catalog import catalog_router
from .catalog.store import close_mongo_client
from .config import Config


logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=Config.log_level(),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_mongo_client()


app = FastAPI(
    title="Local Library",
    description="Catalogue pages of a small local library site.",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(catalog_router)


# Quick check that the service is up
@app.get("/")
def health_check():
    return {"status": "ok", "message": "Local Library catalogue is running"}
