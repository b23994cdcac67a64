import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.errors import register_error_handlers
from core.logging import setup_logging
from routers import (
    auth as auth_router,
    flashcard as flashcard_router,
    sets as sets_router,
    statistics as statistics_router,
    transfer as transfer_router,
)

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="FlashcardsAPI")
register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router)
app.include_router(transfer_router.router)
app.include_router(sets_router.router)
app.include_router(flashcard_router.router)
app.include_router(statistics_router.router)


@app.get("/status")
async def status():
    return {"status": "ok"}

if __name__ == "__main__":
    logger.info("Starting Flashcards API server, document store at %s", settings.DB_PATH)
    uvicorn.run("main:app", reload=True, host="127.0.0.1", port=8000)
