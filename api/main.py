from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from answers import router as answers_router
from core import config, db
from core.errors import register_error_handlers
from core.log import configure_logging
from core.openapi import install_openapi
from questions import router as questions_router

@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(
    title="Q&A API",
    description="Questions, answers and +1/-1 votes.",
    version="0.1.0",
    lifespan=lifespan,
)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(questions_router.router, tags=["questions"])
app.include_router(answers_router.router, tags=["answers"])

install_openapi(app)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "qa-board api"}


def run() -> None:
    """
    Console entry point (`qa-board-api`): serve the app with uvicorn.
    """
    uvicorn.run(
        "main:app",
        host=config.env_str("HOST", "0.0.0.0"),
        port=config.env_int("PORT", 4000),
        log_level=config.log_level().lower(),
    )
