from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from answers import router as answers_router
from core import settings
from core.db import Database
from core.errors import register_error_handlers
from core.log import configure_logging
from questions import router as questions_router
from votes import router as votes_router

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, shared by every request through `get_db`.
    db = Database()
    await db.connect()
    app.state.db = db
    try:
        yield
    finally:
        await db.close()


app = FastAPI(title="Q&A API", lifespan=lifespan)

origins = settings.cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(questions_router.router, prefix="/questions", tags=["questions"])
app.include_router(answers_router.router, prefix="/questions", tags=["answers"])
app.include_router(votes_router.router, prefix="/questions", tags=["votes"])


@app.get("/test")
async def test() -> str:
    return "Server API is working 🚀"


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host(), port=settings.port())
