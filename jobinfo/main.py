from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobinfo.chat.rag import RAGService
from jobinfo.chat.router import router as chat_router
from jobinfo.config import get_settings
from jobinfo.logs import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    # Missing data files or credentials abort startup here.
    app.state.rag_service = RAGService.from_settings(settings)
    yield


app = FastAPI(title="Job Information Assistant", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router)

@app.get("/")
async def root():
    return {"message": "Job Information Assistant API"}
