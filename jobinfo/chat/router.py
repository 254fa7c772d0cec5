from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from typing import Optional

from jobinfo.models.schema import QueryContext
from .rag import RAGService


router = APIRouter(prefix="/api")


class ChatRequest(BaseModel):
    query: str
    jobInfo: Optional[QueryContext] = None


class ChatResponse(BaseModel):
    response: str


def get_rag_service(request: Request) -> RAGService:
    return request.app.state.rag_service


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/chat", response_model=ChatResponse)
async def chat(req: ChatRequest, rag_service: RAGService = Depends(get_rag_service)):
    answer = await rag_service.answer(req.query, job_context=req.jobInfo)
    return ChatResponse(response=answer)
