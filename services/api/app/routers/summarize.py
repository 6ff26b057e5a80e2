from fastapi import APIRouter, Depends, Request

from app.extract import ContentExtractor
from app.llm import CompletionClient
from app.models import SummarizeRequest, SummarizeResult
from app.settings import Settings
from app.summarize import Summarizer

router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_completions(request: Request) -> CompletionClient:
    # Built once in the lifespan hook; created lazily if the app runs without it.
    state = request.app.state
    if getattr(state, "completions", None) is None:
        state.completions = CompletionClient.from_settings(state.settings)
    return state.completions


def get_summarizer(
    settings: Settings = Depends(get_settings),
    completions: CompletionClient = Depends(get_completions),
) -> Summarizer:
    return Summarizer(
        completions=completions,
        extractor=ContentExtractor(fetch_timeout=settings.fetch_timeout),
        max_content_chars=settings.max_content_chars,
    )


@router.post(
    "/summarize",
    response_model=SummarizeResult,
    response_model_exclude_none=True,
)
async def summarize(payload: SummarizeRequest, summarizer: Summarizer = Depends(get_summarizer)):
    return await summarizer.handle(payload)
