import asyncio
import logging
from typing import Dict, Optional

from jobinfo.catalog.load import load_tables
from jobinfo.catalog.repository import JobCatalog, SalaryTable
from jobinfo.chat.llm import LanguageModelClient, build_llm_client
from jobinfo.chat.prompts import FALLBACK_MESSAGE, NO_MATCH_MESSAGE, SYSTEM_PROMPT, build_user_content
from jobinfo.config import Settings, get_settings
from jobinfo.errors import LanguageModelError
from jobinfo.matching.matcher import CatalogMatcher
from jobinfo.models.schema import JobDescription, QueryContext, SalaryInfo
from jobinfo.query.extract import TitleExtractor

logger = logging.getLogger(__name__)


class RAGService:
    """Answers a job question from the best catalog match plus its salary grades.

    Never raises for a per-request problem: an unknown job yields
    NO_MATCH_MESSAGE and any model failure yields FALLBACK_MESSAGE. Built
    without a model client it still supports retrieve() and explain().
    """

    def __init__(
        self,
        catalog: JobCatalog,
        salaries: SalaryTable,
        llm: Optional[LanguageModelClient],
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or get_settings()
        self.catalog = catalog
        self.salaries = salaries
        self.llm = llm
        self.timeout = settings.llm_timeout_seconds if settings.llm_timeout_seconds > 0 else None
        self.extractor = TitleExtractor(catalog, settings.stop_words())
        self.matcher = CatalogMatcher(
            catalog,
            profile=settings.match_profile,
            threshold=settings.match_threshold,
            min_word_length=settings.min_word_length,
            min_fragment_length=settings.min_fragment_length,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "RAGService":
        # Load failures and missing credentials propagate: they are startup errors.
        settings = settings or get_settings()
        catalog, salaries = load_tables(settings)
        return cls(catalog, salaries, build_llm_client(settings), settings)

    def build_context(self, job: JobDescription) -> QueryContext:
        record = self.salaries.lookup(job.code, job.jurisdiction)
        if record is None:
            logger.info("No salary record for job", extra={"code": job.code, "jurisdiction": job.jurisdiction})
        salary = SalaryInfo(grade1=record.grade1, grade2=record.grade2) if record else None
        return QueryContext(
            title=job.title,
            jurisdiction=job.jurisdiction,
            description=job.description,
            salary=salary,
        )

    def retrieve(self, query: str) -> Optional[QueryContext]:
        fragment = self.extractor.extract(query)
        job = self.matcher.match(fragment)
        if job is None:
            return None
        return self.build_context(job)

    def explain(self, query: str) -> Dict:
        """Pipeline internals for one query, without calling the model."""
        fragment = self.extractor.extract(query)
        result = self.matcher.match_with_stage(fragment)
        context = self.build_context(result.job) if result.job else None
        return {
            "fragment": fragment,
            "profile": self.matcher.profile,
            "threshold": self.matcher.threshold,
            "stage": result.stage,
            "score": result.score,
            "code": result.job.code if result.job else None,
            "context": context.model_dump(mode="json") if context else None,
        }

    async def generate(self, query: str, context: QueryContext) -> str:
        user_content = build_user_content(query, context)
        try:
            if self.llm is None:
                raise LanguageModelError("no language model configured")
            return await asyncio.wait_for(self.llm.complete(SYSTEM_PROMPT, user_content), timeout=self.timeout)
        except (LanguageModelError, asyncio.TimeoutError) as e:
            logger.error(
                "Language model call failed; returning fallback answer",
                extra={"provider": getattr(self.llm, "name", None), "error_type": type(e).__name__, "title": context.title},
                exc_info=True,
            )
            return FALLBACK_MESSAGE

    async def answer(self, query: str, job_context: Optional[QueryContext] = None) -> str:
        try:
            context = job_context or self.retrieve(query)
            if context is None:
                return NO_MATCH_MESSAGE
            return await self.generate(query, context)
        except Exception:
            logger.exception("Unexpected error while answering query")
            return FALLBACK_MESSAGE
