import json

from jobinfo.models.schema import QueryContext

SYSTEM_PROMPT = (
    "You are a helpful HR assistant that provides information about job positions and salaries. "
    "Use the provided job information to answer questions naturally and conversationally. "
    "Focus on extracting and presenting relevant information from the job details provided."
)

NO_MATCH_MESSAGE = (
    "I couldn't find information about that job. Please try rephrasing your question "
    "or specify the job title and jurisdiction more clearly."
)

FALLBACK_MESSAGE = (
    "I apologize, but I'm having trouble processing your request right now. Please try again later."
)


def build_user_content(query: str, context: QueryContext) -> str:
    job_info = json.dumps(context.model_dump(mode="json"), ensure_ascii=False)
    return f"Here is the job information: {job_info}\n\nUser question: {query}"
