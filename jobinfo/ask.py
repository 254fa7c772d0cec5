import argparse
import asyncio
import json
import sys

from jobinfo.catalog.load import load_tables
from jobinfo.chat.rag import RAGService
from jobinfo.config import get_settings
from jobinfo.errors import CatalogLoadError, ConfigurationError
from jobinfo.logs import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(description="Ask a question about a government job title.")
    parser.add_argument("question", type=str)
    parser.add_argument("--explain", action="store_true", help="show fragment, match and context; skip the model")
    parser.add_argument("--profile", choices=["strict", "lenient"], default=None)
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.profile:
        settings = settings.model_copy(update={"match_profile": args.profile})
    configure_logging(settings.log_level, settings.log_format)

    try:
        if args.explain:
            catalog, salaries = load_tables(settings)
            service = RAGService(catalog, salaries, llm=None, settings=settings)
        else:
            service = RAGService.from_settings(settings)
    except (CatalogLoadError, ConfigurationError) as e:
        print(f"[ask] {e}", file=sys.stderr)
        raise SystemExit(1)

    if args.explain:
        print(json.dumps(service.explain(args.question), indent=2, ensure_ascii=False))
        return

    print(asyncio.run(service.answer(args.question)))


if __name__ == "__main__":
    main()
