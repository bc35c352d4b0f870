"""
Question paper generation from the command line.
Runs the full pipeline against the configured LLM provider and prints the paper parts.
"""

import asyncio
import sys
import os
import argparse
import json
import time

sys.path.append(os.getcwd())

from papergen.core.config import settings
from papergen.core.llm import create_completion_client
from papergen.core.logging_config import setup_logging
from papergen.schemas import DistributionItem, GenerationRequest
from papergen.services.paper_sections import build_paper_sections
from papergen.services.question_service import QuestionGenerationService


def parse_bucket(value: str) -> DistributionItem:
    """Parse "type:difficulty:count[:marks]", e.g. "mcq:easy:5:2"."""
    parts = value.split(":")
    if len(parts) not in (3, 4):
        raise argparse.ArgumentTypeError(f"expected type:difficulty:count[:marks], got '{value}'")
    fields = {"type": parts[0], "difficulty": parts[1], "count": int(parts[2])}
    if len(parts) == 4:
        fields["marks"] = int(parts[3])
    return DistributionItem(**fields)


async def main():
    parser = argparse.ArgumentParser(description="Generate a question paper")
    parser.add_argument("topic", help="Topic to generate questions on")
    parser.add_argument("--subject", help="Subject name, e.g. Physics")
    parser.add_argument("--level", dest="educational_level", help="Educational level, e.g. 'Class 10'")
    parser.add_argument(
        "--bucket",
        action="append",
        type=parse_bucket,
        default=[],
        help="Distribution bucket type:difficulty:count[:marks] (repeatable)",
    )
    parser.add_argument("--count", type=int, default=5, help="Question count when no buckets are given")
    parser.add_argument("--model", default=None, help=f"Model name (default: {settings.DEFAULT_MODEL})")
    parser.add_argument("--json", action="store_true", help="Print raw question JSON instead of paper parts")

    args = parser.parse_args()
    setup_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)

    request = GenerationRequest(
        topic=args.topic,
        subject=args.subject,
        educationalLevel=args.educational_level,
        count=args.count,
        model=args.model,
        questionDistribution=args.bucket,
    )

    service = QuestionGenerationService(create_completion_client(settings), settings)

    print(f"\n🧪 Generating {request.total_count} questions on {request.topic}...")
    start = time.time()
    questions = await service.generate_from_request(request)
    print(f"✅ Done in {time.time() - start:.2f}s\n")

    if args.json:
        print(json.dumps([q.to_dict() for q in questions], indent=2))
        return

    for section in build_paper_sections(questions):
        print(section.heading)
        for i, question in enumerate(section.questions, 1):
            print(f"  {i}. {question['text']}")
            for label, option in zip("abcd", question.get("options", [])):
                print(f"     ({label}) {option}")
        print()


if __name__ == "__main__":
    asyncio.run(main())
