"""
Registry ownership for the web application

The registry lives on app.state; routes reach it through get_registry so
each app (and each test) works against its own instance.
"""
import logging

from starlette.requests import Request

from classcode.core import config
from classcode.core.registry import QuestionRegistry

logger = logging.getLogger(__name__)

# Sample questions the application has always started with
SAMPLE_QUESTIONS = [
    ("MATH01", "What is the Pythagorean theorem and when would you use it?"),
    ("SCI02", "Explain the process of photosynthesis in your own words."),
]


def create_registry(seed: bool = config.SEED_SAMPLE_QUESTIONS) -> QuestionRegistry:
    """Build a registry from configuration, optionally preloaded with samples"""
    registry = QuestionRegistry(
        code_length=config.CODE_LENGTH,
        alphabet=config.CODE_ALPHABET,
        max_attempts=config.CODE_MAX_ATTEMPTS,
        max_code_length=config.MAX_CODE_LENGTH,
    )
    if seed:
        for code, text in SAMPLE_QUESTIONS:
            registry.create_question(code, text)
        logger.info(f"Seeded {len(SAMPLE_QUESTIONS)} sample questions")
    return registry


def get_registry(request: Request) -> QuestionRegistry:
    """FastAPI dependency returning the app's registry"""
    return request.app.state.registry
