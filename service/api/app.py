"""FastAPI application for the password generation service."""

import logging
import threading
from typing import Optional
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from shared.config.config import config
from shared.domain.models import (
    Dictionary,
    PasswordSpec,
    GeneratePasswordRequest,
    GeneratePasswordResponse,
)
from shared.domain.errors import PasswordGenerationError
from shared.domain.consts import ErrorResponseFields
from shared.factories.index_factory import create_index
from shared.interfaces.word_index import WordIndex
from composer.services.password_composer import PasswordComposer
from composer.infrastructure.dictionary_loader import load_dictionary_file

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Passphrase Generator Service")

# Shared across requests: the grouped index keeps its length groups for the
# process-wide dictionary, and is safe to use from concurrent requests
_index: Optional[WordIndex] = None
_index_lock = threading.Lock()
_dictionary: Optional[Dictionary] = None
_dictionary_lock = threading.Lock()


def get_index() -> WordIndex:
    """
    Return the process-wide word index, created from config.WORD_INDEX on first use.
    
    Raises:
        ValueError: If config.WORD_INDEX names no known index.
    """
    global _index
    with _index_lock:
        if _index is None:
            _index = create_index(config.WORD_INDEX)
        return _index


def set_dictionary(dictionary: Optional[Dictionary]) -> None:
    """Replace the process-wide dictionary (None forces a reload on next use)."""
    global _dictionary
    with _dictionary_lock:
        _dictionary = dictionary


def get_dictionary() -> Dictionary:
    """
    Return the process-wide dictionary, loading it from config.DICTIONARY_FILE once.
    
    Raises:
        InvalidDictionary: If the file cannot be loaded.
    """
    global _dictionary
    with _dictionary_lock:
        if _dictionary is None:
            _dictionary = load_dictionary_file(config.DICTIONARY_FILE)
        return _dictionary


def _error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            ErrorResponseFields.ERROR: error,
            ErrorResponseFields.DETAIL: detail,
        },
    )


@app.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint for Docker healthchecks.
    
    Returns:
        Dict with status "ok" if service is healthy.
    """
    return {"status": "ok"}


@app.post("/generate", response_model=GeneratePasswordResponse)
def generate_endpoint(payload: GeneratePasswordRequest):
    """
    Generate one or more passwords.
    
    Omitted request fields fall back to the configured defaults.
    
    Returns:
        GeneratePasswordResponse, or a 400 error body for invalid
        dictionaries, bounds, or length ranges with no words.
    """
    spec = PasswordSpec(
        min_word_length=(
            payload.min_word_length
            if payload.min_word_length is not None
            else config.MIN_WORD_LENGTH
        ),
        max_word_length=(
            payload.max_word_length
            if payload.max_word_length is not None
            else config.MAX_WORD_LENGTH
        ),
        word_count=payload.word_count if payload.word_count is not None else config.WORD_COUNT,
    )
    
    try:
        dictionary = get_dictionary()
        composer = PasswordComposer(index=get_index())
        passwords = [composer.generate(dictionary, spec) for _ in range(payload.count)]
    except PasswordGenerationError as e:
        logger.warning(f"Password generation rejected: {type(e).__name__}: {e}")
        return _error_response(400, type(e).__name__, str(e))
    except Exception as e:
        logger.error(f"Unexpected error in generate endpoint: {e}", exc_info=True)
        return _error_response(500, "InternalError", str(e))
    
    logger.info(
        f"Generated {len(passwords)} password(s) "
        f"(words={spec.word_count}, lengths=[{spec.min_word_length}, {spec.max_word_length}])"
    )
    return GeneratePasswordResponse(passwords=passwords)
