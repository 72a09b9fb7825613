"""LLM interaction for ask."""

import logging

import litellm

from ask.errors import CompletionError, ErrorClassifier, ErrorKind, classify_error

log = logging.getLogger(__name__)

# Suppress litellm's noisy logging
litellm.suppress_debug_info = True

MAX_OUTPUT_TOKENS = 512


def complete(
    prompt: str,
    credential: str,
    model: str,
    classifier: ErrorClassifier = classify_error,
) -> str:
    """Send a prompt to the model and return its raw text.

    Any transport failure is re-raised as a CompletionError whose kind comes
    from ``classifier``. No retry is attempted.
    """
    log.debug("model=%s prompt=%d chars", model, len(prompt))
    try:
        response = litellm.completion(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            api_key=credential,
            temperature=0,
            max_tokens=MAX_OUTPUT_TOKENS,
            num_retries=0,
        )
    except Exception as e:
        kind = classifier(str(e))
        log.debug("completion failed (%s): %s", kind.value, e)
        raise CompletionError(kind, str(e)) from e

    content = response.choices[0].message.content
    if content is None or not content.strip():
        raise CompletionError(ErrorKind.EMPTY_CONTENT)
    log.debug("raw response: %s", content)
    return content
