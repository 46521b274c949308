"""HTML to RSX conversion pipeline."""

import logging
import time

from .config import Settings, get_settings
from .emitter import emit
from .errors import ConversionError
from .logging_config import log_with_context
from .parser import parse

logger = logging.getLogger(__name__)


def convert(html: str | bytes, settings: Settings | None = None) -> str:
    """
    Convert an HTML fragment into RSX source text.

    Args:
        html: HTML content as string or bytes (bytes are decoded as UTF-8)
        settings: Optional settings instance (loads from get_settings() if not provided)

    Returns:
        RSX source text

    Raises:
        ParseError: If the markup is structurally unrecoverable
        EmitError: If the tree cannot be rendered under the current settings
        TypeError: If ``html`` is neither str nor bytes
    """
    if settings is None:
        settings = get_settings()

    # Handle bytes input
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")
    elif not isinstance(html, str):
        raise TypeError(f"html must be str or bytes, not {type(html).__name__}")

    start_time = time.perf_counter()
    try:
        document = parse(html, settings.parser)
        output = emit(document, settings.emitter)
    except ConversionError as e:
        log_with_context(
            logger,
            logging.WARNING,
            f"Conversion failed: {e}",
            error_type=type(e).__name__,
            input_chars=len(html),
        )
        raise

    if logger.isEnabledFor(logging.DEBUG):
        log_with_context(
            logger,
            logging.DEBUG,
            "Conversion finished",
            input_chars=len(html),
            node_count=sum(1 for _ in document.walk()),
            output_chars=len(output),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
            backend=settings.parser.backend,
        )
    return output
