"""
Global Langfuse configuration.

Auto-initializes Langfuse when this module is imported.

How it works:
1. config/settings.py loads .env into os.environ via load_dotenv()
2. Langfuse SDK auto-discovers credentials from os.environ
3. get_langfuse_handler() returns a CallbackHandler for LLM calls, or None
"""

import logging
from typing import Any, Optional

from langfuse import Langfuse

from config.settings import settings

logger = logging.getLogger(__name__)


def is_langfuse_enabled() -> bool:
    """
    Check if Langfuse observability is enabled.

    Returns:
        bool: True if enabled and configured, False otherwise
    """
    if not settings.LANGFUSE_ENABLED:
        return False

    if not settings.LANGFUSE_PUBLIC_KEY or not settings.LANGFUSE_SECRET_KEY:
        logger.warning("LANGFUSE_ENABLED=true but credentials missing in .env")
        return False

    return True


def get_langfuse_handler() -> Optional[Any]:
    """Callback handler for LangChain invocations, None when tracing is off."""
    if not is_langfuse_enabled():
        return None
    try:
        from langfuse.langchain import CallbackHandler

        return CallbackHandler()
    except Exception as e:
        logger.error("Failed to create Langfuse handler: %s", e)
        return None


# Auto-initialize Langfuse singleton on module import
if is_langfuse_enabled():
    try:
        # Initialize singleton (credentials auto-discovered from os.environ)
        Langfuse()
        logger.info("Langfuse initialized (host: %s)", settings.LANGFUSE_HOST)
    except Exception as e:
        logger.error("Failed to initialize Langfuse: %s", e)
