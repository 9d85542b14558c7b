"""Worker boundary: raw text in, exactly one response out.

``handle_request`` is the synchronous message handler. ``AnalysisWorker`` runs
it off the event loop for one logical session and refuses to start a second
computation while the first is still running.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import Executor
from typing import Optional

from FD2NF.engine import RelationalSchema
from FD2NF.ir.models.analysis import WorkerResponse
from FD2NF.parsing import FDParseError, parse_dependencies
from FD2NF.pipeline.analysis import analyze_schema
from FD2NF.utils.engine_config import EngineConfig, get_engine_config
from FD2NF.utils.error_handling import AttributeLimitExceeded, ErrorContext, handle_analysis_error
from FD2NF.utils.logging import get_logger

logger = get_logger(__name__)


class AnalysisInFlightError(RuntimeError):
    """A session submitted a request while its previous one was still running."""


def check_attribute_limit(schema: RelationalSchema, config: EngineConfig) -> None:
    """Refuse universes above ``config.max_attributes``; warn above ``config.warn_attributes``."""
    attribute_count = len(schema.attributes())
    if attribute_count > config.max_attributes:
        raise AttributeLimitExceeded(attribute_count, config.max_attributes)
    if attribute_count > config.warn_attributes:
        logger.warning(
            f"Schema has {attribute_count} attributes; enumerating {2 ** attribute_count} subsets may be slow"
        )


def handle_request(text: str, config: Optional[EngineConfig] = None) -> WorkerResponse:
    """Parse, guard and analyze ``text``.

    Never raises: every failure becomes a response with ``successful=False``
    and the error message.
    """
    config = config or get_engine_config()
    context = ErrorContext(operation="analyze_text", additional_context={"text_length": len(text)})

    try:
        schema = RelationalSchema(parse_dependencies(text))
        context.attribute_count = len(schema.attributes())
        context.dependency_count = len(schema)
        check_attribute_limit(schema, config)
        return WorkerResponse.success(analyze_schema(schema))
    except (FDParseError, AttributeLimitExceeded) as e:
        return WorkerResponse.failure(handle_analysis_error(e, context, log_level="warning"))
    except Exception as e:
        # Anything else is a bug or a contract violation; report it verbatim
        return WorkerResponse.failure(handle_analysis_error(e, context, log_level="error"))


class AnalysisWorker:
    """Runs analysis requests for one session on an executor.

    Args:
        executor: Executor to run on; None uses the event loop's default thread pool
        config: Attribute limits; None reads them from config.yaml and the environment
    """

    def __init__(self, executor: Optional[Executor] = None, config: Optional[EngineConfig] = None):
        self._executor = executor
        self._config = config
        self._pending = False

    @property
    def busy(self) -> bool:
        return self._pending

    async def submit(self, text: str) -> WorkerResponse:
        """Analyze ``text`` off the event loop and return its single response.

        Raises:
            AnalysisInFlightError: if this worker is still computing a previous request
        """
        if self._pending:
            raise AnalysisInFlightError("An analysis is already running for this session")

        self._pending = True
        try:
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(self._executor, handle_request, text, self._config)
        finally:
            self._pending = False
