"""Model-attempt loop with deterministic fallback.

Per request the reconciler moves through:

    NOT_CONFIGURED ------------------------------------------> FALLBACK
    MODEL_ATTEMPT(i) -> FAIL -> MODEL_ATTEMPT(i+1) ... -> EXHAUSTED -> FALLBACK
    MODEL_ATTEMPT(i) -> SUCCESS -> PARSE -> VALID -------------> DONE
                                        -> INVALID -----------> FALLBACK

The first model that answers with a success status ends the loop, even if
its output later fails validation. Every step is logged; none of it leaks
into the returned payload.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, TypeVar

from openai import APIError

from rechart.dsl.schema import ChartPayload, DiagramPayload
from rechart.llm.client import CompletionClient, CompletionError, LLMConfig
from rechart.llm.fallback import FallbackProcessor
from rechart.llm.parser import ResponseParseError, parse_chart_response, parse_diagram_response
from rechart.llm.prompts import (
    CHART_SYSTEM_PROMPT,
    DIAGRAM_SYSTEM_PROMPT,
    build_chart_prompt,
    build_diagram_prompt,
)

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", ChartPayload, DiagramPayload)


class ReconcileState(str, Enum):
    """States of one reconciliation."""

    NOT_CONFIGURED = "not_configured"
    MODEL_ATTEMPT = "model_attempt"
    SUCCESS = "success"
    FAIL = "fail"
    EXHAUSTED = "exhausted"
    PARSE = "parse"
    VALID = "valid"
    INVALID = "invalid"
    FALLBACK = "fallback"
    DONE = "done"


class PayloadSource(str, Enum):
    """Where a payload came from."""

    AI = "ai"
    FALLBACK = "fallback"


@dataclass
class ReconcileResult(Generic[PayloadT]):
    """Payload plus a trace of how it was produced."""

    payload: PayloadT
    source: PayloadSource
    model: str | None = None
    states: list[ReconcileState] = field(default_factory=list)
    last_error: str | None = None


class Reconciler:
    """Turns a user request into a payload, preferring model output.

    Model output is used only when a credential is configured, a model
    answers successfully, and its text validates against the payload
    schema. Every other path ends in FallbackProcessor output.
    """

    def __init__(
        self,
        config: LLMConfig | None = None,
        client: CompletionClient | None = None,
        fallback: FallbackProcessor | None = None,
    ):
        self.config = config or (client.config if client else LLMConfig())
        self._client = client
        self.fallback = fallback or FallbackProcessor()

    @property
    def client(self) -> CompletionClient:
        """Get or create the completion client."""
        if self._client is None:
            self._client = CompletionClient(self.config)
        return self._client

    def close(self) -> None:
        """Release the completion client's connections, if one was opened."""
        if self._client is not None:
            self._client.close()

    def reconcile_chart(
        self, data: str, chart_type: str, is_csv: bool
    ) -> ReconcileResult[ChartPayload]:
        """Produce a chart payload for CSV text or a description."""
        return self._reconcile(
            kind="chart",
            system_prompt=CHART_SYSTEM_PROMPT,
            build_prompt=lambda: build_chart_prompt(data, chart_type, is_csv),
            parse=parse_chart_response,
            make_fallback=lambda: self.fallback.process_chart(data, chart_type, is_csv),
        )

    def reconcile_diagram(
        self, description: str, diagram_type: str
    ) -> ReconcileResult[DiagramPayload]:
        """Produce a diagram payload for a description."""
        return self._reconcile(
            kind="diagram",
            system_prompt=DIAGRAM_SYSTEM_PROMPT,
            build_prompt=lambda: build_diagram_prompt(description, diagram_type),
            parse=lambda text: parse_diagram_response(text, diagram_type),
            make_fallback=lambda: self.fallback.process_diagram(description, diagram_type),
        )

    def _reconcile(
        self,
        kind: str,
        system_prompt: str,
        build_prompt: Callable[[], str],
        parse: Callable[[str], PayloadT],
        make_fallback: Callable[[], PayloadT],
    ) -> ReconcileResult[PayloadT]:
        states: list[ReconcileState] = []

        # Checked before anything touches the network
        if not self.config.is_configured:
            logger.warning(f"XAI_API_KEY not configured, using fallback {kind} processing")
            states.extend([ReconcileState.NOT_CONFIGURED, ReconcileState.FALLBACK, ReconcileState.DONE])
            return ReconcileResult(
                payload=make_fallback(),
                source=PayloadSource.FALLBACK,
                states=states,
            )

        user_prompt = build_prompt()
        response_text = None
        used_model = None
        last_error = None

        for model in self.config.models:
            states.append(ReconcileState.MODEL_ATTEMPT)
            logger.info(f"Trying model: {model}")
            try:
                response_text = self.client.complete(model, system_prompt, user_prompt)
            except CompletionError as e:
                logger.error(f"Completion API error with model {model}: {e}")
                last_error = str(e)
                states.append(ReconcileState.FAIL)
                continue
            except (APIError, IndexError, TypeError, ValueError) as e:
                logger.error(f"Error with model {model}: {e!r}")
                last_error = repr(e)
                states.append(ReconcileState.FAIL)
                continue

            used_model = model
            states.append(ReconcileState.SUCCESS)
            logger.info(f"Successfully used model: {model}")
            break

        if used_model is None:
            logger.warning(
                f"All models failed, last error: {last_error}. Using fallback {kind} processing."
            )
            states.extend([ReconcileState.EXHAUSTED, ReconcileState.FALLBACK, ReconcileState.DONE])
            return ReconcileResult(
                payload=make_fallback(),
                source=PayloadSource.FALLBACK,
                states=states,
                last_error=last_error,
            )

        states.append(ReconcileState.PARSE)
        logger.debug(f"Raw AI response: {response_text}")
        try:
            payload = parse(response_text)
        except ResponseParseError as e:
            logger.error(f"Failed to parse AI response from {used_model}: {e}")
            states.extend([ReconcileState.INVALID, ReconcileState.FALLBACK, ReconcileState.DONE])
            return ReconcileResult(
                payload=make_fallback(),
                source=PayloadSource.FALLBACK,
                model=used_model,
                states=states,
                last_error=str(e),
            )

        states.extend([ReconcileState.VALID, ReconcileState.DONE])
        return ReconcileResult(
            payload=payload,
            source=PayloadSource.AI,
            model=used_model,
            states=states,
        )
