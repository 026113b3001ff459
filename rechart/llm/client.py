"""Client for the OpenAI-compatible chat-completion endpoint."""

import logging
from dataclasses import dataclass, field

import httpx
from openai import APIStatusError, OpenAI

logger = logging.getLogger(__name__)

DEFAULT_MODELS = ("grok-3-mini", "grok-3")


class CompletionError(Exception):
    """Raised when the completion endpoint answers with a non-success status."""

    def __init__(self, model: str, status_code: int, body: str):
        super().__init__(f"{status_code} - {body}")
        self.model = model
        self.status_code = status_code
        self.body = body


@dataclass
class LLMConfig:
    """Configuration for the completion client."""

    api_key: str = ""
    base_url: str = "https://api.x.ai/v1"
    # Tried in order; the first success wins
    models: tuple[str, ...] = field(default=DEFAULT_MODELS)
    temperature: float = 0.1
    timeout: float = 30.0

    @property
    def is_configured(self) -> bool:
        """Whether a credential is present."""
        return bool(self.api_key)

    @classmethod
    def from_settings(cls, settings) -> "LLMConfig":
        """Build from application settings."""
        return cls(
            api_key=settings.xai_api_key,
            base_url=settings.xai_base_url,
            models=tuple(settings.xai_models),
            temperature=settings.xai_temperature,
            timeout=settings.xai_timeout_seconds,
        )


class CompletionClient:
    """Client for an OpenAI-compatible chat-completion API.

    One call is one blocking round-trip bounded by the configured timeout.
    The SDK's own retries are disabled; trying the next model is the
    caller's retry policy.
    """

    def __init__(
        self,
        config: LLMConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize completion client.

        Args:
            config: Client configuration.
            transport: Optional httpx transport, used to stub the network.
        """
        self.config = config or LLMConfig()
        self._transport = transport
        self._client = None

    @property
    def client(self) -> OpenAI:
        """Lazy-load the API client."""
        if self._client is None:
            http_client = None
            if self._transport is not None:
                http_client = httpx.Client(transport=self._transport)
            self._client = OpenAI(
                api_key=self.config.api_key,
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                max_retries=0,
                http_client=http_client,
            )
        return self._client

    def complete(self, model: str, system_prompt: str, user_prompt: str) -> str:
        """Request one completion from a model.

        Args:
            model: Model identifier.
            system_prompt: System/instruction prompt.
            user_prompt: User message.

        Returns:
            Text content of the first choice.

        Raises:
            CompletionError: Non-success HTTP status.
            openai.APIError: Transport failure, timeout or unreadable body.
            IndexError: Response without choices.
        """
        try:
            response = self.client.chat.completions.create(
                model=model,
                temperature=self.config.temperature,
                stream=False,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except APIStatusError as e:
            raise CompletionError(model, e.status_code, e.response.text) from e

        content = response.choices[0].message.content
        # A null or structured content part is an unusable answer, not a failed call
        return content if isinstance(content, str) else ""

    def list_models(self) -> list[str]:
        """List model ids visible to the configured credential.

        Raises:
            CompletionError: Non-success HTTP status.
            openai.APIError: Transport failure or timeout.
        """
        try:
            return [model.id for model in self.client.models.list()]
        except APIStatusError as e:
            raise CompletionError("", e.status_code, e.response.text) from e

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None
