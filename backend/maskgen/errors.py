from __future__ import annotations


class ConfigurationError(RuntimeError):
    pass


class MissingConfigValue(ConfigurationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required env var: {name}")
        self.name = name


class NoPersonasSelected(ConfigurationError):
    def __init__(self, requested: list[str] | None = None) -> None:
        detail = f" (requested: {', '.join(requested)})" if requested else ""
        super().__init__(f"No personas selected.{detail}")
        self.requested = list(requested or [])


class RequestExhausted(RuntimeError):
    """The last attempt of a retried request still came back retryable."""

    def __init__(self, *, url: str, status: int, body: str, attempts: int) -> None:
        super().__init__(f"HTTP {status} ({attempts}/{attempts}) {url}: {body}")
        self.url = url
        self.status = status
        self.body = body
        self.attempts = attempts


class ProviderError(RuntimeError):
    def __init__(self, message: str, *, status: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class EmptyAudioPayload(ProviderError):
    pass
