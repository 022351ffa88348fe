"""Error taxonomy for the space builder pipeline."""


class SpaceBuilderError(Exception):
    """Base class for all pipeline errors."""


class ValidationError(SpaceBuilderError):
    """Bad request input. Terminal: reported as a single error event."""


class ProviderError(SpaceBuilderError):
    """A text-generation provider failed (network, HTTP status or empty body)."""

    def __init__(
        self,
        provider: str,
        status: int | None = None,
        detail: str = "",
        retryable: bool = True,
    ) -> None:
        self.provider = provider
        self.status = status
        self.detail = detail
        self.retryable = retryable
        super().__init__(f"{provider} failed (status={status}): {detail}")


class AllProvidersFailedError(SpaceBuilderError):
    """Primary and secondary providers are both exhausted."""

    def __init__(self, errors: list[ProviderError]) -> None:
        self.errors = errors
        providers = ", ".join(e.provider for e in errors) or "none"
        super().__init__(f"All providers failed: {providers}")


class ExtractionError(SpaceBuilderError):
    """Model text did not contain a usable JSON object."""
