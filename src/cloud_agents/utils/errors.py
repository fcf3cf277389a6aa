"""Exception hierarchy for cloud agent image handling."""


class CloudError(Exception):
    """Base exception for cloud agent errors."""

    pass


class ConfigurationError(CloudError):
    """A profile is missing a required parameter.

    Raised while constructing a provider client; fatal and not retried.
    """

    pass


class ValidationError(CloudError):
    """An image definition failed one or more field rules."""

    def __init__(self, messages: dict[str, list[str]]) -> None:
        self.messages = messages
        fields = ", ".join(sorted(messages))
        super().__init__(f"Invalid image definition fields: {fields}")


class CatalogFetchError(CloudError):
    """Catalog refresh failed at the transport or provider level."""

    pass


class ImageDataError(CloudError):
    """Persisted image data could not be decoded."""

    pass


class EditorStateError(CloudError):
    """Editor operation is not defined in the current state."""

    def __init__(self, operation: str, state: str) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while editor is {state}")
