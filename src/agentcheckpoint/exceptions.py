"""
Checkpoint-specific exceptions.
"""


class CheckpointError(Exception):
    """Base exception for checkpoint-related errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(self.message)


class NoActiveProviderError(CheckpointError):
    """Raised when an operation needs an active provider and none is selected."""

    def __init__(self, message: str = "No checkpoint provider is active"):
        super().__init__(message, code=-33001)


class NotFoundError(CheckpointError):
    """Raised when a named item cannot be resolved."""


class ProviderNotFoundError(NotFoundError):
    """Raised when activating a provider name that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Checkpoint provider '{name}' is not registered", code=-33002)


class CheckpointNotFoundError(NotFoundError):
    """Raised when the active provider has no record for a checkpoint id."""

    def __init__(self, checkpoint_id: str):
        self.checkpoint_id = checkpoint_id
        super().__init__(f"Checkpoint {checkpoint_id} not found", code=-33003)


class HookNotFoundError(NotFoundError):
    """Raised when enabling or disabling a hook that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Hook '{name}' is not registered", code=-33004)
