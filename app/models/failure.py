from typing import Literal, NamedTuple

FailureKind = Literal["input", "upstream", "network", "malformed_url", "internal"]


class Failure(NamedTuple):
    """A classified pipeline failure with a caller-facing message."""

    kind: FailureKind
    message: str

    @property
    def status_code(self) -> int:
        # Only a missing URL is the caller's fault; everything else is a 500.
        return 400 if self.kind == "input" else 500
