from dataclasses import dataclass
from typing import Generic, TypeVar

from enums import ApiResultStatus

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Result wrapper returned by every REST client call.

    `item` carries the decoded payload and is only ever set on success;
    callers should branch on `status` or `is_success` before reading it.
    """

    status: ApiResultStatus
    item: T | None = None

    def __post_init__(self) -> None:
        if self.item is not None and self.status != ApiResultStatus.SUCCESS:
            raise ValueError(f"Result with status {self.status} cannot carry an item")

    @property
    def is_success(self) -> bool:
        return self.status == ApiResultStatus.SUCCESS
