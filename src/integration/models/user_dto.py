import datetime
from dataclasses import dataclass

from neuroglia.data.abstractions import Identifiable, queryable


@queryable
@dataclass
class UserDto(Identifiable[str]):
    id: str
    username: str
    email: str | None = None
    created_at: datetime.datetime | None = None
