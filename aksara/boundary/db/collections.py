"""
Collection definitions.

Each collection names its key namespace, the pydantic record model stored
under it, and an optional fixed seed set inserted once by ensure_seed.

Dependencies: aksara.models
System role: Per-entity-type configuration of the entity store
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from aksara.core.clock import now_millis
from aksara.models.chat import ChatBoard, ChatMessage
from aksara.models.common import Record
from aksara.models.thought import Thought
from aksara.models.user import User

RecordT = TypeVar("RecordT", bound=Record)


@dataclass(frozen=True)
class CollectionDefinition(Generic[RecordT]):
    """
    Configuration of one logical collection in the key-value namespace.

    Attributes:
        name: Human-readable collection name, used in errors and logs
        key_prefix: Namespace prefix; records live under "{key_prefix}:{id}"
        record_type: Pydantic model every stored value validates against
        seed: Records inserted once when the collection is first seeded
    """

    name: str
    key_prefix: str
    record_type: type[RecordT]
    seed: tuple[RecordT, ...] = field(default_factory=tuple)

    def record_key(self, record_id: str) -> str:
        return f"{self.key_prefix}:{record_id}"

    @property
    def scan_prefix(self) -> str:
        return f"{self.key_prefix}:"

    @property
    def seed_key(self) -> str:
        # Outside scan_prefix so it never shows up in listings
        return f"seed:{self.key_prefix}"


THOUGHTS: CollectionDefinition[Thought] = CollectionDefinition(
    name="thought",
    key_prefix="thought",
    record_type=Thought,
)

USERS: CollectionDefinition[User] = CollectionDefinition(
    name="user",
    key_prefix="user",
    record_type=User,
    seed=(
        User(id="u1", name="User A"),
        User(id="u2", name="User B"),
    ),
)

CHATS: CollectionDefinition[ChatBoard] = CollectionDefinition(
    name="chat",
    key_prefix="chat",
    record_type=ChatBoard,
    seed=(
        ChatBoard(
            id="c1",
            title="General",
            messages=[
                ChatMessage(id="m1", chat_id="c1", user_id="u1", text="Hello", ts=now_millis()),
            ],
        ),
    ),
)
