"""Close Session control identifier — typed parser/serializer.

Wire format: ``close_thread_<owner id>``, the owner id being the third
underscore-delimited field.
"""

from dataclasses import dataclass
from typing import Optional

CUSTOM_ID_PREFIX = "close"
CUSTOM_ID_KIND = "thread"
_SEPARATOR = "_"


@dataclass(frozen=True)
class CloseSessionControl:
    """Button identity binding a session thread to the only user allowed to close it."""

    owner_id: int

    def to_custom_id(self) -> str:
        return _SEPARATOR.join((CUSTOM_ID_PREFIX, CUSTOM_ID_KIND, str(self.owner_id)))

    @classmethod
    def parse(cls, custom_id: Optional[str]) -> Optional["CloseSessionControl"]:
        """Return the control for a close-session id, or None for anything else."""
        if not custom_id:
            return None
        fields = custom_id.split(_SEPARATOR)
        if len(fields) != 3:
            return None
        prefix, kind, owner = fields
        if prefix != CUSTOM_ID_PREFIX or kind != CUSTOM_ID_KIND:
            return None
        if not owner.isdigit():
            return None
        return cls(owner_id=int(owner))

    def is_owner(self, user_id: int) -> bool:
        return user_id == self.owner_id
