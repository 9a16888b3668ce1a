# START OF FILE: astrosolar/domain/models.py

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional, Union

REQUIRED_LEAD_FIELDS = ('name', 'email', 'phone')


@dataclass
class Message:
    role: str  # 'system', 'user' or 'assistant'
    content: Union[str, List[Dict[str, Any]]]

    def to_dict(self):
        return asdict(self)


@dataclass
class ChatRequest:
    """What the provider is asked: a model plus the full message list."""
    model: str
    messages: List[Dict[str, Any]]
    max_tokens: int
    temperature: float


@dataclass
class ChatResult:
    message: str
    usage: Optional[Dict[str, Any]] = None

    def to_dict(self):
        return {"message": self.message, "usage": self.usage}


@dataclass(frozen=True)
class EnrichedLead:
    fields: Dict[str, Any] = field(default_factory=dict)

    @property
    def timestamp(self) -> str:
        return self.fields['timestamp']

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.fields)

# END OF FILE: astrosolar/domain/models.py
