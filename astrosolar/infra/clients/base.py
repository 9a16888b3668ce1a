# START OF FILE: astrosolar/infra/clients/base.py

from abc import ABC, abstractmethod

from astrosolar.domain.models import EnrichedLead


class LeadBackend(ABC):
    """A third-party store that can accept an enriched lead."""

    provider_name: str = "base"

    @abstractmethod
    def is_configured(self) -> bool:
        ...

    @abstractmethod
    def deliver(self, lead: EnrichedLead) -> str:
        """Store the lead and return `provider_name`. Raises StorageError."""
        ...

# END OF FILE: astrosolar/infra/clients/base.py
