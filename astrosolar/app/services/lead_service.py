# START OF FILE: astrosolar/app/services/lead_service.py

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from astrosolar.infra.clients.base import LeadBackend
from astrosolar.infra.clients.airtable_client import AirtableClient
from astrosolar.infra.clients.sheets_client import GoogleSheetsClient
from astrosolar.infra.clients.supabase_repo import SupabaseRepo
from astrosolar.domain.models import EnrichedLead, REQUIRED_LEAD_FIELDS
from astrosolar.domain.errors import RelayError, InvalidInput, InternalError
from astrosolar.shared.config import Settings, LEAD_SOURCE, LEAD_INITIAL_STATUS
from astrosolar.shared.logger import logger


def build_backends(settings: Settings) -> List[LeadBackend]:
    """Backends in priority order. The first configured one gets the lead."""
    return [
        AirtableClient(settings),
        GoogleSheetsClient(settings),
        SupabaseRepo(settings),
    ]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LeadService:
    def __init__(self, backends: Sequence[LeadBackend], clock: Callable[[], datetime] = utc_now):
        self.backends = list(backends)
        self.clock = clock
        logger.info(f"LeadService initialized with backends: {[b.provider_name for b in self.backends]}.")

    @staticmethod
    def validate(body: Dict[str, Any]) -> None:
        if any(not body.get(name) for name in REQUIRED_LEAD_FIELDS):
            raise InvalidInput("Missing required fields: name, email, and phone are required")

    def enrich(self, body: Dict[str, Any]) -> EnrichedLead:
        timestamp = self.clock().isoformat(timespec='microseconds').replace('+00:00', 'Z')
        return EnrichedLead(fields={
            **body,
            'timestamp': timestamp,
            'source': LEAD_SOURCE,
            'status': LEAD_INITIAL_STATUS,
        })

    def active_backend(self) -> Optional[LeadBackend]:
        for backend in self.backends:
            if backend.is_configured():
                return backend
        return None

    def save_lead(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """Validates, enriches and stores a lead. Returns the response body."""
        self.validate(body)
        lead = self.enrich(body)

        backend = self.active_backend()
        if backend is None:
            logger.warning(f"No database configured. Lead data: {lead.to_dict()}")
            return {
                "success": True,
                "message": "Lead received (no database configured - check server logs)",
                "warning": "Please configure a database to persist lead data",
            }

        try:
            provider = backend.deliver(lead)
        except RelayError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error while saving lead via {backend.provider_name}: {e}", exc_info=True)
            raise InternalError("Failed to save lead data") from e

        return {"success": True, "message": "Lead saved successfully", "provider": provider}

# END OF FILE: astrosolar/app/services/lead_service.py
