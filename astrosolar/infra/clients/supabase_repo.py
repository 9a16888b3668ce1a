# START OF FILE: astrosolar/infra/clients/supabase_repo.py

from supabase import create_client, Client

from astrosolar.shared.logger import logger
from astrosolar.shared.config import Settings, SUPABASE_LEADS_TABLE
from astrosolar.domain.models import EnrichedLead
from astrosolar.domain.errors import StorageError
from astrosolar.infra.clients.base import LeadBackend


class SupabaseRepo(LeadBackend):
    provider_name = "supabase"

    def __init__(self, settings: Settings):
        self.url = settings.supabase_url
        self.key = settings.supabase_key

    def is_configured(self) -> bool:
        return bool(self.url and self.key)

    def deliver(self, lead: EnrichedLead) -> str:
        try:
            client: Client = create_client(self.url, self.key)
            response = client.table(SUPABASE_LEADS_TABLE).insert(lead.to_dict()).execute()
        except Exception as e:
            logger.error(f"Supabase error while inserting lead: {e}", exc_info=True)
            raise StorageError(details="Failed to save to Supabase") from e

        logger.info(f"Lead saved to Supabase table '{SUPABASE_LEADS_TABLE}' ({len(response.data or [])} row(s)).")
        return self.provider_name

# END OF FILE: astrosolar/infra/clients/supabase_repo.py
