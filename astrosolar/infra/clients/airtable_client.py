# START OF FILE: astrosolar/infra/clients/airtable_client.py

from urllib.parse import quote

import requests

from astrosolar.shared.logger import logger, tail
from astrosolar.shared.config import Settings, AIRTABLE_API_URL
from astrosolar.domain.models import EnrichedLead
from astrosolar.domain.errors import StorageError
from astrosolar.infra.clients.base import LeadBackend


class AirtableClient(LeadBackend):
    provider_name = "airtable"

    def __init__(self, settings: Settings):
        self.api_key = settings.airtable_api_key
        self.base_id = settings.airtable_base_id
        self.table_name = settings.airtable_table_name

    def is_configured(self) -> bool:
        return bool(self.api_key and self.base_id)

    @property
    def records_url(self) -> str:
        return f"{AIRTABLE_API_URL}/{self.base_id}/{quote(self.table_name)}"

    def deliver(self, lead: EnrichedLead) -> str:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            logger.info(f"Creating Airtable record in base {tail(self.base_id)}, table '{self.table_name}'...")
            response = requests.post(self.records_url, headers=headers, json={"fields": lead.to_dict()}, timeout=20)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to Airtable failed: {e!r}")
            raise StorageError(details="Failed to save to Airtable") from e

        if not response.ok:
            logger.error(f"Airtable error (status {response.status_code}): {response.text}")
            raise StorageError(details="Failed to save to Airtable")

        logger.info("Lead saved to Airtable.")
        return self.provider_name

# END OF FILE: astrosolar/infra/clients/airtable_client.py
