# START OF FILE: astrosolar/infra/clients/sheets_client.py

import json

import gspread

from astrosolar.shared.logger import logger, tail
from astrosolar.shared.config import Settings
from astrosolar.domain.models import EnrichedLead
from astrosolar.domain.errors import StorageError
from astrosolar.infra.clients.base import LeadBackend

SCOPES = ['https://www.googleapis.com/auth/spreadsheets']

# Header row expected in the first worksheet
SHEET_COLUMNS = [
    'name', 'email', 'phone', 'postcode', 'interest', 'installers',
    'message', 'billAnalysis', 'timestamp', 'source', 'status',
]


def _cell(value):
    if value is None:
        return ''
    if isinstance(value, (str, int, float, bool)):
        return value
    return json.dumps(value, ensure_ascii=False)


class GoogleSheetsClient(LeadBackend):
    provider_name = "google_sheets"

    def __init__(self, settings: Settings):
        self.sheet_id = settings.google_sheets_id
        self.credentials_json = settings.google_service_account_json

    def is_configured(self) -> bool:
        return bool(self.sheet_id and self.credentials_json)

    def _get_worksheet(self):
        """Authorizes with the service account and opens the first worksheet."""
        creds_json = json.loads(self.credentials_json)
        client = gspread.service_account_from_dict(creds_json, scopes=SCOPES)
        return client.open_by_key(self.sheet_id).sheet1

    @staticmethod
    def to_row(lead: EnrichedLead) -> list:
        fields = lead.to_dict()
        return [_cell(fields.get(column)) for column in SHEET_COLUMNS]

    def deliver(self, lead: EnrichedLead) -> str:
        try:
            logger.info(f"Appending lead to Google Sheet {tail(self.sheet_id)}...")
            worksheet = self._get_worksheet()
            worksheet.append_row(self.to_row(lead), value_input_option='USER_ENTERED')
        except Exception as e:
            logger.error(f"Error writing lead to Google Sheet {tail(self.sheet_id)}: {e}", exc_info=True)
            raise StorageError(details="Failed to save to Google Sheets") from e

        logger.info("Lead saved to Google Sheets.")
        return self.provider_name

# END OF FILE: astrosolar/infra/clients/sheets_client.py
