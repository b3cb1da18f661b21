"""Delegate Dashboard extension payload contracts."""

from typing import Optional

from pydantic import Field

from wcif_types.models import ExtensionPayload

GROUPS: str = "com.delegate-dashboard.groups"
# Published documents carry this id instead of GROUPS; the spec URL is the
# reliable way to recognize them.
GROUPS_PUBLISHED_ID: str = "undefined.groups"
GROUPS_SPEC_URL: str = (
    "https://github.com/coder13/delegateDashboard/blob/main/public/wcif-extensions/groups.json"
)
SCHEMA_VERSION: str = "1.0"


class GroupsConfig(ExtensionPayload):
    """Payload for the Delegate Dashboard groups extension."""

    groups: int = Field(..., ge=1, strict=True, description="Number of groups")
    spread_groups_across_all_stages: Optional[bool] = Field(None, strict=True)
