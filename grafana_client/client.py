"""The Grafana HTTP API client that groups every endpoint family."""

from __future__ import annotations

from .datasource import DataSourceAPI
from .datasource_permissions import DatasourcePermissionsAPI
from .folder import FolderAPI
from .folder_dashboard_search import FolderDashboardSearchAPI
from .folder_permissions import FolderPermissionsAPI
from .library_panel import LibraryPanelAPI
from .org_preferences import OrgPreferencesAPI
from .org_users import OrgUsersAPI
from .orgs import OrgsAPI
from .playlist import PlaylistAPI
from .report import ReportAPI
from .role import RoleAPI
from .snapshot import SnapshotAPI
from .team import TeamAPI
from .team_external_group import TeamGroupAPI
from .transport import Config, Transport
from .user import UserAPI


class Client(
    DataSourceAPI,
    DatasourcePermissionsAPI,
    FolderAPI,
    FolderDashboardSearchAPI,
    FolderPermissionsAPI,
    LibraryPanelAPI,
    OrgPreferencesAPI,
    OrgUsersAPI,
    OrgsAPI,
    PlaylistAPI,
    ReportAPI,
    RoleAPI,
    SnapshotAPI,
    TeamAPI,
    TeamGroupAPI,
    UserAPI,
):
    """A client for one Grafana server."""

    def __init__(self, base_url: str, config: Config | None = None) -> None:
        self._transport = Transport(base_url, config)