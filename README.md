# grafana-client

A Python client for the Grafana HTTP API. It covers data sources and their
permissions, folders and folder permissions, folder and dashboard search,
library panels, organisations with their users and preferences, playlists,
reports, access control roles, snapshots, teams with their members,
preferences and external groups, and users.

## Installation

```
pip install grafana-client
```

## Getting started

Create a `Config` with your API key and hand it to a `Client` together with
the base URL of your Grafana instance:

```python
from grafana_client.client import Client
from grafana_client.transport import Config

client = Client("http://localhost:3000", Config(api_key="placeholder"))

for folder in client.folders():
    print(folder.id, folder.uid, folder.title)
```

The API key is sent as a `Bearer` token in the `Authorization` header.
`Config` also takes a `session` (a `requests.Session`) if you want to supply
your own, for example with custom proxies or adapters. A base URL without a
scheme or host raises `ValueError`.

Results come back as dataclasses such as `Folder`, `DataSource`, `Org`,
`LibraryPanel`, `Team` or `User`; payloads you send are built from the same
kind of objects. Each has `from_dict` and/or `to_dict` for the JSON form the
API uses.

### Data sources

```python
from grafana_client.datasource import DataSource, JSONData

ds = DataSource(
    name="prometheus",
    type="prometheus",
    url="http://localhost:9090",
    access="proxy",
    json_data=JSONData(http_method="POST"),
    http_headers={"X-Scope-OrgID": "tenant"},
)
new_id = client.new_data_source(ds)
fetched = client.data_source(new_id)
```

Custom HTTP headers are written as numbered `httpHeaderName<n>` /
`httpHeaderValue<n>` pairs in `jsonData` and `secureJsonData`. Grafana never
returns header values, so on a data source read back from the API each header
maps to `"true"`. For the `grafana-sentry-datasource` type the data source URL
is also copied into `jsonData.url`.

Other calls: `update_data_source`, `data_source_by_uid`,
`data_source_id_by_name`, `data_sources` and `delete_data_source`; and for
permissions `enable_datasource_permissions`, `disable_datasource_permissions`,
`datasource_permissions`, `add_datasource_permission` and
`remove_datasource_permission`.

### Organisations and teams

```python
org_id = client.new_org("Engineering")
client.add_org_user(org_id, "someone@example.com", "Editor")

team_id = client.add_team("SRE", "sre@example.com")
client.add_team_member(team_id, 42)
```

`search_team(query)` returns the first page of up to 1000 matching teams.

### Library panels

```python
from grafana_client.library_panel import LibraryPanel

panel = client.new_library_panel(
    LibraryPanel(name="CPU usage", model={"type": "timeseries"})
)
print(panel.uid)
```

`patch_library_panel` fetches the panel's current version first when the panel
passed in has a version of 0. `library_panel_by_name` raises `ValueError`
unless exactly one panel has that name. `library_panel_connections` lists the
dashboards a panel is used in, by `dashboard_id`.

### Search

```python
for hit in client.folder_dashboard_search({"query": "Production"}):
    print(hit.type, hit.title, hit.url)
```

## Errors

Any response with a status of 400 or above raises `GrafanaAPIError`, which
carries the HTTP status code and the raw response body:

```python
from grafana_client.errors import GrafanaAPIError, get_api_error, is_not_found

try:
    client.data_source(100)
except GrafanaAPIError as err:
    if is_not_found(err):
        print("no such data source")
    else:
        print(err.status_code, err.message)
```

The data source permission calls re-raise failures as `RuntimeError` naming
the action and path, with the original error as the cause.
`get_api_error(err)` returns the `GrafanaAPIError` found in an exception's
chain, or `None`, and `is_not_found(err)` looks through the chain the same way.

## What it does not do

The package has no calls for creating, reading or deleting dashboards
themselves; dashboards are reached only through `folder_dashboard_search`.
There is no command-line tool: it is a library to call from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```