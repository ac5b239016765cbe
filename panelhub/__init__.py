"""Panelhub.

Data-access layer and HTTP API for two pieces of a monitoring platform:

- **Correlations**: links between a source and a target data source, with a
  label and a description. A correlation can only be created when both data
  sources exist, and it can only be edited when the source is not read-only.
- **Playlists**: named, ordered lists of dashboards that are cycled through at
  a fixed interval.

Core subpackages
----------------

- ``panelhub.core``:

  - ``database``: SQLModel entities, the transactional session helpers and the
    stores (``DataSourceRepository``, ``CorrelationStore``, ``PlaylistStore``).
  - ``models``: pydantic commands, queries and DTOs passed to the stores.
  - ``errors``: the sentinel errors every store raises.

- ``panelhub.server``: FastAPI application exposing the stores over HTTP.
"""
