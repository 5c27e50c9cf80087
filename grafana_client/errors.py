"""Errors raised by the Grafana HTTP API client."""

from __future__ import annotations


class GrafanaAPIError(Exception):
    """The Grafana API answered with an error status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"status: {status_code}, body: {message}")
        self.status_code = status_code
        self.message = message


def _causes(err: BaseException | None):
    """Yield the error and every error it was raised from or during."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = err.__cause__ or err.__context__


def get_api_error(err: BaseException | None) -> GrafanaAPIError | None:
    """Return the GrafanaAPIError in the error's chain, or None."""
    return next((e for e in _causes(err) if isinstance(e, GrafanaAPIError)), None)


def is_not_found(err: BaseException | None) -> bool:
    """Tell whether the error comes from a 404 response."""
    api_error = get_api_error(err)
    return api_error is not None and api_error.status_code == 404