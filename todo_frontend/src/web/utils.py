from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from fastapi import Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

HX_REQUEST_HEADER = "HX-Request"


@dataclass(frozen=True)
class FragmentResponse:
    """An HTML fragment for htmx to swap into the page."""
    html: str


@dataclass(frozen=True)
class FullPageRedirect:
    """Send a plain browser back to a full page after a form submission."""
    location: str = "/"


Outcome = Union[FragmentResponse, FullPageRedirect]


# PUBLIC_INTERFACE
def is_hx_request(request: Request) -> bool:
    """Return True when the request was issued by htmx (HX-Request: true)."""
    return request.headers.get(HX_REQUEST_HEADER) == "true"


# PUBLIC_INTERFACE
def select_outcome(hx_request: bool, html: str, location: str = "/") -> Outcome:
    """
    Choose the response shape for a state-changing request.

    htmx callers get the fragment; everything else gets a redirect to the full page.
    """
    if hx_request:
        return FragmentResponse(html=html)
    return FullPageRedirect(location=location)


# PUBLIC_INTERFACE
def to_response(outcome: Outcome) -> Response:
    """Build the HTTP response for an outcome."""
    if isinstance(outcome, FragmentResponse):
        return HTMLResponse(content=outcome.html)
    return RedirectResponse(url=outcome.location, status_code=status.HTTP_303_SEE_OTHER)
