"""
Caller identity for mutating requests.

There are no user accounts.  Clients identify themselves with the
``X-Caller-Id`` header, and the value is recorded as the customer id of
a service request or the operator id of an operator listing.  No
verification takes place; the header only replaces a hard-coded
identity with an explicit one.
"""

from fastapi import Header, HTTPException, status


CALLER_HEADER = "X-Caller-Id"


def get_caller_id(x_caller_id: str | None = Header(default=None, alias=CALLER_HEADER)) -> str:
    """Return the caller id from the request header.

    Raises HTTP 401 when the header is missing or blank.
    """
    if x_caller_id is None or not x_caller_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"{CALLER_HEADER} header required",
        )
    return x_caller_id.strip()
