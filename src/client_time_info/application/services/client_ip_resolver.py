"""Client IP resolution from proxy headers."""

from client_time_info.domain.models import RequestContext

FORWARDED_FOR_HEADER = "X-Forwarded-For"
REAL_IP_HEADER = "X-Real-IP"
CF_CONNECTING_IP_HEADER = "CF-Connecting-IP"


def resolve_client_ip(context: RequestContext) -> str:
    """Resolve the client IP, preferring proxy headers over the connection address.

    Priority (first match wins):

    1. ``X-Forwarded-For`` when non-empty: first element of the comma-separated
       chain, stripped of surrounding whitespace.
    2. ``X-Real-IP``, verbatim.
    3. ``CF-Connecting-IP``, verbatim.
    4. The transport-level remote address.

    Header values are client-supplied and are not validated as IP addresses.
    """
    forwarded_for = context.header(FORWARDED_FOR_HEADER)
    if forwarded_for:
        # X-Forwarded-For may contain a list: client, proxy1, proxy2, ...
        return forwarded_for.split(",")[0].strip()

    real_ip = context.header(REAL_IP_HEADER)
    if real_ip is not None:
        return real_ip

    cf_connecting_ip = context.header(CF_CONNECTING_IP_HEADER)
    if cf_connecting_ip is not None:
        return cf_connecting_ip

    return context.remote_address
