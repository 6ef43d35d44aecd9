"""POST a serialized message to a webhook URL."""

import time

import requests

from ._constants import FAILURE_MESSAGE, NO_URL_MESSAGE


def _result(success, status_code, error):
    return {
        "success": success,
        "status_code": status_code,
        "error": error,
        "_ts": time.time(),
    }


def send_webhook_payload(body, *, webhook_url, timeout=None):
    """POST already-serialized JSON *body* to *webhook_url*.

    Parameters
    ----------
    body : str
        Wire JSON produced by ``serialize_message``.  Sent as UTF-8 bytes.
    webhook_url : str
        Destination endpoint.  Not validated beyond being non-empty.
    timeout : float, optional
        Seconds to wait for the server.  ``None`` waits indefinitely.

    Returns
    -------
    dict
        ``{success, status_code, error, _ts}``.  Any non-2xx status gives the
        fixed ``FAILURE_MESSAGE``; a transport failure gives the exception text.
    """
    if not webhook_url:
        return _result(False, 0, NO_URL_MESSAGE)

    try:
        resp = requests.post(
            webhook_url,
            data=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    # urllib3's LocationParseError and UnicodeEncodeError are ValueErrors
    except (requests.RequestException, ValueError) as exc:
        print(f"[dash-webhook-composer] Webhook request failed: {exc}")
        return _result(False, 0, str(exc) or FAILURE_MESSAGE)

    # resp.ok would also accept 3xx
    if 200 <= resp.status_code < 300:
        return _result(True, resp.status_code, None)
    print(f"[dash-webhook-composer] Webhook rejected ({resp.status_code})")
    return _result(False, resp.status_code, FAILURE_MESSAGE)
