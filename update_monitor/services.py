import logging

import requests

from .constants import NOTIFY_TIMEOUT_SECONDS
from .exceptions import SendError

logger = logging.getLogger(__name__)


def send_slack_payload(webhook_url, payload, timeout=NOTIFY_TIMEOUT_SECONDS):
    """Envia o payload ao webhook do Slack. Sem retry; falhas viram SendError."""
    try:
        resp = requests.post(webhook_url, json=payload, timeout=timeout)
    except requests.RequestException as exc:
        raise SendError(f"Could not send to slack: {exc}") from exc

    logger.debug(f"Slack response: {resp.status_code}")
    if not 200 <= resp.status_code < 300:
        logger.debug(f"Response content: {resp.text}")
        raise SendError(f"Slack respondeu com status {resp.status_code}", status_code=resp.status_code)
    return resp
