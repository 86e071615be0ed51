"""Map ZAP risk codes to severities."""

import logging

from zapcheck.errors import ClassificationError
from zapcheck.models import Severity

logger = logging.getLogger(__name__)

RISK_CODE_MAP: dict[int, Severity] = {
    0: Severity.INFO,
    1: Severity.MINOR,
    2: Severity.MAJOR,
    3: Severity.CRITICAL,
}

FALLBACK_SEVERITY = Severity.INFO


def classify(risk_code: int, strict: bool = False) -> Severity:
    """Return the severity for a ZAP risk code.

    Unknown codes map to ``FALLBACK_SEVERITY`` unless ``strict`` is set, in
    which case ``ClassificationError`` is raised.
    """
    severity = RISK_CODE_MAP.get(risk_code)
    if severity is not None:
        return severity
    if strict:
        raise ClassificationError(risk_code)
    logger.warning("Unknown risk code %s, using %s", risk_code, FALLBACK_SEVERITY.value)
    return FALLBACK_SEVERITY
