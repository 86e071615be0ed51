"""Render a finding as the single-line issue message."""

from zapcheck.models import Finding

SEPARATOR = " | "

# (label, attribute) in output order
DESCRIPTION_FIELDS: tuple[tuple[str, str], ...] = (
    ("URI", "uri"),
    ("Confidence", "confidence"),
    ("Description", "description"),
    ("Param", "param"),
    ("Attack", "attack"),
    ("Evidence", "evidence"),
)


def format_finding(finding: Finding) -> str:
    """Join the non-blank fields of ``finding`` as ``Label: value`` pairs."""
    parts = []
    for label, attr in DESCRIPTION_FIELDS:
        value = getattr(finding, attr)
        if value is None:
            continue
        value = str(value)
        if not value.strip():
            continue
        parts.append(f"{label}: {value}")
    return SEPARATOR.join(parts)
