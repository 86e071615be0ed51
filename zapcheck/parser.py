"""Streaming parser for OWASP ZAP XML reports.

The report layout is::

    <OWASPZAPReport version="..." generated="...">
      <site name="..." host="..." port="..." ssl="...">
        <alerts>
          <alertitem>
            <pluginid>10016</pluginid>
            <riskcode>1</riskcode>
            ...
          </alertitem>
        </alerts>
      </site>
    </OWASPZAPReport>

Entity declarations are rejected by defusedxml, so nothing referenced from a
DOCTYPE is ever resolved.
"""

import logging
from typing import BinaryIO

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, iterparse

from zapcheck.errors import MalformedReportError
from zapcheck.models import Finding, Report, Site

logger = logging.getLogger(__name__)

SITE_TAG = "site"
ALERTS_TAG = "alerts"
ALERT_ITEM_TAG = "alertitem"

# Fields that newer ZAP versions moved under <instances><instance>.
INSTANCE_FIELDS = ("uri", "param", "attack", "evidence")

_CHUNK_SIZE = 16 * 1024


class _PrefixedReader:
    """File-like reader that replays bytes already consumed from a stream."""

    def __init__(self, prefix: bytes, stream: BinaryIO):
        self._prefix = prefix
        self._stream = stream

    def read(self, size: int = -1) -> bytes:
        if not self._prefix:
            return self._stream.read(size)
        if size is None or size < 0:
            data = self._prefix + self._stream.read()
            self._prefix = b""
            return data
        data, self._prefix = self._prefix[:size], self._prefix[size:]
        return data


def _read_prefix(stream: BinaryIO) -> bytes:
    """Read until the first non-whitespace chunk; empty result means no content."""
    consumed = []
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            return b""
        consumed.append(chunk)
        if chunk.strip():
            return b"".join(consumed)


def _text(element, tag: str) -> str:
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


class ReportParser:
    """Turn a ZAP XML report stream into a ``Report``."""

    def parse(self, stream: BinaryIO) -> Report | None:
        """Parse ``stream`` and close it.

        Returns ``None`` when the stream holds no content at all. Raises
        ``MalformedReportError`` for anything that is not a well-formed report
        with exactly one site.
        """
        try:
            prefix = _read_prefix(stream)
            if not prefix:
                logger.debug("Report stream is empty")
                return None
            return self._parse_document(_PrefixedReader(prefix, stream))
        except (ParseError, DefusedXmlException) as exc:
            raise MalformedReportError(f"Invalid ZAP report: {exc}", cause=exc) from exc
        finally:
            stream.close()

    def _parse_document(self, source: _PrefixedReader) -> Report:
        root = None
        site_attrs: dict[str, str] | None = None
        findings: list[Finding] = []
        path: list[str] = []
        parents: list = []

        for event, elem in iterparse(source, events=("start", "end")):
            if event == "start":
                if root is None:
                    root = elem
                elif path == [root.tag] and elem.tag == SITE_TAG:
                    if site_attrs is not None:
                        raise MalformedReportError("Report contains more than one site element")
                    site_attrs = dict(elem.attrib)
                path.append(elem.tag)
                parents.append(elem)
                continue

            path.pop()
            parents.pop()
            if elem.tag == ALERT_ITEM_TAG and path[1:] == [SITE_TAG, ALERTS_TAG]:
                findings.append(self._build_finding(elem, len(findings)))
                # consumed items are detached from the tree
                parents[-1].remove(elem)

        if root is None:
            raise MalformedReportError("Report has no root element")
        if site_attrs is None:
            raise MalformedReportError("Report has no site element")

        site = Site(
            name=site_attrs.get("name"),
            host=site_attrs.get("host"),
            port=site_attrs.get("port"),
            ssl=site_attrs.get("ssl"),
            findings=tuple(findings),
        )
        logger.debug("Parsed ZAP report for site %s with %d finding(s)", site.name, len(findings))
        return Report(
            site=site,
            version=root.attrib.get("version"),
            generated=root.attrib.get("generated"),
        )

    def _build_finding(self, item, index: int) -> Finding:
        plugin_id = _text(item, "pluginid")
        if not plugin_id:
            raise MalformedReportError(f"Alert item #{index + 1} has no pluginid")

        raw_risk = _text(item, "riskcode")
        if not raw_risk:
            raise MalformedReportError(f"Alert item {plugin_id} has no riskcode")
        try:
            risk_code = int(raw_risk)
        except ValueError as exc:
            raise MalformedReportError(
                f"Alert item {plugin_id} has a non-numeric riskcode: {raw_risk!r}", cause=exc
            ) from exc

        located = {tag: _text(item, tag) for tag in INSTANCE_FIELDS}
        instance = item.find("instances/instance")
        if instance is not None:
            for tag in INSTANCE_FIELDS:
                if not located[tag]:
                    located[tag] = _text(instance, tag)

        return Finding(
            plugin_id=plugin_id,
            risk_code=risk_code,
            confidence=_text(item, "confidence"),
            description=_text(item, "desc"),
            uri=located["uri"],
            param=located["param"],
            attack=located["attack"],
            evidence=located["evidence"],
            name=_text(item, "alert") or _text(item, "name"),
            solution=_text(item, "solution"),
            reference=_text(item, "reference"),
            other_info=_text(item, "otherinfo"),
            cwe_id=_text(item, "cweid"),
            wasc_id=_text(item, "wascid"),
        )


def parse(stream: BinaryIO) -> Report | None:
    """Parse a ZAP report stream. See ``ReportParser.parse``."""
    return ReportParser().parse(stream)
