"""Shared fixtures for zapcheck tests."""

import io
import textwrap
from pathlib import Path

import pytest

SAMPLE_REPORT = """\
<?xml version="1.0"?>
<OWASPZAPReport version="2.6.0" generated="Tue, 3 Oct 2017 10:00:00">
<site name="http://localhost:8080" host="localhost" port="8080" ssl="false">
<alerts>
<alertitem>
  <pluginid>40012</pluginid>
  <alert>Cross Site Scripting (Reflected)</alert>
  <riskcode>3</riskcode>
  <confidence>2</confidence>
  <riskdesc>High (Medium)</riskdesc>
  <desc>Cross-site Scripting (XSS) is an attack technique.</desc>
  <uri>http://localhost:8080/search?q=test</uri>
  <param>q</param>
  <attack>&lt;script&gt;alert(1);&lt;/script&gt;</attack>
  <evidence>&lt;script&gt;alert(1);&lt;/script&gt;</evidence>
  <solution>Validate all input.</solution>
  <cweid>79</cweid>
  <wascid>8</wascid>
</alertitem>
<alertitem>
  <pluginid>10016</pluginid>
  <alert>Web Browser XSS Protection Not Enabled</alert>
  <riskcode>1</riskcode>
  <confidence>2</confidence>
  <desc>Web Browser XSS Protection is not enabled.</desc>
  <uri>http://localhost:8080/</uri>
  <param>X-XSS-Protection</param>
</alertitem>
<alertitem>
  <pluginid>10020</pluginid>
  <alert>X-Frame-Options Header Not Set</alert>
  <riskcode>2</riskcode>
  <confidence>2</confidence>
  <desc>X-Frame-Options header is not included.</desc>
  <uri>http://localhost:8080/login</uri>
</alertitem>
<alertitem>
  <pluginid>10027</pluginid>
  <alert>Information Disclosure - Suspicious Comments</alert>
  <riskcode>0</riskcode>
  <confidence>1</confidence>
  <desc>The response appears to contain suspicious comments.</desc>
  <uri>http://localhost:8080/app.js</uri>
</alertitem>
</alerts>
</site>
</OWASPZAPReport>
"""


class TrackingStream(io.BytesIO):
    """BytesIO that remembers whether close() was called."""

    closed_by_parser = False

    def close(self):
        self.closed_by_parser = True
        super().close()


@pytest.fixture
def sample_report() -> str:
    return SAMPLE_REPORT


@pytest.fixture
def stream():
    """Wrap XML text in a stream that records being closed."""

    def _create(content: str | bytes) -> TrackingStream:
        if isinstance(content, str):
            content = textwrap.dedent(content).encode("utf-8")
        return TrackingStream(content)

    return _create


@pytest.fixture
def report_file(tmp_path: Path):
    """Write a report into a temporary project root."""

    def _create(content: str, filename: str = "zaproxy-report.xml") -> Path:
        f = tmp_path / filename
        f.parent.mkdir(parents=True, exist_ok=True)
        f.write_text(textwrap.dedent(content))
        return f

    return _create
