"""Shared test fixtures for the pseudo-localizer."""

import json

import pytest


SAMPLE_RESX = b"""<?xml version="1.0" encoding="utf-8"?>
<root>
  <!-- Strings shown on the start page -->
  <xsd:schema id="root" xmlns="" xmlns:xsd="http://www.w3.org/2001/XMLSchema" xmlns:msdata="urn:schemas-microsoft-com:xml-msdata">
    <xsd:element name="root" msdata:IsDataSet="true" />
  </xsd:schema>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <data name="Greeting" xml:space="preserve">
    <value>Hello {0}</value>
    <comment>Shown after login</comment>
  </data>
  <data name="Farewell" xml:space="preserve">
    <value>Goodbye</value>
  </data>
  <data name="Empty" xml:space="preserve">
    <value />
  </data>
  <data name="&gt;&gt;button1.Name" xml:space="preserve">
    <value>button1</value>
  </data>
  <data name="$this.Text">
    <value>Main form</value>
  </data>
  <data name="Logo" type="System.Drawing.Bitmap, System.Drawing" mimetype="application/x-microsoft.net.object.bytearray.base64">
    <value>iVBORw0KGgo=</value>
  </data>
</root>
"""

SAMPLE_LOCALE = {
    "home": {
        "title": "Welcome",
        "subtitle": "You have {0} messages",
        "count": 3,
        "blank": " ",
        "tabs": ["Inbox", "Sent"],
    },
    "enabled": True,
    "missing": None,
}


@pytest.fixture
def sample_resx():
    return SAMPLE_RESX


@pytest.fixture
def sample_locale():
    return json.loads(json.dumps(SAMPLE_LOCALE))


@pytest.fixture
def resx_file(tmp_path):
    path = tmp_path / "Strings.en.resx"
    path.write_bytes(SAMPLE_RESX)
    return path


@pytest.fixture
def json_file(tmp_path):
    path = tmp_path / "en.json"
    path.write_text(json.dumps(SAMPLE_LOCALE), encoding="utf-8")
    return path


@pytest.fixture
def config_path(tmp_path):
    """Config file location that does not exist yet."""
    return tmp_path / "config" / "config.json"


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    """Send log files to a temp directory and switch logging off afterwards."""
    from pseudolocalizer import logger as logger_module
    from pseudolocalizer.web.routes import settings as settings_routes

    log_dir = tmp_path / "logs"
    monkeypatch.setattr(logger_module, "LOG_DIR", log_dir)
    monkeypatch.setattr(logger_module, "LOG_FILE", log_dir / "app.log")
    monkeypatch.setattr(settings_routes, "LOG_FILE", log_dir / "app.log")
    yield log_dir
    logger_module.refresh_log_mode("off")
