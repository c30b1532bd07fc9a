"""
Tests for the command line entry point.
"""

import json
import logging
from pathlib import Path

import pytest

import main
from main import FormsRenderApp


@pytest.fixture(autouse=True)
def restoreRootLogger():
    """Undo the logging configuration applied by the application."""
    rootLogger = logging.getLogger()
    savedLevel = rootLogger.level
    savedHandlers = rootLogger.handlers[:]
    yield
    rootLogger.handlers = savedHandlers
    rootLogger.setLevel(savedLevel)


class TestFormsRenderApp:
    """Test rendering files with a loaded configuration."""

    def testRenderFile(self, configFile, markdownFile):
        """Test a whole form document renders all its controls."""
        app = FormsRenderApp(configPath=str(configFile))

        html = app.renderFile(str(markdownFile))

        assert "<h1>Sign up</h1>" in html
        assert '\n<label for="full-name" class="required">Full Name</label>' in html
        assert '\n<input required name="full name" id="full-name" class="required">' in html
        assert '\n<input required type="email" name="email" id="email" class="required">' in html
        assert '\n<option value="">Please select</option>' in html
        assert '\n<option value="TMO">T-Mobile</option>' in html
        assert '\n<ul id="interests" class="checklist">' in html
        assert '<input id="interests-2" type="checkbox" name="interests" value="Markdown">' in html
        assert '\n</ul>\n<label for="interests">Interests</label>' in html
        assert '\n<input type="submit" value="Sign up">' in html

    def testRunWritesOutputFile(self, configFile, markdownFile, tmp_path):
        """Test HTML is written to the output file."""
        output = tmp_path / "out.html"
        app = FormsRenderApp(configPath=str(configFile))

        app.run([str(markdownFile)], str(output))

        assert '<select name="carrier" id="carrier">' in output.read_text(encoding="utf-8")

    def testRunWritesStdout(self, configFile, markdownFile, capsys):
        """Test HTML goes to stdout without an output file."""
        app = FormsRenderApp(configPath=str(configFile))

        app.run([str(markdownFile)])

        assert '<select name="carrier" id="carrier">' in capsys.readouterr().out

    def testRenderStdin(self, configFile, monkeypatch):
        """Test '-' reads markdown from stdin."""
        monkeypatch.setattr("sys.stdin", _StdinStub("[??](name)"))
        app = FormsRenderApp(configPath=str(configFile))

        assert '\n<input name="name" id="name">' in app.renderFile("-")


class TestMain:
    """Test argument handling."""

    def testPrintConfig(self, configFile, capsys):
        """Test --print-config prints the merged configuration as JSON."""
        with pytest.raises(SystemExit) as excInfo:
            main.main(["-c", str(configFile), "--print-config"])

        assert excInfo.value.code == 0
        config = json.loads(capsys.readouterr().out)
        assert config["markdown"]["plugins"] == []
        assert config["markdown"]["allow_spaces_in_links"] is True

    def testMissingInputFileExits(self, configFile, tmp_path):
        """Test unreadable input files exit with an error."""
        with pytest.raises(SystemExit) as excInfo:
            main.main(["-c", str(configFile), str(tmp_path / "missing.md")])

        assert excInfo.value.code == 1

    def testNestedGroupsExit(self, configFile, tmp_path):
        """Test nested grouped controls exit with an error."""
        source = Path(tmp_path / "nested.md")
        source.write_text("[?select?](a)\n\n- one\n- two [?radiolist?](b)\n", encoding="utf-8")

        with pytest.raises(SystemExit) as excInfo:
            main.main(["-c", str(configFile), str(source)])

        assert excInfo.value.code == 1

    def testRenderToOutput(self, configFile, markdownFile, tmp_path):
        """Test rendering files to an output path."""
        output = tmp_path / "signup.html"

        main.main(["-c", str(configFile), "-o", str(output), str(markdownFile)])

        assert '\n<input type="submit" value="Sign up">' in output.read_text(encoding="utf-8")


class _StdinStub:
    def __init__(self, text: str):
        self._text = text

    def read(self) -> str:
        return self._text
