"""Tests for the headmeta command-line interface."""

from typer.testing import CliRunner

from headmeta.cli import app

runner = CliRunner()


class TestRenderCommand:
    """Tests for `headmeta render`."""

    def test_render_document(self, tmp_path, sample_document_yaml: str) -> None:
        path = tmp_path / "head.yaml"
        path.write_text(sample_document_yaml, encoding="utf-8")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 0
        assert result.stdout.startswith('<meta charset="UTF-8">')
        assert '<link href="/favicon.ico" rel="icon">' in result.stdout

    def test_charset_option(self, tmp_path) -> None:
        path = tmp_path / "head.yaml"
        path.write_text("name:\n  author: Jane\n", encoding="utf-8")

        result = runner.invoke(app, ["render", str(path), "--charset", "ISO-8859-1"])

        assert result.exit_code == 0
        assert '<meta charset="ISO-8859-1"><meta name="author" content="Jane">' in result.stdout

    def test_invalid_document(self, tmp_path) -> None:
        path = tmp_path / "head.yaml"
        path.write_text("title: Home\n", encoding="utf-8")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 1

    def test_invalid_attribute_name(self, tmp_path) -> None:
        path = tmp_path / "head.yaml"
        path.write_text('name:\n  robots:\n    content: noindex\n    "a b": x\n', encoding="utf-8")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 1
        assert "Invalid attribute name" in result.output

    def test_attribute_replacing_entry_key(self, tmp_path) -> None:
        path = tmp_path / "head.yaml"
        path.write_text("name:\n  author:\n    content: Jane\n    name: other\n", encoding="utf-8")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 1
        assert "other" not in result.stdout

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "head.yaml"
        path.write_text("name: [unclosed\n", encoding="utf-8")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 1

    def test_missing_file(self, tmp_path) -> None:
        result = runner.invoke(app, ["render", str(tmp_path / "missing.yaml")])

        assert result.exit_code != 0


class TestVersionCommand:
    """Tests for `headmeta version`."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "headmeta 0.1.0" in result.stdout
