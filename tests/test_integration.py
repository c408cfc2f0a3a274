"""Integration tests for netrc lookup and the CLI."""

import pytest
from click.testing import CliRunner

from netrcparse import Machine, ParseError, find_credentials, find_netrc_path, load_netrc
from netrcparse.cli import main

SAMPLE = (
    "machine smtp.example.com login user@example.com password p@ssw0rd port 587\n"
    "machine ftp.example.com login ftpuser password ftppass account acct\n"
    "macdef init\n"
    "cd /pub\n"
    "bin\n"
    "\n"
    "default login anonymous password guest\n"
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.delenv("NETRC", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


class TestLookup:
    """Tests for locating and querying the netrc file."""

    def test_default_path(self, home):
        assert find_netrc_path() == home / ".netrc"

    def test_env_path(self, home, monkeypatch):
        monkeypatch.setenv("NETRC", str(home / "custom"))

        assert find_netrc_path() == home / "custom"

    def test_load_missing_file(self, home):
        assert load_netrc() is None
        assert find_credentials("smtp.example.com") is None

    def test_load_default_location(self, home):
        (home / ".netrc").write_text(SAMPLE)

        netrc = load_netrc()

        assert netrc is not None
        assert len(netrc.hosts) == 2
        assert netrc.macros[0].name == "init"

    def test_find_credentials(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text(SAMPLE)

        cred = find_credentials("ftp.example.com", path)

        assert cred == Machine(
            login="ftpuser", password="ftppass", account="acct"
        )

    def test_find_credentials_default(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text(SAMPLE)

        cred = find_credentials("unknown.example.com", path)

        assert cred.login == "anonymous"
        assert cred.password == "guest"

    def test_find_credentials_no_match(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text("machine a login x\n")

        assert find_credentials("b", path) is None

    def test_find_credentials_parse_error(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text("login x\n")

        with pytest.raises(ParseError) as exc_info:
            find_credentials("a", path)

        assert exc_info.value.message == "No machine defined for login"


class TestCLI:
    """Tests for CLI entry points."""

    def test_cli_entry_point_loads(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "netrcparse" in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0

    def test_check(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text(SAMPLE)

        runner = CliRunner()
        result = runner.invoke(main, ["check", "--netrc", str(path)])

        assert result.exit_code == 0
        assert "OK" in result.output
        assert "2 hosts, 1 macros, default: yes" in result.output

    def test_check_parse_error(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text("machine a\nfoo\n")

        runner = CliRunner()
        result = runner.invoke(main, ["check", "--netrc", str(path)])

        assert result.exit_code != 0
        assert "2: Unknown entry `foo'" in result.output

    def test_check_uses_env(self, home, monkeypatch):
        path = home / "elsewhere"
        path.write_text("default login anon\n")
        monkeypatch.setenv("NETRC", str(path))

        runner = CliRunner()
        result = runner.invoke(main, ["check"])

        assert result.exit_code == 0
        assert "0 hosts, 0 macros, default: yes" in result.output

    def test_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            main, ["check", "--netrc", str(tmp_path / "nonexistent")]
        )
        assert result.exit_code != 0
        assert "not found" in result.output.lower()

    def test_hosts_masks_passwords(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text(SAMPLE)

        runner = CliRunner()
        result = runner.invoke(main, ["hosts", "--netrc", str(path)])

        assert result.exit_code == 0
        assert "smtp.example.com" in result.output
        assert "ftp.example.com" in result.output
        assert "(default)" in result.output
        assert "p@ssw0rd" not in result.output
        assert "********" in result.output
        assert "587" in result.output

    def test_hosts_empty(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text("")

        runner = CliRunner()
        result = runner.invoke(main, ["hosts", "--netrc", str(path)])

        assert result.exit_code == 0
        assert "No machines defined." in result.output

    def test_lookup(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text(SAMPLE)

        runner = CliRunner()
        result = runner.invoke(
            main, ["lookup", "smtp.example.com", "--netrc", str(path)]
        )

        assert result.exit_code == 0
        assert "user@example.com" in result.output
        assert "p@ssw0rd" not in result.output

    def test_lookup_show_password(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text(SAMPLE)

        runner = CliRunner()
        result = runner.invoke(
            main,
            ["lookup", "smtp.example.com", "--netrc", str(path), "--show-password"],
        )

        assert result.exit_code == 0
        assert "p@ssw0rd" in result.output

    def test_lookup_falls_back_to_default(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text(SAMPLE)

        runner = CliRunner()
        result = runner.invoke(main, ["lookup", "other.org", "--netrc", str(path)])

        assert result.exit_code == 0
        assert "anonymous" in result.output

    def test_lookup_not_found(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text("machine a login x\n")

        runner = CliRunner()
        result = runner.invoke(main, ["lookup", "b", "--netrc", str(path)])

        assert result.exit_code != 0
        assert "No credentials found for: b" in result.output

    def test_macros(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text(SAMPLE)

        runner = CliRunner()
        listing = runner.invoke(main, ["macros", "--netrc", str(path)])
        body = runner.invoke(main, ["macros", "init", "--netrc", str(path)])
        missing = runner.invoke(main, ["macros", "nope", "--netrc", str(path)])

        assert listing.exit_code == 0
        assert "init" in listing.output
        assert body.exit_code == 0
        assert body.output == "\ncd /pub\nbin\n\n"
        assert missing.exit_code != 0

    def test_verbose_flag(self, tmp_path):
        path = tmp_path / "netrc"
        path.write_text(SAMPLE)

        runner = CliRunner()
        result = runner.invoke(main, ["-v", "check", "--netrc", str(path)])

        assert result.exit_code == 0
