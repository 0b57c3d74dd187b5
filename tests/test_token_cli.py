# file: tests/test_token_cli.py

"""
Tests for the token codec command-line front end.
"""

import json

import pytest
import yaml

from src.module2_token_codec.cli import main, PASSPHRASE_ENV, EXIT_OK, EXIT_CRYPTO_FAILURE, EXIT_USAGE
from src.module2_token_codec.testing_utils import tamper_token


PASSPHRASE = "0123456789ABCDEF"


def run_json(capsys, argv):
    rc = main(argv + ["--json"])
    out = capsys.readouterr().out
    return rc, json.loads(out)


class TestCli:

    def test_encrypt_then_decrypt(self, capsys):
        rc, out = run_json(capsys, ["encrypt", "--passphrase", PASSPHRASE, "--text", "hello world"])
        assert rc == EXIT_OK
        assert out["op"] == "encrypt"

        rc, out = run_json(capsys, ["decrypt", "--passphrase", PASSPHRASE, "--text", out["token"]])
        assert rc == EXIT_OK
        assert out["plaintext"] == "hello world"

    def test_plain_output(self, capsys):
        rc = main(["encrypt", "--passphrase", PASSPHRASE, "--text", "plain"])
        token = capsys.readouterr().out.strip()
        assert rc == EXIT_OK

        rc = main(["decrypt", "--passphrase", PASSPHRASE, "--text", token])
        assert rc == EXIT_OK
        assert capsys.readouterr().out.strip() == "plain"

    def test_passphrase_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv(PASSPHRASE_ENV, PASSPHRASE)
        rc, out = run_json(capsys, ["encrypt", "--text", "from env"])
        assert rc == EXIT_OK
        assert "token" in out

    def test_missing_passphrase(self, capsys, monkeypatch):
        monkeypatch.delenv(PASSPHRASE_ENV, raising=False)
        rc, out = run_json(capsys, ["encrypt", "--text", "x"])
        assert rc == EXIT_USAGE
        assert PASSPHRASE_ENV in out["error"]

    def test_short_passphrase(self, capsys):
        rc, out = run_json(capsys, ["encrypt", "--passphrase", "short", "--text", "x"])
        assert rc == EXIT_USAGE
        assert "at least 16" in out["error"]

    def test_unencodable_passphrase(self, capsys):
        rc, out = run_json(capsys, ["encrypt", "--passphrase", "\udcff" + "a" * 15, "--text", "x"])
        assert rc == EXIT_USAGE
        assert "UTF-8" in out["error"]

    def test_unencodable_passphrase_from_environment(self, capsys, monkeypatch):
        # surrogateescape form of a raw 0xff byte
        monkeypatch.setenv(PASSPHRASE_ENV, "\udcff" * 16)
        rc, out = run_json(capsys, ["encrypt", "--text", "x"])
        assert rc == EXIT_USAGE

    def test_null_logging_section(self, capsys, tmp_path):
        path = tmp_path / "token.yaml"
        path.write_text("logging: null\n")

        rc, out = run_json(capsys, ["encrypt", "--passphrase", PASSPHRASE, "--config", str(path), "--text", "x"])
        assert rc == EXIT_OK
        assert "token" in out

    def test_tampered_token(self, capsys):
        rc, out = run_json(capsys, ["encrypt", "--passphrase", PASSPHRASE, "--text", "hello world"])
        tampered = tamper_token(out["token"])

        rc, out = run_json(capsys, ["decrypt", "--passphrase", PASSPHRASE, "--text", tampered])
        assert rc == EXIT_CRYPTO_FAILURE
        assert out["kind"] == "tampered_input"

    def test_malformed_token(self, capsys):
        rc, out = run_json(capsys, ["decrypt", "--passphrase", PASSPHRASE, "--text", "not base64!!"])
        assert rc == EXIT_CRYPTO_FAILURE
        assert out["kind"] == "decryption_failure"

    def test_config_file(self, capsys, tmp_path):
        path = tmp_path / "token.yaml"
        path.write_text(yaml.safe_dump({"token": {"digest": "md5"}, "logging": {"level": "DEBUG"}}))

        rc, out = run_json(capsys, ["encrypt", "--passphrase", PASSPHRASE, "--config", str(path), "--text", "md5"])
        assert rc == EXIT_OK

        rc, out = run_json(capsys, ["decrypt", "--passphrase", PASSPHRASE, "--config", str(path), "--text", out["token"]])
        assert rc == EXIT_OK
        assert out["plaintext"] == "md5"

    def test_missing_config_file(self, capsys, tmp_path):
        rc, out = run_json(capsys, ["encrypt", "--passphrase", PASSPHRASE, "--config", str(tmp_path / "nope.yaml"), "--text", "x"])
        assert rc == EXIT_USAGE
        assert "not found" in out["error"]

    def test_invalid_operation(self):
        with pytest.raises(SystemExit):
            main(["sign", "--passphrase", PASSPHRASE])
