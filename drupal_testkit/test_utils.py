"""
Tests for common utilities, dood!
"""

import os

from .utils import jsonDumps, loadDotEnv, shorten


def test_json_dumps_compact_and_sorted():
    assert jsonDumps({"b": 1, "a": "ü"}) == '{"a":"ü","b":1}'


def test_json_dumps_indent_is_not_compact():
    assert jsonDumps({"a": 1}, indent=2) == '{\n  "a": 1\n}'


def test_shorten():
    assert shorten("short") == "short"
    shortened = shorten("x" * 50, maxLength=10)
    assert shortened == "xxxxxxx..."
    assert len(shortened) == 10


def test_load_dot_env(tmp_path, monkeypatch):
    """Dotenv parsing and environment population, dood!"""
    dotEnv = tmp_path / ".env"
    dotEnv.write_text(
        "\n".join(
            [
                "# comment",
                "",
                "DRUPAL_TESTKIT_A=1",
                "export DRUPAL_TESTKIT_B='two words'",
                'DRUPAL_TESTKIT_C="a=b"',
                "not a variable",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("DRUPAL_TESTKIT_A", "from env")
    for name in ("DRUPAL_TESTKIT_B", "DRUPAL_TESTKIT_C"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    values = loadDotEnv(str(dotEnv))

    assert values == {"DRUPAL_TESTKIT_A": "1", "DRUPAL_TESTKIT_B": "two words", "DRUPAL_TESTKIT_C": "a=b"}
    assert os.environ["DRUPAL_TESTKIT_A"] == "from env"
    assert os.environ["DRUPAL_TESTKIT_B"] == "two words"

    loadDotEnv(str(dotEnv), override=True)
    assert os.environ["DRUPAL_TESTKIT_A"] == "1"


def test_load_dot_env_without_populating(tmp_path, monkeypatch):
    monkeypatch.delenv("DRUPAL_TESTKIT_D", raising=False)
    dotEnv = tmp_path / ".env"
    dotEnv.write_text("DRUPAL_TESTKIT_D=4\n", encoding="utf-8")

    assert loadDotEnv(str(dotEnv), populateEnv=False) == {"DRUPAL_TESTKIT_D": "4"}
    assert "DRUPAL_TESTKIT_D" not in os.environ
