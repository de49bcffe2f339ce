import pytest

from neologger.lib.tokens import exist, replace, substitute


def test_replace_every_occurrence() -> None:
    assert replace("%a% and %a%", "%a%", "x") == "x and x"


def test_replace_without_occurrence_returns_input() -> None:
    assert replace("plain text", "%a%", "x") == "plain text"


def test_replace_with_self_referential_value_terminates() -> None:
    assert replace("a%x%b%x%", "%x%", "[%x%]") == "a[%x%]b[%x%]"


def test_replace_with_empty_token_is_noop() -> None:
    assert replace("abc", "", "x") == "abc"


def test_replace_is_idempotent_when_value_lacks_token() -> None:
    once = replace("%t%-%t%", "%t%", "value")
    assert replace(once, "%t%", "value") == once


@pytest.mark.parametrize(
    "text, token",
    [
        ("hello %message%", "%message%"),
        ("hello", "%message%"),
        ("", "%message%"),
        ("abc", ""),
        ("%level%%level%", "%level%"),
    ],
)
def test_exist_agrees_with_replace(text: str, token: str) -> None:
    assert exist(text, token) == (replace(text, token, "") != text)


def test_substitute_does_not_rescan_values() -> None:
    out = substitute(
        "[%level%] %message%",
        {"%level%": lambda: "INFO", "%message%": lambda: "literal %level% here"},
    )
    assert out == "[INFO] literal %level% here"


def test_substitute_skips_resolvers_for_absent_tokens() -> None:
    calls: list[str] = []

    def login() -> str:
        calls.append("login")
        return "alice"

    out = substitute("%message%", {"%message%": lambda: "hi", "%login%": login})
    assert out == "hi"
    assert calls == []


def test_substitute_calls_resolver_once_per_template() -> None:
    calls: list[str] = []

    def login() -> str:
        calls.append("login")
        return "alice"

    assert substitute("%login%/%login%", {"%login%": login}) == "alice/alice"
    assert calls == ["login"]


def test_substitute_keeps_unknown_tokens() -> None:
    assert substitute("%other% %message%", {"%message%": lambda: "m"}) == "%other% m"


def test_substitute_prefers_longer_token() -> None:
    out = substitute("%ab%", {"%a": lambda: "short", "%ab%": lambda: "long"})
    assert out == "long"
