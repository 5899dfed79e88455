from wadl_dumper.template import render_path


def test_no_placeholders_is_identity():
    assert render_path("/plain/path", lambda name: "X") == "/plain/path"


def test_each_placeholder_resolved_by_name():
    values = {"id": "42", "oid": "7"}
    assert render_path("/users/{id}/orders/{oid}", values.__getitem__) == "/users/42/orders/7"


def test_replacement_is_not_rescanned():
    assert render_path("/{a}/{b}", lambda name: "{" + name.upper() + "}") == "/{A}/{B}"


def test_empty_and_nested_braces():
    seen = []

    def resolve(name):
        seen.append(name)
        return "X"

    assert render_path("/{}/{{inner}}/{a{b}", resolve) == "/{}/{X}/{aX"
    assert seen == ["inner", "b"]


def test_unbalanced_braces_untouched():
    assert render_path("/{open/close", lambda name: "X") == "/{open/close"
    assert render_path("/close}/{", lambda name: "X") == "/close}/{"


def test_name_may_contain_any_non_brace_characters():
    assert render_path("/{a/b c}", lambda name: f"<{name}>") == "/<a/b c>"
