from lawdesk.crud.quick_action import render_template


def test_replaces_known_tokens():
    content = render_template("Olá {cliente}, processo {processo}", {"cliente": "Maria", "processo": "123"})
    assert content == "Olá Maria, processo 123"


def test_keeps_unknown_tokens():
    assert render_template("Olá {cliente} {data}", {"cliente": "Maria"}) == "Olá Maria {data}"


def test_repeated_tokens():
    assert render_template("{a}-{a}", {"a": "x"}) == "x-x"


def test_empty_template():
    assert render_template(None, {"a": "x"}) == ""
    assert render_template("", {}) == ""
