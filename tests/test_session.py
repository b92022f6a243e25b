import io

import pytest

from phrase_units import ConverterConfig, ConverterSession


@pytest.fixture
def session():
    return ConverterSession()


def test_kilometers_to_miles(session):
    output = session.handle("5 km to mi")

    assert output.startswith("5.0 kilometers is 3.1068")
    assert output.endswith(" miles")
    converted = float(output.split(" is ")[1].split()[0])
    assert converted == pytest.approx(5000.0 / 1609.35)


def test_celsius_to_fahrenheit(session):
    output = session.handle("100 c in f")

    head, tail = output.split(" is ")
    assert head == "100.0 degrees Celsius"
    value, name = tail.split(" ", 1)
    assert float(value) == pytest.approx(212.0)
    assert name == "degrees Fahrenheit"


def test_singular_display(session):
    assert session.handle("1 kg to g") == "1.0 kilogram is 1000.0 grams"
    assert session.handle("1000 g to kg") == "1000.0 grams is 1.0 kilogram"


def test_incompatible_units_message(session):
    assert session.handle("3 km to kg") == "Conversion from kilometers to kilograms is impossible"
    assert session.handle("-3 km to kg") == "Conversion from kilometers to kilograms is impossible"


def test_unknown_unit_messages(session):
    assert session.handle("5 furlongs to m") == "Conversion from ??? to meters is impossible"
    assert session.handle("5 m to parsecs") == "Conversion from meters to ??? is impossible"
    assert session.handle("5 a to b") == "Conversion from ??? to ??? is impossible"


def test_negative_quantity_message(session):
    assert session.handle("-1 m to ft") == "Length shouldn't be negative."
    assert session.handle("-2 lb in oz") == "Weight shouldn't be negative."
    output = session.handle("-40 degrees celsius to degrees fahrenheit")
    assert output.startswith("-40.0 degrees Celsius is ")
    assert float(output.split(" is ")[1].split()[0]) == pytest.approx(-40.0)


def test_exit_sentinel(session):
    assert session.handle("exit") is None


def test_run_processes_lines_until_exit():
    stdin = io.StringIO("5 km to mi\n\n3 km to kg\nexit\n1 m to cm\n")
    stdout = io.StringIO()
    session = ConverterSession(ConverterConfig(prompt="> "))

    handled = session.run(stdin, stdout)

    assert handled == 2
    lines = [line for line in stdout.getvalue().split("> ") if line]
    assert lines[0].startswith("5.0 kilometers is 3.1068")
    assert lines[1] == "Conversion from kilometers to kilograms is impossible\n"
    assert "centimeters" not in stdout.getvalue()


def test_run_stops_at_end_of_input():
    stdout = io.StringIO()
    handled = ConverterSession().run(io.StringIO("1 km to m\n"), stdout)

    assert handled == 1
    assert "1.0 kilometer is 1000.0 meters" in stdout.getvalue()


def test_run_propagates_malformed_numbers():
    with pytest.raises(ValueError):
        ConverterSession().run(io.StringIO("lots km to mi\n"), io.StringIO())


def test_config_controls_messages():
    config = ConverterConfig(unknown_placeholder="<unknown>", representative_quantity=1.0, strict_registry=True)
    session = ConverterSession(config)

    assert session.handle("3 km to nothing") == "Conversion from kilometer to <unknown> is impossible"
