import pytest
from pydantic import ValidationError

from core.response import build_envelope, classify_success_input, error, ok
from models.envelope import EnvelopeFields, ErrorEnvelope, Message, Payload, SuccessEnvelope


@pytest.mark.parametrize("value", ["Hello", "Life is good!"])
def test_ok_with_string_uses_it_as_message(value):
    env = ok(value)
    assert env.to_dict() == {"code": 200, "message": value}
    assert not env.has_data


@pytest.mark.parametrize("value", [None, ""])
def test_ok_without_message_defaults_to_success(value):
    assert ok(value).to_dict() == {"code": 200, "message": "Success"}


def test_ok_with_no_arguments():
    assert ok().to_dict() == {"code": 200, "message": "Success"}


@pytest.mark.parametrize("value", [[1, 2, 3], [], [{"id": 1}], ("a", "b")])
def test_ok_with_sequence_wraps_as_data(value):
    env = ok(value)
    assert env.code == 200
    assert env.message == "Success"
    assert env.data == value


def test_ok_passes_through_envelope_fields():
    countries = [{"name": "Ghana"}]
    env = ok({"code": 200, "message": "Countries data successfully returned.", "data": countries})
    assert env.to_dict() == {
        "code": 200,
        "message": "Countries data successfully returned.",
        "data": countries,
    }


def test_ok_envelope_fields_fill_missing_defaults():
    assert ok({"code": 201}).to_dict() == {"code": 201, "message": "Success"}
    assert ok({"message": "Created"}).to_dict() == {"code": 200, "message": "Created"}
    assert ok({"data": {"x": 1}}).to_dict() == {"code": 200, "message": "Success", "data": {"x": 1}}


def test_ok_envelope_fields_keep_explicit_null_data():
    assert ok({"data": None}).to_dict() == {"code": 200, "message": "Success", "data": None}


def test_ok_envelope_fields_ignore_other_keys():
    env = ok({"message": "Hi", "error": "boom", "extra": 1})
    assert isinstance(env, SuccessEnvelope)
    assert env.to_dict() == {"code": 200, "message": "Hi"}


@pytest.mark.parametrize("value", [{"name": "Ada", "id": 1}, {}, 42, 3.5, True])
def test_ok_with_other_values_wraps_whole_value(value):
    assert ok(value).to_dict() == {"code": 200, "message": "Success", "data": value}


@pytest.mark.parametrize("code", ["not-a-code", "201", True, 2.5])
def test_ok_with_non_integer_code_is_rejected(code):
    with pytest.raises(ValidationError):
        ok({"code": code})


def test_error_with_boolean_code_is_rejected():
    with pytest.raises(ValidationError):
        error("bad", True)


@pytest.mark.parametrize("value", [{3, 1, 2}, frozenset({"a", "b"})])
def test_ok_with_set_sends_a_list(value):
    env = ok(value)
    assert isinstance(env.data, list)
    assert sorted(env.data) == sorted(value)


def test_error_without_arguments():
    env = error()
    assert env.to_dict() == {"code": 400, "message": "Error", "isError": True}
    assert "data" not in env.to_dict()


def test_error_with_reason_and_code():
    assert error("Conflict!", 409).to_dict() == {"code": 409, "message": "Conflict!", "isError": True}
    assert error("Server Error", 500).code == 500
    assert error("An error occurred!").code == 400


@pytest.mark.parametrize("reason", ["", None])
def test_error_with_empty_reason_falls_back(reason):
    assert error(reason).to_dict() == {"code": 400, "message": "Error", "isError": True}


def test_build_envelope_defaults():
    assert build_envelope().to_dict() == {"code": 200, "message": "Success"}
    assert build_envelope(error="Nope").to_dict() == {"code": 400, "message": "Nope", "isError": True}
    assert build_envelope(code=0, message="").to_dict() == {"code": 200, "message": "Success"}


def test_build_envelope_error_drops_data():
    env = build_envelope(error="bad", data=[1, 2])
    assert isinstance(env, ErrorEnvelope)
    assert "data" not in env.to_dict()


@pytest.mark.parametrize(
    "env",
    [ok(), ok("x"), ok([1]), ok({"a": 1}), ok({"data": 1}), error(), error("x", 418)],
)
def test_envelope_never_has_both_data_and_error_flag(env):
    body = env.to_dict()
    assert not ("data" in body and "isError" in body)
    assert isinstance(body["code"], int)
    assert isinstance(body["message"], str)


def test_envelopes_are_immutable():
    env = ok([1])
    with pytest.raises(ValidationError):
        env.code = 500


@pytest.mark.parametrize(
    "value,expected",
    [
        ("hi", Message),
        (None, Message),
        ([1], Payload),
        ({"code": 1}, EnvelopeFields),
        ({"name": "x"}, Payload),
        (7, Payload),
    ],
)
def test_classify_success_input(value, expected):
    assert isinstance(classify_success_input(value), expected)


def test_explicit_variants_are_respected():
    # a string chosen as payload stays a payload
    assert ok(Payload(value="raw")).to_dict() == {"code": 200, "message": "Success", "data": "raw"}
    assert ok(Message(text="Hello")).to_dict() == {"code": 200, "message": "Hello"}
    assert ok(EnvelopeFields(code=202)).to_dict() == {"code": 202, "message": "Success"}
